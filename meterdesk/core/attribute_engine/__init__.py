# -*- coding: utf-8 -*-
"""
Attribute engine package — layer lookup, projection and field catalog.

Public API:
    LayerLocator           — finds and caches the target feature layer
    DomainAwareProjection  — table view with switchable domain labels
    ProjectedRow           — one record of a projection
    FieldCatalogExtractor  — (label, name) pairs for aliased fields
"""

from .catalog import FieldCatalogExtractor
from .locator import LayerLocator
from .projection import DomainAwareProjection, ProjectedRow

__all__ = ["LayerLocator", "DomainAwareProjection", "ProjectedRow", "FieldCatalogExtractor"]
