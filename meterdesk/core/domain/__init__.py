# -*- coding: utf-8 -*-
"""
Domain package — pure Python types for attribute binding.

Rules:
  - No QGIS imports anywhere in this package
  - No Qt imports anywhere in this package

Public API:
    BindingState      — enum: UNBOUND | BOUND | REBINDING
    CatalogEntry      — value object: (label, name) for the field picker
    CodedValueDomain  — code → label mapping of one field
    FieldDefinition   — name, alias and optional domain of one field
    errors            — LayerNotFound, DomainResolutionMiss, BindingStateError,
                        UnexpectedStoreError, ConfigError
"""

from .errors import (
    MeterDeskError,
    LayerNotFound,
    DomainResolutionMiss,
    BindingStateError,
    UnexpectedStoreError,
    ConfigError,
)
from .models.binding_state import BindingState
from .models.catalog_entry import CatalogEntry
from .models.coded_value_domain import CodedValueDomain
from .models.field_definition import FieldDefinition

__all__ = [
    "MeterDeskError",
    "LayerNotFound",
    "DomainResolutionMiss",
    "BindingStateError",
    "UnexpectedStoreError",
    "ConfigError",
    "BindingState",
    "CatalogEntry",
    "CodedValueDomain",
    "FieldDefinition",
]
