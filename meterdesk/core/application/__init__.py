# -*- coding: utf-8 -*-
"""
Application layer — binding use case of the data panel.

The coordinator:
  - Receives the current layer collection from the UI
  - Orchestrates LayerLocator, DomainAwareProjection and FieldCatalogExtractor
  - Returns a plain dict result from ``bind``
  - Never shows a QMessageBox; the data panel decides what to tell the user

Layer position:
    UI (DataPanel / MainWindow)
      ↓ layer collection + primitive types
    BindingCoordinator (this package)
      ↓ domain objects
    Attribute engine (locator, projection, catalog)
      ↓
    Infrastructure (qgis_layers adapters)
"""

from .binding_coordinator import (
    BindingCoordinator,
    STATUS_BOUND,
    STATUS_NOT_FOUND,
    STATUS_ERROR,
)

__all__ = [
    'BindingCoordinator',
    'STATUS_BOUND',
    'STATUS_NOT_FOUND',
    'STATUS_ERROR',
]
