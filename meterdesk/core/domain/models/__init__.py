# -*- coding: utf-8 -*-
from .binding_state import BindingState
from .catalog_entry import CatalogEntry
from .coded_value_domain import CodedValueDomain, VALUE_MAP_NULL
from .field_definition import FieldDefinition

__all__ = ["BindingState", "CatalogEntry", "CodedValueDomain", "FieldDefinition",
           "VALUE_MAP_NULL"]
