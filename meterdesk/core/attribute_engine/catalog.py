# -*- coding: utf-8 -*-
"""
FieldCatalogExtractor — (label, name) pairs for the field picker.
"""

from typing import List

from ..domain.models.catalog_entry import CatalogEntry


class FieldCatalogExtractor:
    """Lists the fields of a feature layer that carry a meaningful alias."""

    @staticmethod
    def extract(layer) -> List[CatalogEntry]:
        """Return catalog entries in the table's natural field order.

        Fields whose alias equals their name are skipped. A new list is built
        on every call; nothing is cached.
        """
        return FieldCatalogExtractor.extract_from_fields(layer.attribute_table().fields())

    @staticmethod
    def extract_from_fields(fields) -> List[CatalogEntry]:
        return [
            CatalogEntry(label=f.alias, name=f.name)
            for f in fields
            if f.alias != f.name
        ]
