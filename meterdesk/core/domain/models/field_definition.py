# -*- coding: utf-8 -*-
"""
FieldDefinition — schema of one attribute column.

No QGIS dependency.
"""

from dataclasses import dataclass
from typing import Optional

from .coded_value_domain import CodedValueDomain


@dataclass
class FieldDefinition:
    """One field of an attribute table.

    Attributes:
        name:   Internal field name as stored in the dataset.
        alias:  Display name. Equal to ``name`` when the field has no alias.
        domain: Optional coded-value domain interpreting the stored values.
    """

    name: str
    alias: str = ''
    domain: Optional[CodedValueDomain] = None

    def __post_init__(self):
        if not self.alias:
            self.alias = self.name

    @property
    def has_alias(self) -> bool:
        """True when the alias carries a meaningful, different label."""
        return self.alias != self.name

    @property
    def has_domain(self) -> bool:
        return self.domain is not None
