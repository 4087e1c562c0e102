# -*- coding: utf-8 -*-
from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntry:
    """One item of the field picker: what the user reads, what the code uses."""

    label: str
    name: str

    def __str__(self) -> str:
        return self.label
