# -*- coding: utf-8 -*-
"""
CodedValueDomain — finite mapping from stored codes to display labels.

No QGIS dependency. The QGIS "Value Map" editor widget configuration is
accepted as plain Python data by ``from_value_map``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..errors import DomainResolutionMiss

# Value QGIS stores in a Value Map to represent NULL
VALUE_MAP_NULL = '{2839923C-8B7D-419E-B84B-CA2FE9B80EC7}'


@dataclass
class CodedValueDomain:
    """Code → label lookup for one field.

    Codes are matched exactly first, then by their text form, so an integer
    attribute value ``1`` resolves against a Value Map key stored as ``"1"``.

    Attributes:
        name:  Domain name (the field name when built from a Value Map).
        codes: Mapping of stored code to human-readable label, in the order
               the labels should be offered to the user.
    """

    name: str
    codes: Dict[Any, str] = field(default_factory=dict)

    def __post_init__(self):
        self._by_text = {str(code): label for code, label in self.codes.items()}
        self._by_label = {}
        for code, label in self.codes.items():
            self._by_label.setdefault(label, code)

    # ------------------------------------------------------------------ #
    #  Lookup
    # ------------------------------------------------------------------ #

    def label_for(self, code) -> str:
        """Return the label for ``code``.

        Raises:
            DomainResolutionMiss: the code is not part of the domain.
        """
        if code is None:
            raise DomainResolutionMiss(self.name, code)
        try:
            return self.codes[code]
        except (KeyError, TypeError):
            pass
        try:
            return self._by_text[str(code)]
        except KeyError:
            raise DomainResolutionMiss(self.name, code) from None

    def code_for(self, label) -> Optional[Any]:
        """Return the code whose label is ``label``, or None."""
        return self._by_label.get(label)

    def __contains__(self, code) -> bool:
        try:
            self.label_for(code)
        except DomainResolutionMiss:
            return False
        return True

    def __len__(self) -> int:
        return len(self.codes)

    # ------------------------------------------------------------------ #
    #  Factory helpers
    # ------------------------------------------------------------------ #

    @classmethod
    def from_value_map(cls, name: str, value_map) -> 'CodedValueDomain':
        """Build a domain from a QGIS Value Map ``config()['map']`` entry.

        QGIS stores the map as label → value, either as one dict (older
        projects) or as a list of single-entry dicts (QGIS 3). The NULL
        placeholder entry is skipped.
        """
        if isinstance(value_map, dict):
            pairs = list(value_map.items())
        else:
            pairs = [item for entry in (value_map or []) for item in entry.items()]

        codes = {}
        for label, value in pairs:
            if value == VALUE_MAP_NULL:
                continue
            codes.setdefault(value, label)
        return cls(name=name, codes=codes)
