# -*- coding: utf-8 -*-
"""
Error taxonomy for the attribute-binding subsystem.

No QGIS dependency.

    MeterDeskError
     ├── LayerNotFound         — target dataset absent from the layer collection
     ├── DomainResolutionMiss  — stored code has no label (also a KeyError)
     ├── BindingStateError     — rebind requested outside BOUND / REBINDING
     ├── UnexpectedStoreError  — any other failure reading layers or attributes
     └── ConfigError           — configuration file could not be parsed
"""


class MeterDeskError(Exception):
    """Base class for all MeterDesk errors."""


class LayerNotFound(MeterDeskError):
    """Raised when no feature layer matches the target dataset name.

    Attributes:
        target_name -- dataset browse-name that was searched for
    """

    def __init__(self, target_name):
        self.target_name = target_name
        super().__init__(f"No feature layer named {target_name!r} in the current map.")


class DomainResolutionMiss(MeterDeskError, KeyError):
    """Raised when a coded-value domain has no label for a stored code."""

    def __init__(self, domain_name, code):
        self.domain_name = domain_name
        self.code = code
        super().__init__(f"Domain {domain_name!r} has no label for code {code!r}")

    def __str__(self):
        return self.args[0]


class BindingStateError(MeterDeskError):
    """Raised when a rebind is requested while the panel is not bound.

    Attributes:
        state     -- BindingState at the time of the request
        operation -- name of the rejected operation
    """

    def __init__(self, state, operation):
        self.state = state
        self.operation = operation
        super().__init__(f"Cannot {operation} while binding state is {state.value}")


class UnexpectedStoreError(MeterDeskError):
    """Wraps any failure raised by the layer collection or attribute store.

    The original exception is available as ``__cause__`` and ``original``.
    """

    def __init__(self, message, original=None):
        self.original = original
        super().__init__(message)


class ConfigError(MeterDeskError):
    """Raised when a configuration file exists but cannot be read."""
