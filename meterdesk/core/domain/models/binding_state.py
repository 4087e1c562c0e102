# -*- coding: utf-8 -*-
"""
BindingState — lifecycle of the data panel bindings.

No QGIS dependency.
"""

from enum import Enum


class BindingState(Enum):
    """State of the BindingCoordinator.

    UNBOUND    — no layer published; panel is empty
    BOUND      — grid, text box and field picker show the projection
    REBINDING  — text binding detached while the label mode changes
    """
    UNBOUND   = "unbound"
    BOUND     = "bound"
    REBINDING = "rebinding"
