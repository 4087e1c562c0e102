# -*- coding: utf-8 -*-
"""
Status bar text of the main window.
"""

import os


def format_coordinates(x, y, precision=2, units=''):
    """Cursor position in map units, e.g. ``'X: 36.82  Y: -1.29  degrees'``."""
    text = f"X: {x:.{precision}f}  Y: {y:.{precision}f}"
    if units:
        text += f"  {units}"
    return text


def document_label(file_name):
    """File name shown for the open document; empty when there is none."""
    if not file_name:
        return ''
    return os.path.basename(file_name)
