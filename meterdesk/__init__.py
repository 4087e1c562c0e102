# -*- coding: utf-8 -*-
"""
MeterDesk — a PyQGIS map viewer with an attribute panel for one feature layer.

Run with ``python -m meterdesk [project.qgz]`` or the ``meterdesk`` script.
The QGIS-free parts live in ``meterdesk.core``.
"""

__version__ = '0.1.0'
