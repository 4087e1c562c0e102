# -*- coding: utf-8 -*-
"""
Core package — Clean Architecture layers for MeterDesk attribute binding.

Structure:
    core/domain/            — Domain types and errors (pure Python, no QGIS)
    core/attribute_engine/  — Layer lookup, domain-aware projection, field catalog
    core/application/       — BindingCoordinator (data panel use case)
"""
