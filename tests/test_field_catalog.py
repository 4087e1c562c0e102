"""Tests for FieldCatalogExtractor."""
from meterdesk.core.attribute_engine import FieldCatalogExtractor
from meterdesk.core.domain import CatalogEntry, FieldDefinition

from .conftest import FakeLayer, FakeTable


def test_only_aliased_fields_are_listed():
    table = FakeTable(
        [FieldDefinition('id', 'id'), FieldDefinition('stat', 'Status'), FieldDefinition('x', 'x')],
        []
    )
    assert FieldCatalogExtractor.extract(FakeLayer('wMeter', table)) == [CatalogEntry('Status', 'stat')]


def test_catalog_keeps_field_order(meter_layer):
    entries = FieldCatalogExtractor.extract(meter_layer)
    assert [(e.label, e.name) for e in entries] == [
        ('Meter Number', 'METER_NO'),
        ('Status', 'STATUS'),
    ]


def test_label_never_equals_name(meter_layer):
    assert all(e.label != e.name for e in FieldCatalogExtractor.extract(meter_layer))


def test_each_call_returns_a_fresh_list(meter_layer):
    first = FieldCatalogExtractor.extract(meter_layer)
    first.clear()
    assert len(FieldCatalogExtractor.extract(meter_layer)) == 2


def test_schema_changes_are_picked_up():
    table = FakeTable([FieldDefinition('a')], [])
    layer = FakeLayer('wMeter', table)
    assert FieldCatalogExtractor.extract(layer) == []

    table._fields.append(FieldDefinition('b', 'Bravo'))
    assert FieldCatalogExtractor.extract(layer) == [CatalogEntry('Bravo', 'b')]
