"""
Pytest configuration and fixtures for MeterDesk tests.

The fakes below stand in for QGIS layers and attribute tables so the
attribute engine and the coordinator can be tested without a QGIS install.
"""
import pytest

from meterdesk.core.domain import CodedValueDomain, FieldDefinition


class FakeTable:
    """In-memory attribute table recording every write."""

    def __init__(self, fields, rows):
        self._fields = list(fields)
        self._rows = {row_id: dict(values) for row_id, values in rows}
        self._order = [row_id for row_id, _ in rows]
        self.writes = []
        self.fetch_count = 0

    def fields(self):
        return list(self._fields)

    def rows(self):
        self.fetch_count += 1
        for row_id in self._order:
            yield row_id, dict(self._rows[row_id])

    def write_value(self, row_id, field_name, value):
        self.writes.append((row_id, field_name, value))
        self._rows[row_id][field_name] = value


class FakeLayer:
    """Layer handle as seen by LayerLocator."""

    def __init__(self, dataset_name, table=None, feature=True):
        self.dataset_name = dataset_name
        self.table = table or FakeTable([FieldDefinition('OBJECTID')], [])
        self.is_feature_layer = feature

    def attribute_table(self):
        return self.table

    def __repr__(self):
        return f"FakeLayer({self.dataset_name!r})"


class BrokenCollection:
    """Layer collection whose enumeration fails."""

    def __iter__(self):
        raise RuntimeError("layer enumerator failed")


class FakeView:
    """Records the calls BindingCoordinator makes on its view."""

    def __init__(self):
        self.calls = []
        self.projection = None
        self.text_field = None
        self.text_row = None
        self.field_items = []

    def show_grid(self, projection):
        self.calls.append('show_grid')
        self.projection = projection

    def attach_text(self, projection, field_name):
        self.calls.append('attach_text')
        self.text_field = field_name
        self.text_row = projection.current_index

    def detach_text(self):
        self.calls.append('detach_text')
        self.text_field = None

    def show_row(self, index):
        self.calls.append('show_row')
        self.text_row = index

    def set_field_items(self, entries):
        self.calls.append('set_field_items')
        self.field_items = list(entries)

    def clear(self):
        self.calls.append('clear')
        self.projection = None
        self.field_items = []


def feature_filter(layer):
    return layer.is_feature_layer


@pytest.fixture
def status_domain():
    return CodedValueDomain('STATUS', {1: 'Active', 2: 'Inactive'})


@pytest.fixture
def meter_table(status_domain):
    """Three meters with a coded STATUS field, one holding an unknown code."""
    fields = [
        FieldDefinition('OBJECTID'),
        FieldDefinition('METER_NO', 'Meter Number'),
        FieldDefinition('STATUS', 'Status', domain=status_domain),
        FieldDefinition('ZONE'),
    ]
    rows = [
        (101, {'OBJECTID': 101, 'METER_NO': 'M-001', 'STATUS': 1, 'ZONE': 'A'}),
        (102, {'OBJECTID': 102, 'METER_NO': 'M-002', 'STATUS': 2, 'ZONE': 'B'}),
        (103, {'OBJECTID': 103, 'METER_NO': 'M-003', 'STATUS': 9, 'ZONE': None}),
    ]
    return FakeTable(fields, rows)


@pytest.fixture
def meter_layer(meter_table):
    return FakeLayer('wMeter', meter_table)


@pytest.fixture
def layer_collection(meter_layer):
    return [
        FakeLayer('wPipe'),
        FakeLayer('wMeter', feature=False),
        meter_layer,
        FakeLayer('wMeter'),
    ]


@pytest.fixture
def fake_view():
    return FakeView()
