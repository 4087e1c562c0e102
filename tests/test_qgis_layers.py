"""Tests for the QGIS adapters (needs a QGIS installation)."""
import pytest

qgis_core = pytest.importorskip("qgis.core")

from meterdesk.core.attribute_engine import LayerLocator  # noqa: E402
from meterdesk.qgis_layers import (  # noqa: E402
    QgisAttributeTable,
    QgisLayerCollection,
    is_feature_layer,
)


@pytest.fixture(scope='module')
def qgis_app():
    app = qgis_core.QgsApplication([], False)
    app.initQgis()
    yield app
    app.exitQgis()


@pytest.fixture
def meter_layer(qgis_app):
    layer = qgis_core.QgsVectorLayer(
        "Point?crs=EPSG:4326&field=METER_NO:string&field=STATUS:integer",
        "wMeter", "memory"
    )
    layer.setFieldAlias(0, 'Meter Number')
    layer.setEditorWidgetSetup(1, qgis_core.QgsEditorWidgetSetup(
        'ValueMap', {'map': [{'Active': '1'}, {'Inactive': '2'}]}
    ))
    provider = layer.dataProvider()
    for meter_no, status in (('M-001', 1), ('M-002', 2)):
        feature = qgis_core.QgsFeature(layer.fields())
        feature.setAttributes([meter_no, status])
        feature.setGeometry(qgis_core.QgsGeometry.fromPointXY(qgis_core.QgsPointXY(36.8, -1.3)))
        provider.addFeature(feature)
    return layer


@pytest.fixture
def project(qgis_app, meter_layer):
    project = qgis_core.QgsProject()
    table_only = qgis_core.QgsVectorLayer("None?field=NAME:string", "wMeter", "memory")
    project.addMapLayer(table_only)
    project.addMapLayer(meter_layer)
    yield project
    project.clear()


def test_fields_carry_aliases_and_value_map_domains(meter_layer):
    fields = QgisAttributeTable(meter_layer).fields()
    assert [f.name for f in fields] == ['OBJECTID', 'METER_NO', 'STATUS']
    assert fields[1].alias == 'Meter Number'
    assert fields[2].domain.label_for(1) == 'Active'


def test_rows_are_keyed_by_feature_id(meter_layer):
    rows = list(QgisAttributeTable(meter_layer).rows())
    assert len(rows) == 2
    row_id, values = rows[0]
    assert values['OBJECTID'] == row_id
    assert values['METER_NO'] == 'M-001'


def test_write_value_commits(meter_layer):
    table = QgisAttributeTable(meter_layer)
    row_id = next(table.rows())[0]
    table.write_value(row_id, 'STATUS', 2)
    assert dict(table.rows())[row_id]['STATUS'] == 2
    assert not meter_layer.isEditable()


def test_locator_skips_non_spatial_layers(project, meter_layer):
    locator = LayerLocator('wMeter', type_filter=is_feature_layer)
    handle = locator.locate(QgisLayerCollection(project))
    assert handle is not None
    assert handle.map_layer is meter_layer
