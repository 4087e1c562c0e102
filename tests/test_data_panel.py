"""Tests for DataPanel driven by BindingCoordinator (needs PyQt5)."""
import os

import pytest

os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')
QtCore = pytest.importorskip("PyQt5.QtCore")
QtWidgets = pytest.importorskip("PyQt5.QtWidgets")

from meterdesk.core.application import BindingCoordinator  # noqa: E402
from meterdesk.core.attribute_engine import LayerLocator  # noqa: E402
from meterdesk.data_panel import DataPanel  # noqa: E402

from .conftest import feature_filter  # noqa: E402


@pytest.fixture(scope='module')
def qt_app():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def panel(qt_app):
    panel = DataPanel()
    yield panel
    panel.deleteLater()


def make_coordinator(panel, bound_field='STATUS', show_labels=False):
    locator = LayerLocator('wMeter', type_filter=feature_filter)
    return BindingCoordinator(locator, panel, bound_field=bound_field,
                              show_labels=show_labels, strict=True)


def test_bind_fills_grid_text_and_picker(panel, layer_collection):
    coordinator = make_coordinator(panel, bound_field='OBJECTID')
    coordinator.bind(layer_collection)

    assert panel.grid.model().rowCount() == 3
    assert panel.txt_record.text() == '101'
    assert [panel.cbo_fields.itemText(i) for i in range(panel.cbo_fields.count())] == \
        ['Meter Number', 'Status']
    assert panel.cbo_fields.itemData(1) == 'STATUS'


def test_label_toggle_rebinds_text_on_same_row(panel, layer_collection):
    coordinator = make_coordinator(panel)
    coordinator.bind(layer_collection)
    coordinator.select_row(102)
    assert panel.txt_record.text() == '2'

    coordinator.set_show_labels(True)
    assert panel.txt_record.text() == 'Inactive'
    assert coordinator.projection.current_row_id == 102
    assert panel.lbl_record.text() == 'Status:'

    coordinator.set_show_labels(False)
    assert panel.txt_record.text() == '2'


def test_unknown_code_stays_raw_in_text_box(panel, layer_collection):
    coordinator = make_coordinator(panel, show_labels=True)
    coordinator.bind(layer_collection)
    coordinator.select_row(103)
    assert panel.txt_record.text() == '9'


def test_rebind_releases_old_selection_model(panel, layer_collection):
    coordinator = make_coordinator(panel)
    coordinator.bind(layer_collection)
    first = panel.grid.selectionModel()
    destroyed = []
    first.destroyed.connect(lambda *args: destroyed.append(True))

    coordinator.bind(layer_collection)
    QtWidgets.QApplication.sendPostedEvents(None, QtCore.QEvent.DeferredDelete)

    assert panel.grid.selectionModel() is not first
    assert destroyed == [True]


def test_document_replaced_clears_panel(panel, layer_collection):
    coordinator = make_coordinator(panel)
    coordinator.bind(layer_collection)
    coordinator.on_document_replaced()

    assert panel.txt_record.text() == ''
    assert panel.lbl_record.text() == 'Record:'
    assert panel.cbo_fields.count() == 0


def test_set_labels_checked_is_silent(panel):
    toggled = []
    panel.labels_toggled.connect(toggled.append)
    panel.set_labels_checked(True)
    assert panel.chk_labels.isChecked()
    assert toggled == []
