"""Tests for the main window's reaction to a replaced map (needs QGIS)."""
from types import SimpleNamespace

import pytest

pytest.importorskip("qgis.gui")

from meterdesk.document_commands import DocumentCommands  # noqa: E402
from meterdesk.main_window import MeterDeskMainWindow  # noqa: E402

from .test_document_commands import FakeProject  # noqa: E402


class Recorder:
    """Stands in for the QAction, status bar and coordinator."""

    def __init__(self):
        self.calls = []

    def setEnabled(self, flag):
        self.calls.append(('setEnabled', flag))

    def showMessage(self, text):
        self.calls.append(('showMessage', text))

    def on_document_replaced(self):
        self.calls.append(('on_document_replaced',))


def make_window(file_name):
    status_bar = Recorder()
    return SimpleNamespace(
        commands=DocumentCommands(FakeProject(file_name)),
        action_save=Recorder(),
        statusBar=lambda: status_bar,
        coordinator=Recorder(),
    )


def test_opened_document_enables_save_and_shows_its_name():
    window = make_window('/data/maps/network.qgz')
    MeterDeskMainWindow._on_map_replaced(window)

    assert window.action_save.calls == [('setEnabled', True)]
    assert window.statusBar().calls == [('showMessage', 'network.qgz')]
    assert window.coordinator.calls == [('on_document_replaced',)]


def test_new_document_disables_save():
    window = make_window('')
    MeterDeskMainWindow._on_map_replaced(window)

    assert window.action_save.calls == [('setEnabled', False)]
    assert window.statusBar().calls == [('showMessage', '')]
