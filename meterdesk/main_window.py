# -*- coding: utf-8 -*-
"""
Main window of MeterDesk: map canvas, File menu, status bar with the cursor
position, and the attribute panel of the target layer in a dock.
"""

import os
import sys

from qgis.PyQt.QtCore import Qt
from qgis.PyQt.QtWidgets import (
    QAction, QDockWidget, QLabel, QMainWindow, QMessageBox
)
from qgis.core import QgsApplication, QgsProject, QgsUnitTypes
from qgis.gui import QgsLayerTreeMapCanvasBridge, QgsMapCanvas

from .config import load_config
from .core.application import BindingCoordinator, STATUS_ERROR, STATUS_NOT_FOUND
from .core.attribute_engine import LayerLocator
from .core.domain.errors import ConfigError
from .data_panel import DataPanel
from .document_commands import DocumentCommands
from .logging_config import ROOT_LOGGER, get_logger, setup_logger
from .qgis_layers import QgisLayerCollection, is_feature_layer
from .status_text import document_label, format_coordinates

logger = get_logger('UI')


class MeterDeskMainWindow(QMainWindow):
    """Map viewer with a data panel bound to one feature layer."""

    def __init__(self, config, project=None, parent=None):
        super().__init__(parent)
        self.config = config
        self.project = project or QgsProject.instance()

        self.setWindowTitle("MeterDesk")
        self.resize(1100, 750)

        # Map canvas
        self.canvas = QgsMapCanvas(self)
        self.canvas.setCanvasColor(Qt.white)
        self.setCentralWidget(self.canvas)
        self._bridge = QgsLayerTreeMapCanvasBridge(self.project.layerTreeRoot(), self.canvas)

        self.commands = DocumentCommands(self.project, self)
        self._build_menu()

        # Status bar
        self.lbl_xy = QLabel("")
        self.statusBar().addPermanentWidget(self.lbl_xy)

        # Data panel dock
        self.data_panel = DataPanel(self)
        dock = QDockWidget(f"Attributes — {config.target_layer_name}", self)
        dock.setWidget(self.data_panel)
        self.addDockWidget(Qt.BottomDockWidgetArea, dock)

        locator = LayerLocator(config.target_layer_name, type_filter=is_feature_layer)
        self.coordinator = BindingCoordinator(
            locator, self.data_panel,
            bound_field=config.bound_field,
            show_labels=config.show_domain_labels,
            strict=config.strict_binding
        )
        self.data_panel.set_labels_checked(config.show_domain_labels)

        self.data_panel.show_grid_requested.connect(self._on_show_grid)
        self.data_panel.labels_toggled.connect(self._on_labels_toggled)
        self.data_panel.row_selected.connect(self._on_row_selected)

        self.canvas.xyCoordinates.connect(self._on_mouse_move)

        # Every way the document can be replaced invalidates the data panel
        self.project.cleared.connect(self._on_map_replaced)
        self.project.readProject.connect(self._on_map_replaced)
        self.project.fileNameChanged.connect(self._on_map_replaced)

    # ------------------------------------------------------------------ #
    #  Menu
    # ------------------------------------------------------------------ #

    def _build_menu(self):
        menu = self.menuBar().addMenu("&File")

        self.action_new = QAction("&New Document", self)
        self.action_new.triggered.connect(self.commands.new_document)
        menu.addAction(self.action_new)

        self.action_open = QAction("&Open Document...", self)
        self.action_open.triggered.connect(lambda: self.commands.open_document())
        menu.addAction(self.action_open)

        self.action_save = QAction("&Save Document", self)
        self.action_save.triggered.connect(self.commands.save_document)
        # No document yet
        self.action_save.setEnabled(False)
        menu.addAction(self.action_save)

        self.action_save_as = QAction("Save Document &As...", self)
        self.action_save_as.triggered.connect(lambda: self.commands.save_document_as())
        menu.addAction(self.action_save_as)

        menu.addSeparator()

        self.action_exit = QAction("E&xit", self)
        self.action_exit.triggered.connect(self.close)
        menu.addAction(self.action_exit)

    # ------------------------------------------------------------------ #
    #  Map events
    # ------------------------------------------------------------------ #

    def _on_map_replaced(self, *args):
        """Update the Save action and status bar, and unbind the data panel."""
        self.action_save.setEnabled(self.commands.can_save)
        self.statusBar().showMessage(document_label(self.commands.document_name))
        self.coordinator.on_document_replaced()

    def _on_mouse_move(self, point):
        units = QgsUnitTypes.toString(self.canvas.mapUnits())
        self.lbl_xy.setText(
            format_coordinates(point.x(), point.y(), self.config.coordinate_precision, units)
        )

    # ------------------------------------------------------------------ #
    #  Data panel events
    # ------------------------------------------------------------------ #

    def _on_show_grid(self):
        result = self.coordinator.bind(QgisLayerCollection(self.project))
        if result['status'] == STATUS_ERROR:
            QMessageBox.warning(self, "Attribute Data", result['message'])
        elif result['status'] == STATUS_NOT_FOUND:
            self.data_panel.show_message(
                f"Layer '{self.config.target_layer_name}' is not loaded in this map."
            )
        else:
            self.data_panel.show_message(result['message'])

    def _on_labels_toggled(self, checked):
        if self.coordinator.is_bound:
            self.coordinator.set_show_labels(checked)
        else:
            self.coordinator.default_show_labels = checked

    def _on_row_selected(self, row_id):
        self.coordinator.select_row(row_id, QgisLayerCollection(self.project))


def main(argv=None):
    """Start the MeterDesk application.

    An optional first argument is a project file to open at start-up.
    """
    argv = list(sys.argv if argv is None else argv)

    try:
        config = load_config()
    except ConfigError as e:
        sys.stderr.write(f"{e}\n")
        return 2
    setup_logger(ROOT_LOGGER, config.log_file, config.logging_level)

    QgsApplication.setPrefixPath(os.environ.get('QGIS_PREFIX_PATH', '/usr'), True)
    app = QgsApplication(argv, True)
    app.initQgis()

    window = MeterDeskMainWindow(config)
    window.show()
    if len(argv) > 1:
        window.commands.open_document(argv[1])

    exit_code = app.exec_()
    app.exitQgis()
    return exit_code
