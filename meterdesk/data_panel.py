# -*- coding: utf-8 -*-
"""
Data panel for the target layer: attribute grid, record text box bound to
one column, and a drop-down of the aliased fields.

The panel is the view of BindingCoordinator; it never locates layers or
builds projections itself. User actions are re-emitted as signals.
"""

from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import (
    QAbstractItemView, QCheckBox, QComboBox, QDataWidgetMapper, QHBoxLayout,
    QLabel, QLineEdit, QPushButton, QTableView, QVBoxLayout, QWidget
)

from .attribute_table_model import AttributeTableModel


class DataPanel(QWidget):
    """Grid + record text box + field picker for one projection.

    Emits:
        show_grid_requested()    — "Show Grid" clicked
        labels_toggled(bool)     — "Show domain labels" toggled
        row_selected(object)     — a grid cell was clicked; carries the row id
    """

    show_grid_requested = pyqtSignal()
    labels_toggled      = pyqtSignal(bool)
    row_selected        = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._model = None

        layout = QVBoxLayout(self)

        # Controls row
        controls = QHBoxLayout()

        self.btn_grid = QPushButton("Show Grid")
        self.btn_grid.clicked.connect(self.show_grid_requested.emit)
        controls.addWidget(self.btn_grid)

        self.chk_labels = QCheckBox("Show domain labels")
        self.chk_labels.toggled.connect(self.labels_toggled.emit)
        controls.addWidget(self.chk_labels)

        controls.addWidget(QLabel("Field:"))
        self.cbo_fields = QComboBox()
        self.cbo_fields.setMinimumWidth(150)
        self.cbo_fields.activated.connect(self._on_field_picked)
        controls.addWidget(self.cbo_fields)

        controls.addStretch()
        layout.addLayout(controls)

        # Record row
        record = QHBoxLayout()
        self.lbl_record = QLabel("Record:")
        record.addWidget(self.lbl_record)
        self.txt_record = QLineEdit()
        self.txt_record.setReadOnly(True)
        record.addWidget(self.txt_record)
        layout.addLayout(record)

        # Grid
        self.grid = QTableView()
        self.grid.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.grid.setSelectionMode(QAbstractItemView.SingleSelection)
        self.grid.clicked.connect(self._on_cell_clicked)
        layout.addWidget(self.grid, 1)

        self.lbl_status = QLabel("")
        layout.addWidget(self.lbl_status)

        self._mapper = QDataWidgetMapper(self)
        self._mapper.setSubmitPolicy(QDataWidgetMapper.ManualSubmit)

    # ------------------------------------------------------------------ #
    #  View interface (called by BindingCoordinator)
    # ------------------------------------------------------------------ #

    def show_grid(self, projection):
        self._release_model()
        self._model = AttributeTableModel(projection, self)
        self._set_grid_model(self._model)
        self._mapper.setModel(self._model)
        self.grid.resizeColumnsToContents()
        if projection.current_index >= 0:
            self.grid.selectRow(projection.current_index)

    def attach_text(self, projection, field_name):
        self._mapper.addMapping(self.txt_record, projection.column_of(field_name))
        self._mapper.setCurrentIndex(projection.current_index)
        self.lbl_record.setText(f"{projection.field(field_name).alias}:")

    def detach_text(self):
        self._mapper.clearMapping()
        self.txt_record.clear()

    def show_row(self, index):
        self._mapper.setCurrentIndex(index)

    def set_field_items(self, entries):
        self.cbo_fields.clear()
        for entry in entries:
            self.cbo_fields.addItem(entry.label, entry.name)

    def clear(self):
        self._mapper.clearMapping()
        self._set_grid_model(None)
        self._release_model()
        self.txt_record.clear()
        self.lbl_record.setText("Record:")
        self.cbo_fields.clear()
        self.lbl_status.clear()

    # ------------------------------------------------------------------ #
    #  Helpers for the main window
    # ------------------------------------------------------------------ #

    def show_message(self, text):
        self.lbl_status.setText(text)

    def selected_field_name(self):
        """Internal name of the field chosen in the drop-down, or None."""
        return self.cbo_fields.currentData()

    def set_labels_checked(self, flag):
        """Set the checkbox without emitting labels_toggled."""
        self.chk_labels.blockSignals(True)
        self.chk_labels.setChecked(bool(flag))
        self.chk_labels.blockSignals(False)

    def _set_grid_model(self, model):
        # setModel() does not delete the view's previous selection model
        old_selection = self.grid.selectionModel()
        self.grid.setModel(model)
        if old_selection is not None:
            old_selection.deleteLater()

    def _release_model(self):
        if self._model is not None:
            self._model.release()
            self._model.deleteLater()
            self._model = None

    # ------------------------------------------------------------------ #
    #  Slots
    # ------------------------------------------------------------------ #

    def _on_cell_clicked(self, index):
        if self._model is None or not index.isValid():
            return
        self.grid.selectRow(index.row())
        self.row_selected.emit(self._model.row_id_for(index))

    def _on_field_picked(self, combo_index):
        if self._model is None:
            return
        column = self._model.projection.column_of(self.cbo_fields.itemData(combo_index))
        if column < 0:
            return
        row = max(self.grid.currentIndex().row(), 0)
        self.grid.scrollTo(self._model.index(row, column), QAbstractItemView.PositionAtCenter)
