# -*- coding: utf-8 -*-
"""
Attribute Table Model Module
Qt item model over a DomainAwareProjection, shared by the grid and the
record text box (through QDataWidgetMapper).
"""

from PyQt5.QtCore import QAbstractTableModel, QModelIndex, Qt

from .core.attribute_engine.projection import LABELS_CHANGED, ROWS_RESET, VALUE_CHANGED
from .core.domain.errors import MeterDeskError
from .logging_config import get_logger

logger = get_logger('Model')


class AttributeTableModel(QAbstractTableModel):
    """One row per record, one column per field, headers from field aliases.

    The model holds no values of its own: every read goes through the
    projection, so a label-mode switch only needs a repaint.
    """

    def __init__(self, projection, parent=None):
        super().__init__(parent)
        self._projection = projection
        self._fields = projection.fields
        projection.subscribe(self._on_projection_changed)

    @property
    def projection(self):
        return self._projection

    def release(self):
        """Stop listening to the projection (called when the panel unbinds)."""
        self._projection.unsubscribe(self._on_projection_changed)

    # ------------------------------------------------------------------ #
    #  Lookup helpers
    # ------------------------------------------------------------------ #

    def row_id_for(self, index):
        """Row identifier of the record shown at ``index`` (or row number)."""
        row = index.row() if isinstance(index, QModelIndex) else index
        return self._projection.row_id_at(row)

    def field_name_at(self, column):
        return self._fields[column].name

    # ------------------------------------------------------------------ #
    #  QAbstractTableModel
    # ------------------------------------------------------------------ #

    def rowCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return self._projection.row_count

    def columnCount(self, parent=QModelIndex()):
        if parent.isValid():
            return 0
        return len(self._fields)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        row_id = self._projection.row_id_at(index.row())
        field = self._fields[index.column()]

        if role == Qt.DisplayRole:
            return self._projection.display_text(row_id, field.name)
        if role == Qt.EditRole:
            return self._projection.display_value(row_id, field.name)
        if role == Qt.ToolTipRole and field.has_domain and self._projection.show_labels:
            return f"Code: {self._projection.raw_value(row_id, field.name)}"
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Horizontal:
            return self._fields[section].alias
        return str(self._projection.row_id_at(section))

    def flags(self, index):
        if not index.isValid():
            return Qt.NoItemFlags
        return Qt.ItemIsEnabled | Qt.ItemIsSelectable | Qt.ItemIsEditable

    def setData(self, index, value, role=Qt.EditRole):
        """Write an edited cell back to the layer as a raw value."""
        if role != Qt.EditRole or not index.isValid():
            return False
        row_id = self._projection.row_id_at(index.row())
        field_name = self._fields[index.column()].name
        try:
            self._projection.set_value(row_id, field_name, value)
        except (KeyError, MeterDeskError) as e:
            logger.warning(f"Edit of {field_name!r} on row {row_id!r} rejected: {e}")
            return False
        return True

    # ------------------------------------------------------------------ #
    #  Projection notifications
    # ------------------------------------------------------------------ #

    def _on_projection_changed(self, kind, row_id=None, field_name=None):
        if kind == VALUE_CHANGED:
            row = self._projection.index_of(row_id)
            column = self._projection.column_of(field_name)
            if row >= 0 and column >= 0:
                cell = self.index(row, column)
                self.dataChanged.emit(cell, cell)
        elif kind == LABELS_CHANGED:
            if self.rowCount() and self.columnCount():
                self.dataChanged.emit(
                    self.index(0, 0),
                    self.index(self.rowCount() - 1, self.columnCount() - 1)
                )
        elif kind == ROWS_RESET:
            self.beginResetModel()
            self._fields = self._projection.fields
            self.endResetModel()
