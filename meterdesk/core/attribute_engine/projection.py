# -*- coding: utf-8 -*-
"""
DomainAwareProjection — read view over an attribute table that can show
coded-value domain labels instead of the stored codes.

The wrapped table must expose:

    fields()                              -> list[FieldDefinition]
    rows()                                -> iterable of (row_id, {name: value})
    write_value(row_id, field_name, value)

Rows are fetched once. Switching the label mode only changes how the cached
values are rendered; the current row and every row identifier survive the
switch. Writes always go back to the table as raw codes.
"""

import logging
from typing import List

from ..domain.errors import DomainResolutionMiss, MeterDeskError, UnexpectedStoreError
from ..domain.models.field_definition import FieldDefinition

logger = logging.getLogger('MeterDesk.Projection')

# Notification kinds passed to subscribers
LABELS_CHANGED = 'labels'
VALUE_CHANGED  = 'value'
ROWS_RESET     = 'reset'


class ProjectedRow:
    """One record as seen through the projection."""

    __slots__ = ('_projection', 'row_id')

    def __init__(self, projection, row_id):
        self._projection = projection
        self.row_id = row_id

    def raw(self, field_name):
        return self._projection.raw_value(self.row_id, field_name)

    def display(self, field_name):
        return self._projection.display_value(self.row_id, field_name)

    def __repr__(self):
        return f"ProjectedRow({self.row_id!r})"


class DomainAwareProjection:
    """Projection of one attribute table with a table-wide label switch.

    Usage:
        projection = DomainAwareProjection(table)
        projection.display_value(fid, "STATUS")    # -> 1
        projection.show_labels = True
        projection.display_value(fid, "STATUS")    # -> "Active"
        projection.set_value(fid, "STATUS", "Inactive")  # writes 2
    """

    def __init__(self, table, show_labels=False):
        """
        Args:
            table:       attribute table (see module docstring)
            show_labels: initial label mode
        """
        self._table = table
        self._fields: List[FieldDefinition] = list(table.fields())
        self._field_index = {f.name: i for i, f in enumerate(self._fields)}
        self._show_labels = bool(show_labels)
        self._row_ids = []
        self._row_index = {}
        self._values = {}
        self._current_row_id = None
        self._listeners = []
        self.refresh()

    # ------------------------------------------------------------------ #
    #  Schema
    # ------------------------------------------------------------------ #

    @property
    def table(self):
        return self._table

    @property
    def fields(self) -> List[FieldDefinition]:
        return list(self._fields)

    def field(self, field_name) -> FieldDefinition:
        """Return the definition of ``field_name`` (KeyError if unknown)."""
        return self._fields[self._field_index[field_name]]

    def column_of(self, field_name) -> int:
        """Column position of ``field_name``, or -1."""
        return self._field_index.get(field_name, -1)

    # ------------------------------------------------------------------ #
    #  Rows
    # ------------------------------------------------------------------ #

    @property
    def row_count(self) -> int:
        return len(self._row_ids)

    @property
    def row_ids(self):
        return list(self._row_ids)

    def row_id_at(self, index):
        return self._row_ids[index]

    def index_of(self, row_id) -> int:
        """Row position of ``row_id``, or -1."""
        return self._row_index.get(row_id, -1)

    def rows(self):
        """Yield a ProjectedRow per record, in fetch order."""
        for row_id in self._row_ids:
            yield ProjectedRow(self, row_id)

    def refresh(self):
        """Re-read every row from the table.

        The current row is kept when it still exists after the reload.
        """
        try:
            fetched = list(self._table.rows())
        except MeterDeskError:
            raise
        except Exception as e:
            raise UnexpectedStoreError(f"Could not read attribute rows: {e}", original=e) from e

        self._row_ids = [row_id for row_id, _ in fetched]
        self._row_index = {row_id: i for i, row_id in enumerate(self._row_ids)}
        self._values = {row_id: dict(values) for row_id, values in fetched}
        if self._current_row_id not in self._row_index:
            self._current_row_id = self._row_ids[0] if self._row_ids else None
        logger.debug(f"Fetched {len(self._row_ids)} row(s)")
        self._notify(ROWS_RESET)

    # ------------------------------------------------------------------ #
    #  Current row
    # ------------------------------------------------------------------ #

    @property
    def current_row_id(self):
        return self._current_row_id

    @current_row_id.setter
    def current_row_id(self, row_id):
        if row_id not in self._row_index:
            raise KeyError(f"Unknown row id {row_id!r}")
        self._current_row_id = row_id

    @property
    def current_index(self) -> int:
        return self.index_of(self._current_row_id)

    # ------------------------------------------------------------------ #
    #  Label mode
    # ------------------------------------------------------------------ #

    @property
    def show_labels(self) -> bool:
        return self._show_labels

    @show_labels.setter
    def show_labels(self, flag):
        self.set_show_labels(flag)

    def set_show_labels(self, flag) -> bool:
        """Switch the label mode. Returns True when the mode changed."""
        flag = bool(flag)
        if flag == self._show_labels:
            return False
        self._show_labels = flag
        self._notify(LABELS_CHANGED)
        return True

    # ------------------------------------------------------------------ #
    #  Values
    # ------------------------------------------------------------------ #

    def raw_value(self, row_id, field_name):
        """Stored value of one cell (KeyError for unknown row or field)."""
        self.field(field_name)
        return self._values[row_id].get(field_name)

    def display_value(self, row_id, field_name):
        """Value of one cell in the current label mode.

        Falls back to the raw value when labels are off, the field has no
        domain, or the code is not part of the domain.
        """
        raw = self.raw_value(row_id, field_name)
        if not self._show_labels:
            return raw
        domain = self.field(field_name).domain
        if domain is None:
            return raw
        try:
            return domain.label_for(raw)
        except DomainResolutionMiss:
            return raw

    def display_text(self, row_id, field_name) -> str:
        """``display_value`` as widget text; NULL renders as an empty string."""
        value = self.display_value(row_id, field_name)
        return '' if value is None else str(value)

    def set_value(self, row_id, field_name, value):
        """Write one cell through to the table.

        While labels are shown, a value equal to one of the field's labels is
        translated back to its code first; the table never receives a label.

        Returns:
            the raw value that was written

        Raises:
            KeyError:             unknown row or field
            UnexpectedStoreError: the table rejected the write
        """
        if row_id not in self._row_index:
            raise KeyError(f"Unknown row id {row_id!r}")
        definition = self.field(field_name)

        raw = value
        if self._show_labels and definition.domain is not None:
            code = definition.domain.code_for(value)
            if code is not None:
                raw = code

        try:
            self._table.write_value(row_id, field_name, raw)
        except MeterDeskError:
            raise
        except Exception as e:
            raise UnexpectedStoreError(
                f"Could not write {field_name!r} of row {row_id!r}: {e}", original=e
            ) from e

        self._values[row_id][field_name] = raw
        self._notify(VALUE_CHANGED, row_id, field_name)
        return raw

    # ------------------------------------------------------------------ #
    #  Observers
    # ------------------------------------------------------------------ #

    def subscribe(self, callback):
        """Register ``callback(kind, row_id=None, field_name=None)``."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, kind, row_id=None, field_name=None):
        for callback in list(self._listeners):
            callback(kind, row_id, field_name)
