# -*- coding: utf-8 -*-
"""
BindingCoordinator — publishes the target layer's projection to the data panel.

State machine:

    UNBOUND ──bind()──────────────▶ BOUND
    BOUND ──set_show_labels()─────▶ REBINDING ──▶ BOUND
    BOUND / REBINDING ──on_document_replaced()──▶ UNBOUND

The coordinator talks to the widgets through a view object providing:

    show_grid(projection)              — grid displays every row / column
    attach_text(projection, field)     — text box bound to one column
    detach_text()                      — text box released
    show_row(index)                    — text box moves to row ``index``
    set_field_items(entries)           — picker filled with CatalogEntry items
    clear()                            — everything emptied

Like the other use cases of the application layer it never shows dialogs:
``bind`` returns a plain dict and the UI decides what to tell the user.
"""

import logging

from ..attribute_engine.catalog import FieldCatalogExtractor
from ..attribute_engine.projection import DomainAwareProjection
from ..domain.errors import (
    BindingStateError,
    LayerNotFound,
    MeterDeskError,
    UnexpectedStoreError,
)
from ..domain.models.binding_state import BindingState

logger = logging.getLogger('MeterDesk.Binding')

STATUS_BOUND     = 'bound'
STATUS_NOT_FOUND = 'not_found'
STATUS_ERROR     = 'error'


class BindingCoordinator:
    """Owns the live projection and keeps grid, text box and picker on it.

    Args:
        locator:     LayerLocator — owns the cached layer/table
        view:        data panel implementing the view methods listed above
        bound_field: field shown in the single-value text box
        show_labels: initial label mode for new projections
        strict:      raise BindingStateError on invalid rebinds; defaults to
                     ``__debug__`` so optimised runs ignore them instead
    """

    def __init__(self, locator, view, bound_field='OBJECTID', show_labels=True,
                 strict=None):
        self._locator = locator
        self._view = view
        self.bound_field = bound_field
        self.default_show_labels = bool(show_labels)
        self._strict = __debug__ if strict is None else bool(strict)
        self._state = BindingState.UNBOUND
        self._projection = None
        self._text_attached = False

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def state(self) -> BindingState:
        return self._state

    @property
    def is_bound(self) -> bool:
        return self._state in (BindingState.BOUND, BindingState.REBINDING)

    @property
    def projection(self):
        """The published projection, or None while unbound."""
        return self._projection

    @property
    def locator(self):
        return self._locator

    # ------------------------------------------------------------------ #
    #  UNBOUND → BOUND
    # ------------------------------------------------------------------ #

    def bind(self, layers) -> dict:
        """Locate the target layer and publish it to the view.

        Calling it while already bound rebuilds every binding from a fresh
        projection. Never raises.

        Args:
            layers: the current layer collection

        Returns:
            dict: { 'status': 'bound' | 'not_found' | 'error',
                    'message': str,
                    'layer_name': str, 'row_count': int, 'catalog': list }
                  (the last three only when bound)
        """
        try:
            layer = self._locator.resolve(layers)
        except LayerNotFound as e:
            logger.info(str(e))
            return {'status': STATUS_NOT_FOUND, 'message': str(e)}
        except UnexpectedStoreError as e:
            logger.error(str(e))
            return {'status': STATUS_ERROR, 'message': str(e)}

        try:
            projection = DomainAwareProjection(
                self._locator.table, show_labels=self.default_show_labels
            )
            catalog = FieldCatalogExtractor.extract(layer)
        except MeterDeskError as e:
            logger.error(f"Could not project layer {layer.dataset_name!r}: {e}")
            return {'status': STATUS_ERROR, 'message': str(e)}
        except Exception as e:
            logger.error(f"Could not project layer {layer.dataset_name!r}: {e}", exc_info=True)
            return {'status': STATUS_ERROR, 'message': f"Could not read attributes: {e}"}

        if self._state is not BindingState.UNBOUND:
            self._release()

        self._projection = projection
        self._view.show_grid(projection)
        self._attach_text()
        self._view.set_field_items(catalog)
        self._state = BindingState.BOUND

        logger.debug(f"Bound {layer.dataset_name!r}: {projection.row_count} row(s), "
                     f"{len(catalog)} aliased field(s)")
        return {
            'status': STATUS_BOUND,
            'message': f"{layer.dataset_name}: {projection.row_count} record(s)",
            'layer_name': layer.dataset_name,
            'row_count': projection.row_count,
            'catalog': catalog,
        }

    # ------------------------------------------------------------------ #
    #  BOUND → REBINDING → BOUND
    # ------------------------------------------------------------------ #

    def set_show_labels(self, flag) -> bool:
        """Switch between raw codes and domain labels.

        The text binding is detached, the projection flag updated, and the
        binding reattached to the same field at the same row, so the text
        box re-reads the value instead of keeping its cached text.

        Returns:
            True when the switch was applied, False when ignored

        Raises:
            BindingStateError: not bound and the coordinator is strict
        """
        if not self.is_bound:
            error = BindingStateError(self._state, 'change the label mode')
            if self._strict:
                raise error
            logger.warning(str(error))
            return False

        self._state = BindingState.REBINDING
        try:
            self._detach_text()
            self._projection.set_show_labels(flag)
            self.default_show_labels = bool(flag)
            self._attach_text()
        finally:
            self._state = BindingState.BOUND
        logger.debug(f"Label mode set to {bool(flag)}")
        return True

    # ------------------------------------------------------------------ #
    #  Row selection
    # ------------------------------------------------------------------ #

    def select_row(self, row_id, layers=None) -> bool:
        """Make ``row_id`` the current record and move the text box to it.

        When ``layers`` is given and no layer has been located yet, a passive
        lookup is made first; its failures are only logged.
        """
        if layers is not None and not self._locator.is_resolved:
            self._locator.locate(layers)

        if self._projection is None:
            return False
        try:
            self._projection.current_row_id = row_id
        except KeyError as e:
            logger.warning(str(e))
            return False
        self._view.show_row(self._projection.current_index)
        return True

    # ------------------------------------------------------------------ #
    #  → UNBOUND
    # ------------------------------------------------------------------ #

    def on_document_replaced(self):
        """Release every binding and drop the cached layer."""
        self._release()
        self._locator.invalidate()
        logger.debug("Document replaced; bindings released")

    def _release(self):
        self._detach_text()
        self._view.clear()
        self._projection = None
        self._state = BindingState.UNBOUND

    # ------------------------------------------------------------------ #
    #  Text binding
    # ------------------------------------------------------------------ #

    def _attach_text(self):
        if self._projection.column_of(self.bound_field) < 0:
            logger.warning(f"Field {self.bound_field!r} not found; text box left unbound")
            return
        self._view.attach_text(self._projection, self.bound_field)
        self._text_attached = True

    def _detach_text(self):
        if self._text_attached:
            self._view.detach_text()
            self._text_attached = False
