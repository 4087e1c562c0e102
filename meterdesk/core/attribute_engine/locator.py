# -*- coding: utf-8 -*-
"""
LayerLocator — finds the target feature layer in a layer collection.

The collection is any iterable of layer handles in enumeration order. Each
handle that passes the type filter must expose:

    dataset_name       — browse-name of the underlying dataset (str)
    attribute_table()  — the layer's attribute table

The locator owns the only cached layer/table reference of the session.
"""

import logging

from ..domain.errors import LayerNotFound, MeterDeskError, UnexpectedStoreError

logger = logging.getLogger('MeterDesk.Locator')


class LayerLocator:
    """Resolves and caches the feature layer whose dataset is ``target_name``.

    Usage:
        locator = LayerLocator("wMeter", type_filter=is_feature_layer)
        layer = locator.locate(collection)      # None when not loaded yet
        ...
        locator.invalidate()                    # on map replaced
    """

    def __init__(self, target_name, type_filter):
        """
        Args:
            target_name: str — dataset browse-name to look for (case-sensitive)
            type_filter: callable(layer) -> bool — keeps feature layers only
        """
        self.target_name = target_name
        self._type_filter = type_filter
        self._layer = None
        self._table = None
        self._cached_name = None

    # ------------------------------------------------------------------ #
    #  Cache
    # ------------------------------------------------------------------ #

    @property
    def layer(self):
        """Cached feature layer, or None."""
        return self._layer

    @property
    def table(self):
        """Attribute table of the cached layer, or None."""
        return self._table

    @property
    def is_resolved(self):
        return self._layer is not None

    def invalidate(self):
        """Forget the cached layer; the next lookup re-scans the collection."""
        if self._layer is not None:
            logger.debug(f"Layer cache for {self._cached_name!r} invalidated")
        self._layer = None
        self._table = None
        self._cached_name = None

    # ------------------------------------------------------------------ #
    #  Lookup
    # ------------------------------------------------------------------ #

    def resolve(self, layers, target_name=None):
        """Return the matching layer, scanning ``layers`` unless cached.

        Args:
            layers:      iterable of layer handles, in collection order
            target_name: overrides the configured dataset name

        Returns:
            the first layer (in order) whose dataset name equals the target

        Raises:
            LayerNotFound:        no layer matched
            UnexpectedStoreError: the collection or a layer could not be read
        """
        name = target_name or self.target_name
        if self._layer is not None and self._cached_name == name:
            return self._layer

        try:
            for layer in layers:
                if not self._type_filter(layer):
                    continue
                if layer.dataset_name == name:
                    table = layer.attribute_table()
                    self._layer = layer
                    self._table = table
                    self._cached_name = name
                    logger.info(f"Located feature layer {name!r}")
                    return layer
        except MeterDeskError:
            raise
        except Exception as e:
            raise UnexpectedStoreError(
                f"Could not read the layer collection while looking for {name!r}: {e}",
                original=e
            ) from e

        raise LayerNotFound(name)

    def locate(self, layers, target_name=None):
        """Like ``resolve`` but never raises: returns None when not found.

        Store errors are logged, so passive lookups (cell clicks, map
        refreshes) never interrupt the user.
        """
        try:
            return self.resolve(layers, target_name)
        except LayerNotFound as e:
            logger.info(str(e))
        except UnexpectedStoreError as e:
            logger.warning(str(e))
        return None
