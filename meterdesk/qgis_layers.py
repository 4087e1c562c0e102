# -*- coding: utf-8 -*-
"""
QGIS Layers Module
Adapters that expose QgsProject layers and QgsVectorLayer attributes to the
attribute engine (LayerLocator, DomainAwareProjection).

Coded-value domains are read from the "Value Map" editor widget of each field.
"""

import os

from qgis.core import QgsProject, QgsProviderRegistry, QgsVectorLayer, edit
from qgis.PyQt.QtCore import QVariant

from .core.domain.models.coded_value_domain import CodedValueDomain
from .core.domain.models.field_definition import FieldDefinition

# Name under which the feature id is exposed when the layer has no such field
FEATURE_ID_FIELD = 'OBJECTID'


def _to_python(value):
    """Convert a NULL QVariant attribute to None."""
    if isinstance(value, QVariant) and value.isNull():
        return None
    return value


def is_feature_layer(layer):
    """Type filter for LayerLocator: valid spatial vector layers only."""
    return layer.is_feature_layer


def dataset_browse_name(qgs_layer):
    """Return the name of the dataset behind a layer.

    Uses the provider's decoded URI (``layerName`` for GeoPackage / FileGDB
    sublayers, ``table`` for databases, the file stem for single-file
    sources) and falls back to the layer name.
    """
    parts = QgsProviderRegistry.instance().decodeUri(
        qgs_layer.providerType(), qgs_layer.source()
    )
    name = parts.get('layerName') or parts.get('table')
    if not name and parts.get('path'):
        name = os.path.splitext(os.path.basename(parts['path']))[0]
    return name or qgs_layer.name()


class QgisLayerCollection:
    """Layers of a QgsProject in layer tree order (top to bottom)."""

    def __init__(self, project=None):
        """
        Args:
            project: QgsProject - defaults to QgsProject.instance()
        """
        self._project = project or QgsProject.instance()

    def __iter__(self):
        root = self._project.layerTreeRoot()
        for tree_layer in root.findLayers():
            map_layer = tree_layer.layer()
            if map_layer is not None:
                yield QgisLayerHandle(map_layer)


class QgisLayerHandle:
    """Wraps one QgsMapLayer for the LayerLocator."""

    def __init__(self, map_layer):
        self.map_layer = map_layer

    @property
    def is_feature_layer(self):
        layer = self.map_layer
        return isinstance(layer, QgsVectorLayer) and layer.isValid() and layer.isSpatial()

    @property
    def dataset_name(self):
        return dataset_browse_name(self.map_layer)

    def attribute_table(self):
        return QgisAttributeTable(self.map_layer)

    def __repr__(self):
        return f"QgisLayerHandle({self.map_layer.name()!r})"


class QgisAttributeTable:
    """Attribute table of a QgsVectorLayer.

    Rows are keyed by feature id. When the layer has no ``OBJECTID`` field
    (OGR exposes it as the feature id), a read-only ``OBJECTID`` column
    holding the feature id is placed first.
    """

    def __init__(self, layer, id_field=FEATURE_ID_FIELD):
        """
        Args:
            layer: QgsVectorLayer
            id_field: str - name of the identifier column
        """
        self.layer = layer
        self.id_field = id_field
        self._synthetic_id = layer.fields().indexOf(id_field) < 0

    # ------------------------------------------------------------------ #
    #  Schema
    # ------------------------------------------------------------------ #

    def fields(self):
        """Return FieldDefinitions in the layer's field order."""
        result = []
        if self._synthetic_id:
            result.append(FieldDefinition(name=self.id_field, alias=self.id_field))

        qgs_fields = self.layer.fields()
        for idx in range(qgs_fields.count()):
            qgs_field = qgs_fields.at(idx)
            result.append(FieldDefinition(
                name=qgs_field.name(),
                alias=qgs_field.displayName(),
                domain=self._value_map_domain(idx, qgs_field.name())
            ))
        return result

    def _value_map_domain(self, idx, field_name):
        setup = self.layer.editorWidgetSetup(idx)
        if setup.type() != 'ValueMap':
            return None
        value_map = setup.config().get('map')
        if not value_map:
            return None
        return CodedValueDomain.from_value_map(field_name, value_map)

    # ------------------------------------------------------------------ #
    #  Rows
    # ------------------------------------------------------------------ #

    def rows(self):
        """Yield (feature id, {field name: value}) for every feature."""
        names = self.layer.fields().names()
        for feature in self.layer.getFeatures():
            values = {name: _to_python(value) for name, value in zip(names, feature.attributes())}
            if self._synthetic_id:
                values[self.id_field] = feature.id()
            yield feature.id(), values

    def write_value(self, row_id, field_name, value):
        """Write one attribute, committing unless the layer is already in edit mode.

        Raises:
            KeyError: unknown field
            ValueError: the identifier column was targeted
            RuntimeError: the provider rejected the change
        """
        if self._synthetic_id and field_name == self.id_field:
            raise ValueError(f"{self.id_field} is read-only")
        idx = self.layer.fields().indexOf(field_name)
        if idx < 0:
            raise KeyError(f"Field {field_name!r} not found in {self.layer.name()}")

        if self.layer.isEditable():
            changed = self.layer.changeAttributeValue(row_id, idx, value)
        else:
            with edit(self.layer):
                changed = self.layer.changeAttributeValue(row_id, idx, value)
        if not changed:
            raise RuntimeError(f"Layer {self.layer.name()} rejected the change of {field_name!r}")
