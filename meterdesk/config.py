# -*- coding: utf-8 -*-
"""
Configuration for MeterDesk.

Settings are read from a JSON file: ``config.json`` next to this module,
or the file named by the ``METERDESK_CONFIG`` environment variable. Keys
missing from the file keep their defaults; unknown keys are ignored.
"""

import json
import logging
import os
from dataclasses import dataclass, fields
from typing import Optional

from .core.domain.errors import ConfigError

CONFIG_ENV_VAR = 'METERDESK_CONFIG'
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'config.json')


@dataclass
class ViewerConfig:
    """Settings of the viewer and its data panel.

    Attributes:
        target_layer_name:    Dataset browse-name of the layer shown in the grid.
        bound_field:          Field bound to the record text box.
        show_domain_labels:   Initial label mode of the grid.
        strict_binding:       Raise on invalid rebinds. None means ``__debug__``.
        log_file:             Log file; relative paths go to the temp directory.
        log_level:            Name of the logging level.
        coordinate_precision: Decimals shown for cursor coordinates.
    """

    target_layer_name: str = 'wMeter'
    bound_field: str = 'OBJECTID'
    show_domain_labels: bool = True
    strict_binding: Optional[bool] = None
    log_file: str = 'meterdesk.log'
    log_level: str = 'INFO'
    coordinate_precision: int = 2

    @property
    def logging_level(self) -> int:
        """``log_level`` as a logging constant (INFO when unrecognised)."""
        level = logging.getLevelName(str(self.log_level).upper())
        return level if isinstance(level, int) else logging.INFO

    @classmethod
    def from_dict(cls, data: dict) -> 'ViewerConfig':
        """Build a config from a parsed JSON object, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})


def load_config(path=None) -> ViewerConfig:
    """Read the configuration file.

    Args:
        path: explicit file path; defaults to $METERDESK_CONFIG, then the
              bundled config.json

    Returns:
        ViewerConfig — defaults when the file does not exist

    Raises:
        ConfigError: the file exists but is not a JSON object
    """
    path = path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    if not os.path.exists(path):
        return ViewerConfig()

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Could not read configuration {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must contain a JSON object")
    return ViewerConfig.from_dict(data)
