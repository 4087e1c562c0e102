# -*- coding: utf-8 -*-
"""
Logging configuration for MeterDesk.

All loggers live under the ``MeterDesk`` namespace (``MeterDesk.Locator``,
``MeterDesk.Binding``, ...). ``setup_logger('MeterDesk', ...)`` configures
the parent once; component loggers propagate to it.
"""

import logging
import os
import sys
import tempfile
from logging.handlers import RotatingFileHandler

ROOT_LOGGER = 'MeterDesk'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_log_path(log_file):
    """Absolute path for ``log_file``; relative names go to the temp dir."""
    if not log_file:
        return None
    log_file = os.path.normpath(log_file)
    if not os.path.isabs(log_file):
        log_file = os.path.join(tempfile.gettempdir(), 'meterdesk_logs', os.path.basename(log_file))
    try:
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
    except OSError:
        return None
    return log_file


def setup_logger(name=ROOT_LOGGER, log_file=None, level=logging.INFO):
    """
    Configure a logger with file rotation and a stderr handler.

    Args:
        name (str): Logger name
        log_file (str): Log file path, or None for console only
        level (int): Logging level of the logger and its file handler

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    log_path = _resolve_log_path(log_file)
    if log_path:
        try:
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=10*1024*1024,  # 10 MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setFormatter(formatter)
            file_handler.setLevel(level)
            logger.addHandler(file_handler)
        except OSError as e:
            sys.stderr.write(f"MeterDesk: file logging disabled ({e})\n")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING)
    logger.addHandler(console_handler)

    return logger


def get_logger(component):
    """Return the ``MeterDesk.<component>`` logger."""
    return logging.getLogger(f"{ROOT_LOGGER}.{component}")
