"""Tests for logger setup."""
import logging
from logging.handlers import RotatingFileHandler

from meterdesk.logging_config import get_logger, setup_logger


def test_setup_logger_adds_file_and_console_handlers(tmp_path):
    log_file = tmp_path / 'logs' / 'meterdesk.log'
    logger = setup_logger('MeterDeskTest.Handlers', str(log_file), logging.DEBUG)
    try:
        kinds = {type(h) for h in logger.handlers}
        assert RotatingFileHandler in kinds
        assert logging.StreamHandler in kinds
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert 'hello' in log_file.read_text(encoding='utf-8')
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)


def test_setup_logger_is_idempotent(tmp_path):
    logger = setup_logger('MeterDeskTest.Once', None)
    try:
        again = setup_logger('MeterDeskTest.Once', None)
        assert again is logger
        assert len(logger.handlers) == 1
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)


def test_component_loggers_share_the_namespace():
    assert get_logger('Binding').name == 'MeterDesk.Binding'
