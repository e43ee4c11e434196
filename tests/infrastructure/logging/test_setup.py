"""Tests for logging setup."""

import json
import logging

import pytest

from hexmap.config import Config
from hexmap.infrastructure.logging import get_logger, setup_logging, setup_simple_logging
from hexmap.infrastructure.logging.handlers import ConsoleHandler, FileHandler


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Test handler installation."""

    def test_file_logging_writes_json(self, tmp_path, restore_root_logger):
        log_file = tmp_path / 'logs' / 'hexmap.log'
        setup_logging(Config(), session_id='session-1', log_file=str(log_file),
                      console=False, log_level='DEBUG')

        get_logger('hexmap.test.setup').info("Layer attached")
        for handler in restore_root_logger.handlers:
            handler.flush()

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], FileHandler)

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        messages = [line['message'] for line in lines]
        assert "Layer attached" in messages
        assert lines[-1]['context']['session_id'] == 'session-1'

    def test_simple_logging_console_only(self, restore_root_logger):
        setup_simple_logging('WARNING')

        handlers = restore_root_logger.handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], ConsoleHandler)
        assert restore_root_logger.level == logging.WARNING
