"""Tests for logging configuration."""

import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from sortium.observability.logging import ContextLogger, setup_logging


@pytest.fixture(autouse=True)
def restore_sortium_logger():
    logger = logging.getLogger("sortium")
    root = logging.getLogger()
    saved = (logger.level, list(logger.handlers), logger.propagate)
    saved_root = (root.level, list(root.handlers))
    yield
    root.setLevel(saved_root[0])
    root.handlers[:] = saved_root[1]
    for handler in logger.handlers:
        if handler not in saved[1]:
            handler.close()
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def test_console_only_setup():
    setup_logging("DEBUG", log_file=None)

    logger = logging.getLogger("sortium")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], logging.StreamHandler)


def test_file_handler_writes_json(tmp_path):
    log_file = tmp_path / "sortium.log"

    setup_logging("INFO", log_file=str(log_file))

    logger = logging.getLogger("sortium")
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(file_handlers) == 1
    assert isinstance(file_handlers[0].formatter, JsonFormatter)


def test_context_logger_carries_extra():
    adapter = ContextLogger("sortium.test").with_context(node_id="start")
    assert adapter.extra == {"node_id": "start"}
    assert adapter.logger.name == "sortium.test"
