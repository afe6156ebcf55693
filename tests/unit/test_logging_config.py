"""
Unit tests for config/logging_config.py - logger hierarchy and handlers
"""
import io
import logging
import logging.handlers

import pytest

from config.logging_config import ROOT_LOGGER_NAME, get_logger, setup_logger
from pageflow.cli import main


def console_handlers(logger):
    """Non-file stream handlers on `logger` and its pageflow ancestors."""
    found = []
    current = logger
    while current is not None and current.name.split(".")[0] == ROOT_LOGGER_NAME:
        found.extend(
            h for h in current.handlers
            if isinstance(h, logging.StreamHandler)
            and not isinstance(h, logging.handlers.RotatingFileHandler)
        )
        current = current.parent if current.propagate else None
    return found


@pytest.fixture
def console_buffer():
    """Redirect every console handler on the pageflow chain into one buffer."""
    buffer = io.StringIO()
    handlers = console_handlers(get_logger("pageflow.cli"))
    previous = [h.setStream(buffer) for h in handlers]
    yield buffer
    for handler, stream in zip(handlers, previous):
        handler.setStream(stream)


class TestLoggerHierarchy:
    """Test that module loggers share the package handlers."""

    def test_root_logger_has_console_handler(self):
        logger = setup_logger()
        assert logger.name == ROOT_LOGGER_NAME
        assert console_handlers(logger)

    def test_module_logger_has_no_own_handlers(self):
        logger = get_logger("pageflow.flow_engine")
        assert logger.handlers == []
        assert logger.propagate
        assert logger.parent is logging.getLogger(ROOT_LOGGER_NAME)

    def test_repeated_setup_does_not_stack_handlers(self):
        before = len(setup_logger(ROOT_LOGGER_NAME).handlers)
        setup_logger(ROOT_LOGGER_NAME)
        get_logger("pageflow.streaming")
        assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == before

    def test_one_console_handler_per_record(self):
        assert len(console_handlers(get_logger("pageflow.cli"))) == 1


class TestCliLogOutput:
    """Test that CLI records reach the console once."""

    def test_summary_line_written_once(self, console_buffer, tmp_path):
        source = tmp_path / "in.md"
        source.write_text("# Title\n\nHello world.\n", encoding="utf-8")

        assert main([str(source), "-o", str(tmp_path / "out.json")]) == 0

        output = console_buffer.getvalue().splitlines()
        lines = [line for line in output if "pageflow.cli - INFO - Laid out" in line]
        assert len(lines) == 1
