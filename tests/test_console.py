from __future__ import annotations

import logging

import click
import pytest

from projinit.console import (
    SUCCESS,
    ClickHandler,
    ColorFormatter,
    configure_logging,
    log_success,
)


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("projinit.test", level, __file__, 1, message, None, None)


@pytest.mark.parametrize(
    "level, prefix",
    [(logging.INFO, "[INFO]"), (SUCCESS, "[SUCCESS]"), (logging.ERROR, "[ERROR]")],
)
def test_formatter_prefixes_level(level: int, prefix: str):
    formatted = ColorFormatter().format(_record(level, "hello"))
    assert formatted != click.unstyle(formatted)
    assert click.unstyle(formatted) == f"{prefix} hello"


def test_success_level_is_registered():
    assert logging.getLevelName(SUCCESS) == "SUCCESS"
    assert logging.INFO < SUCCESS < logging.WARNING


def test_configure_logging_replaces_handler():
    logger = configure_logging("DEBUG", logger_name="console-test.replace")
    configure_logging("WARNING", logger_name="console-test.replace")

    handlers = [handler for handler in logger.handlers if isinstance(handler, ClickHandler)]
    assert len(handlers) == 1
    assert logger.level == logging.WARNING


@pytest.mark.parametrize("level", [None, "", "chatty"])
def test_configure_logging_falls_back_to_info(level):
    logger = configure_logging(level, logger_name="console-test.fallback")
    assert logger.level == logging.INFO


def test_handler_writes_plain_text_off_terminal(capsys):
    logger = configure_logging("INFO", logger_name="console-test.output")
    log_success(logger, "Project '%s' ready", "demo")

    assert capsys.readouterr().out == "[SUCCESS] Project 'demo' ready\n"
