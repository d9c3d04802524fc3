"""Colored console logging for command line usage."""

from __future__ import annotations

import logging

import click

__all__ = [
    "ClickHandler",
    "ColorFormatter",
    "LOG_LEVELS",
    "SUCCESS",
    "configure_logging",
    "log_success",
]


SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

LOG_LEVELS = ("DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR")

_LEVEL_COLORS = {
    logging.DEBUG: "cyan",
    logging.INFO: "blue",
    SUCCESS: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


def log_success(logger: logging.Logger, message: str, *args: object) -> None:
    """Log ``message`` at the :data:`SUCCESS` level."""

    logger.log(SUCCESS, message, *args)


class ColorFormatter(logging.Formatter):
    """Prefix each message with its colored ``[LEVEL]`` tag."""

    def __init__(self) -> None:
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = f"[{record.levelname}]"
        color = _LEVEL_COLORS.get(record.levelno)
        if color:
            prefix = click.style(prefix, fg=color)
        return f"{prefix} {message}"


class ClickHandler(logging.Handler):
    """Write records through :func:`click.echo`, which drops colors off a terminal."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record))
        except Exception:  # pragma: no cover - mirrors logging.StreamHandler
            self.handleError(record)


def _parse_level(level: str | None) -> int:
    if not level:
        return logging.INFO
    value = logging.getLevelName(level.strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: str | None = "INFO", *, logger_name: str = "projinit") -> logging.Logger:
    """Install the colored handler on the package logger, replacing earlier ones."""

    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if isinstance(handler, ClickHandler):
            logger.removeHandler(handler)
    handler = ClickHandler()
    handler.setFormatter(ColorFormatter())
    logger.addHandler(handler)
    logger.setLevel(_parse_level(level))
    return logger
