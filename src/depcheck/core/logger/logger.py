"""Logging for depcheck, rendered with Rich on stderr.

Only the ``depcheck`` logger namespace is configured, so embedding
applications keep control of the root logger. Records still propagate to
the root logger.
"""

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from depcheck.core.config.settings import LoggingSettings, get_settings

PACKAGE_LOGGER = "depcheck"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _console_handler(settings: LoggingSettings) -> logging.Handler:
    if settings.use_rich:
        # stdout belongs to the command output
        return RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=False,
            rich_tracebacks=True,
            markup=False,
        )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(settings.format))
    return handler


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(settings: LoggingSettings | None = None) -> logging.Logger:
    """Configure the depcheck logger namespace.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        settings: Logging settings. Uses global settings if not provided.

    Returns:
        The configured package logger.
    """
    global _configured

    if settings is None:
        settings = get_settings().logging

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    package_logger.setLevel(settings.level)
    package_logger.addHandler(_console_handler(settings))
    if settings.file:
        package_logger.addHandler(_file_handler(settings.file))

    _configured = True
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger, configuring the package logger on first use.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    if not _configured:
        setup_logging()
    return logging.getLogger(name)
