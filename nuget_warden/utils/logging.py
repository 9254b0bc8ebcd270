"""Logging utilities for nuget-warden."""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

LOGGER_NAMESPACE = "nuget_warden"


class WardenLogger:
    """Thin wrapper around a stdlib logger that renders through rich."""

    def __init__(self, name: str) -> None:
        self.logger = logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self.logger.info(msg, extra=kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self.logger.warning(msg, extra=kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self.logger.error(msg, extra=kwargs)

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self.logger.debug(msg, extra=kwargs)


def _build_handler() -> RichHandler:
    """Create a rich handler writing to stderr so stdout stays the report."""
    console = Console(stderr=True, theme=Theme({
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "debug": "dim",
    }))

    handler = RichHandler(
        console=console,
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter(fmt="%(name)s: %(message)s"))
    return handler


def setup_logging(level: int = logging.WARNING, verbose: bool = False) -> None:
    """Setup logging configuration for nuget-warden.

    Args:
        level: Logging level
        verbose: Enable debug logging
    """
    if verbose:
        level = logging.DEBUG

    root = logging.getLogger(LOGGER_NAMESPACE)
    root.setLevel(level)

    # Remove existing handlers to avoid duplicates on repeated CLI invocations
    root.handlers.clear()
    root.addHandler(_build_handler())
    root.propagate = False


def get_logger(name: str) -> WardenLogger:
    """Get a nuget-warden logger instance.

    Args:
        name: Logger name

    Returns:
        Logger under the ``nuget_warden`` namespace
    """
    return WardenLogger(name)
