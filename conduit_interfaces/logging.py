"""
Rich-enhanced logging configuration for conduit commands.

Log records go to stderr so they never mix with JSON or tab-separated
output on stdout.

.. warning::
    By default, ``configure_logging()`` installs a **global traceback handler**
    via Rich that affects all uncaught exceptions in the process. This is
    right for the CLI entry point but not for library use.
    Set ``rich_tracebacks=False`` to disable this behavior.

Usage:
    from conduit_interfaces.logging import configure_logging, get_logger

    configure_logging(level="debug")

    logger = get_logger("command")
    logger.debug("Resolved format: json")
"""

import logging
from pathlib import Path
from typing import Literal

from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from conduit_interfaces.utils.ui import err_console

# Package logger name - all module loggers live under it
MODULE_LOGGER_NAME = "conduit_interfaces"

# Type alias for log levels
LogLevel = Literal["debug", "info", "warning", "error", "critical"]

DEFAULT_FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_log_level(level: LogLevel | str | int) -> int:
    """Convert level string to logging constant."""
    if isinstance(level, int):
        return level

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return level_map.get(level.lower(), logging.INFO)


def configure_logging(
    level: LogLevel | str | int = "warning",
    console: bool = True,
    file_path: str | Path | None = None,
    file_log_level: LogLevel | str | int | None = None,
    use_rich: bool = True,
    rich_tracebacks: bool = True,
    show_path: bool = False,
    show_time: bool = False,
) -> logging.Logger:
    """
    Configure logging for the conduit_interfaces package.

    Args:
        level: Log level for console output
        console: Whether to enable console (stderr) logging
        file_path: Optional file path for file logging
        file_log_level: Log level for file output (defaults to level)
        use_rich: Use a RichHandler for console output
        rich_tracebacks: Install Rich's global exception hook
        show_path: Show file path in console logs
        show_time: Show timestamp in console logs

    Returns:
        Configured package logger
    """
    log_level = _get_log_level(level)
    file_level = _get_log_level(file_log_level) if file_log_level else log_level

    if use_rich and rich_tracebacks:
        install_rich_traceback(console=err_console, show_locals=False, word_wrap=True)

    logger = logging.getLogger(MODULE_LOGGER_NAME)
    logger.setLevel(min(log_level, file_level) if file_path else log_level)
    logger.propagate = False

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    if console:
        console_handler: logging.Handler
        if use_rich:
            console_handler = RichHandler(
                level=log_level,
                console=err_console,
                show_time=show_time,
                show_path=show_path,
                rich_tracebacks=rich_tracebacks,
                markup=False,
            )
        else:
            console_handler = logging.StreamHandler()  # stderr
            console_handler.setLevel(log_level)
            console_handler.setFormatter(logging.Formatter(DEFAULT_FILE_FORMAT))
        logger.addHandler(console_handler)

    # File handler - always standard formatting for parseable logs
    if file_path:
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(DEFAULT_FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a logger under the package namespace.

    Args:
        name: Optional sub-logger name (e.g., "command", "output.formatters")

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"{MODULE_LOGGER_NAME}.{name}")
    return logging.getLogger(MODULE_LOGGER_NAME)


__all__ = [
    "configure_logging",
    "get_logger",
    "MODULE_LOGGER_NAME",
]
