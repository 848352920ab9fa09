"""
Common utilities shared across CLI commands.

This module provides:
- Error reporting for expected command failures
- Shared console and UI instances
"""

import logging
from typing import Any

import typer

from conduit_interfaces.errors import ConduitError, OutputWriteError, RecordShapeError, SerializationError
from conduit_interfaces.utils.ui import Icons, console, err_console, err_ui, ui

__all__ = [
    "console",
    "err_console",
    "err_ui",
    "Icons",
    "logger",
    "run_command",
    "ui",
]

logger = logging.getLogger(__name__)


def _error_title(error: ConduitError) -> str:
    if isinstance(error, OutputWriteError):
        return "Output failed"
    if isinstance(error, (RecordShapeError, SerializationError)):
        return "Invalid data"
    return "Command failed"


def run_command(command: Any, **options: Any) -> int:
    """Run a command's handle(), reporting expected errors on stderr.

    Args:
        command: Command instance with a handle() method
        **options: Options passed through to handle()

    Returns:
        Exit code returned by the command

    Raises:
        typer.Exit: With code 1 if the command raised a ConduitError
    """
    try:
        return command.handle(**options)
    except ConduitError as e:
        # Expected errors - show friendly message only, no traceback
        err_ui.error(_error_title(e), details=e.message)
        logger.debug("Command %s failed", type(command).__name__, exc_info=True)
        raise typer.Exit(1) from e
