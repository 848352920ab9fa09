#!/usr/bin/env python3
"""
CLI for the conduit interfaces component.

Every data command supports --format=terminal|json|table and --output,
and switches to JSON automatically when stdout is piped.

This is the main entry point; commands are registered by the
conduit_interfaces service provider.
"""

from pathlib import Path

import typer
from rich.traceback import install

from conduit_interfaces import __version__
from conduit_interfaces.cli import ServiceProvider, console
from conduit_interfaces.config import get_settings, reload_settings
from conduit_interfaces.logging import configure_logging, get_logger
from conduit_interfaces.utils.ui import err_console

# Install Rich traceback handler for unexpected errors (stderr)
install(console=err_console, show_locals=False, width=120, word_wrap=True)

# Create main app
app = typer.Typer(
    name="conduit",
    help="🎯 Conduit CLI with universal output formats",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

logger = get_logger("cli")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"conduit-interfaces {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show info-level logs on stderr"),
    debug: bool = typer.Option(False, "--debug", help="Show debug logs on stderr"),
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="Path to conduit.yaml"
    ),
    version: bool = typer.Option(
        False, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """Conduit commands with terminal, JSON and table output."""
    settings = reload_settings(config) if config else get_settings()

    if debug or settings.debug:
        level = "debug"
    elif verbose:
        level = "info"
    else:
        level = settings.logging.level

    configure_logging(level=level, file_path=settings.logging.file, rich_tracebacks=False)
    logger.debug("Loaded settings (default format: %s)", settings.output.default_format.value)


# Register component commands
ServiceProvider(app).boot()


if __name__ == "__main__":
    app()
