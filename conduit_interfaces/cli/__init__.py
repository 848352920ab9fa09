"""
CLI wiring for the interfaces component.

- common: shared consoles and error reporting
- provider: ServiceProvider and Typer command builder
"""

from conduit_interfaces.cli.common import console, err_ui, run_command, ui
from conduit_interfaces.cli.provider import ServiceProvider, build_command

__all__ = [
    "ServiceProvider",
    "build_command",
    "console",
    "err_ui",
    "run_command",
    "ui",
]
