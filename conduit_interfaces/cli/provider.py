"""
Command registration with the host Typer application.

build_command() turns a ConduitCommand subclass into a Typer command with
the universal output options; ServiceProvider wires the component's
commands into an app at bootstrap.
"""

import logging
from collections.abc import Callable
from pathlib import Path

import typer

from conduit_interfaces.cli.common import run_command
from conduit_interfaces.command import ConduitCommand
from conduit_interfaces.commands import BrowseInterfacesCommand, ExampleCommand, InitCommand
from conduit_interfaces.output import OutputFormat

logger = logging.getLogger(__name__)


def build_command(command_cls: type[ConduitCommand]) -> Callable[..., None]:
    """Build a Typer callback that runs command_cls with the universal options."""

    def command(
        format: OutputFormat | None = typer.Option(
            None,
            "--format",
            "-f",
            case_sensitive=False,
            help="Output format (terminal, json, table) [default: terminal, json when piped]",
        ),
        output: Path | None = typer.Option(
            None, "--output", "-o", help="Write JSON output to file instead of stdout"
        ),
        fields: str | None = typer.Option(
            None, "--fields", help="Comma-separated fields to include in json/table output"
        ),
        no_interaction: bool = typer.Option(
            False, "--no-interaction", "-n", help="Never ask interactive questions"
        ),
    ) -> None:
        exit_code = run_command(
            command_cls(),
            format=format,
            output=output,
            fields=fields,
            no_interaction=no_interaction,
        )
        if exit_code:
            raise typer.Exit(exit_code)

    command.__name__ = f"{command_cls.name}_command"
    command.__doc__ = command_cls.description
    return command


def init_command() -> None:
    """Sample command for interfaces component."""
    exit_code = run_command(InitCommand())
    if exit_code:
        raise typer.Exit(exit_code)


class ServiceProvider:
    """Registers the interfaces component's commands into a Typer app."""

    commands: list[type[ConduitCommand]] = [ExampleCommand, BrowseInterfacesCommand]

    def __init__(self, app: typer.Typer):
        self.app = app
        self.interfaces_app: typer.Typer | None = None
        self._booted = False

    def register(self) -> typer.Typer:
        """Create the interfaces sub-app and attach it to the host app."""
        if self.interfaces_app is None:
            self.interfaces_app = typer.Typer(
                help="🧩 Universal output format interfaces",
                no_args_is_help=True,
            )
            self.app.add_typer(self.interfaces_app, name="interfaces")
        return self.interfaces_app

    def boot(self) -> None:
        """Register commands. Calling boot() again has no effect."""
        if self._booted:
            return
        interfaces_app = self.register()

        for command_cls in self.commands:
            interfaces_app.command(command_cls.name, help=command_cls.description)(build_command(command_cls))
            logger.debug("Registered interfaces %s", command_cls.name)

        self.app.command(InitCommand.name, help=InitCommand.description)(init_command)
        self._booted = True
