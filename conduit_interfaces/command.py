"""
Command base with universal output formats.

Every command built on ConduitCommand supports the same output formats:
- terminal: Human-readable decorative output (default)
- json: Machine-readable JSON output
- table: Tabular format for data display

When stdout is piped, terminal output switches to JSON so commands compose
with tools like jq.

Usage:
    class StatusCommand(ConduitCommand):
        name = "status"
        description = "Show component status"

        def get_data(self):
            return [{"name": "api", "status": "up"}]

        def output_terminal(self, data):
            for row in data:
                self.ui.success(f"{row['name']} is {row['status']}")
            return 0

    StatusCommand().handle(format="table")
"""

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from rich.console import Console

from conduit_interfaces.config import Settings, get_settings
from conduit_interfaces.contracts import DisplaysData
from conduit_interfaces.output import FormatsAsJsonMixin, FormatsAsTableMixin, OutputFormat
from conduit_interfaces.utils.terminal import is_interactive_output
from conduit_interfaces.utils.ui import UIHelper
from conduit_interfaces.utils.ui import console as default_console

logger = logging.getLogger(__name__)


def parse_fields(fields: str | Sequence[str] | None) -> list[str] | None:
    """
    Normalize a field selection.

    Accepts a comma-separated string ("name,status") or a sequence of names.
    Blank entries are dropped; an empty selection means all fields.
    """
    if fields is None:
        return None
    if isinstance(fields, str):
        fields = fields.split(",")
    selected = [field.strip() for field in fields if field and field.strip()]
    return selected or None


class ConduitCommand(FormatsAsJsonMixin, FormatsAsTableMixin, DisplaysData):
    """
    Base class for commands that display a data set.

    Subclasses implement get_data() and output_terminal(); JSON and table
    output come from the mixins.
    """

    name: str = ""
    description: str = ""

    def __init__(
        self,
        console: Console | None = None,
        is_interactive: Callable[[], bool] | None = None,
        settings: Settings | None = None,
        prompts: Any = None,
    ):
        """
        Initialize command.

        Args:
            console: Rich console for output (default: shared stdout console)
            is_interactive: Returns True when output goes to a terminal
                (default: the console's stream is a TTY)
            settings: Settings instance (default: global settings)
            prompts: Interactive driver with select()/confirm() (default: UIHelper)
        """
        self.console = console or default_console
        self.is_interactive = is_interactive or (lambda: is_interactive_output(self.console.file))
        self.settings = settings or get_settings()
        self.ui = UIHelper(self.console)
        self.prompts = prompts or self.ui

        # Per-invocation options, set by handle()
        self.format: OutputFormat | None = None
        self.output_path: Path | None = None
        self.fields: list[str] | None = None
        self.no_interaction = False

    def handle(
        self,
        format: OutputFormat | str | None = None,
        output: Path | str | None = None,
        fields: str | Sequence[str] | None = None,
        no_interaction: bool = False,
    ) -> int:
        """
        Run the command: resolve the format, fetch data, dispatch to a renderer.

        Args:
            format: Requested format (None = configured default)
            output: File to write JSON output to
            fields: Field selection for JSON/table output
            no_interaction: Never enter interactive prompts

        Returns:
            Exit code from the renderer

        Raises:
            InvalidFormatError: If format is not a known format
            OutputWriteError: If the JSON file cannot be written
            RecordShapeError: If records cannot be rendered as a table
        """
        self.format = self.resolve_format(format)
        self.output_path = Path(output) if output is not None else None
        self.fields = parse_fields(fields)
        self.no_interaction = no_interaction

        if self.output_path is not None and self.format is not OutputFormat.JSON:
            logger.warning("--output only applies to JSON output; ignoring %s", self.output_path)
            self.output_path = None

        data = self.get_data()
        logger.debug("%s: rendering %d records as %s", self.name or type(self).__name__, len(data), self.format.value)

        renderers: dict[OutputFormat, Callable[[list[dict[str, Any]]], int]] = {
            OutputFormat.JSON: self.output_json,
            OutputFormat.TABLE: self.output_table,
            OutputFormat.TERMINAL: self.output_terminal,
        }
        return renderers[self.format](data)

    def resolve_format(self, requested: OutputFormat | str | None = None) -> OutputFormat:
        """
        Decide which renderer handles this invocation.

        Terminal output is upgraded to JSON when stdout is piped (unless
        disabled in settings).
        """
        if requested is None:
            resolved = self.settings.output.default_format
        else:
            resolved = OutputFormat.parse(requested)

        if (
            resolved is OutputFormat.TERMINAL
            and self.settings.output.auto_json_when_piped
            and self.is_piped_output()
        ):
            logger.debug("stdout is not a terminal; using JSON instead of terminal output")
            resolved = OutputFormat.JSON

        return resolved

    @classmethod
    def available_formats(cls) -> dict[str, str]:
        """Get available output formats."""
        return {fmt.value: fmt.description for fmt in OutputFormat}

    def is_piped_output(self) -> bool:
        """Detect if output is being piped."""
        return not self.is_interactive()

    def should_show_interactive_mode(self) -> bool:
        """Interactive prompts only run on a terminal and when not disabled."""
        return not self.is_piped_output() and not self.no_interaction

    def call(self, command_cls: type["ConduitCommand"], **options: Any) -> int:
        """Run another command with the same console, terminal detection and settings."""
        command = command_cls(
            console=self.console,
            is_interactive=self.is_interactive,
            settings=self.settings,
            prompts=self.prompts,
        )
        return command.handle(**options)
