"""
Default implementations of the output contracts.

Mix these into a command to get output_json / output_table for free.
The host class provides:
    console         Rich console for output
    output_path     Path from --output, or None
    fields          Field selection from --fields, or None
    settings        Settings instance (JSON indent / ASCII escaping)
    is_piped_output()
"""

import logging
from typing import Any

from conduit_interfaces.output.formatters import OutputFormat, get_formatter

logger = logging.getLogger(__name__)


class FormatsAsJsonMixin:
    """Default implementation for JSON output formatting."""

    def output_json(self, data: list[dict[str, Any]]) -> int:
        """Format and output data as JSON."""
        output_settings = self.settings.output
        formatter = get_formatter(
            OutputFormat.JSON,
            output=self.output_path,
            console=self.console,
            indent=output_settings.json_indent,
            ensure_ascii=output_settings.ensure_ascii,
        )
        formatter.format_items(data, columns=self.fields).output()
        return 0


class FormatsAsTableMixin:
    """Default implementation for table output formatting."""

    table_title: str | None = None

    def output_table(self, data: list[dict[str, Any]]) -> int:
        """Format and output data as a table (tab-separated when piped)."""
        interactive = not self.is_piped_output()
        logger.debug("Rendering %s table for %d records", "interactive" if interactive else "simple", len(data))

        formatter = get_formatter(OutputFormat.TABLE, console=self.console, interactive=interactive)
        title = self.table_title if interactive else None
        formatter.format_items(data, columns=self.fields, title=title).output()
        return 0
