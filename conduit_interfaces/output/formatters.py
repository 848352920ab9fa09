"""
Output formatter implementations.

Provides the data formatters behind the universal --format option:
- JSON (pretty-printed array of records, to stdout or a file)
- Table (Rich table on a terminal, tab-separated lines when piped)

Terminal output is not a formatter: each command renders it itself.

Usage:
    formatter = get_formatter(OutputFormat.TABLE, interactive=False)
    formatter.format_items(records)
    formatter.output()  # Writes to console stream or file
"""

import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from enum import Enum
from pathlib import Path
from typing import Any, TextIO

from rich.box import ROUNDED
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from conduit_interfaces.errors import InvalidFormatError, OutputWriteError, RecordShapeError, SerializationError
from conduit_interfaces.utils.ui import UIHelper
from conduit_interfaces.utils.ui import console as default_console

logger = logging.getLogger(__name__)

Record = Mapping[str, Any]


class OutputFormat(str, Enum):
    """Supported output formats."""

    TERMINAL = "terminal"
    JSON = "json"
    TABLE = "table"

    @property
    def description(self) -> str:
        return FORMAT_DESCRIPTIONS[self]

    @classmethod
    def parse(cls, value: "OutputFormat | str") -> "OutputFormat":
        """Parse a format name case-insensitively."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidFormatError(str(value)) from None


FORMAT_DESCRIPTIONS: dict[OutputFormat, str] = {
    OutputFormat.TERMINAL: "Human-readable terminal output (default)",
    OutputFormat.JSON: "Machine-readable JSON format",
    OutputFormat.TABLE: "Tabular display format",
}


def select_columns(
    items: Sequence[Record],
    columns: Sequence[str] | None = None,
    strict: bool = True,
) -> list[str]:
    """
    Work out the field order for a data set and validate record shapes.

    Args:
        items: Records to inspect
        columns: Explicit field selection (None = fields of the first record)
        strict: Require every record to have exactly the first record's fields

    Returns:
        Ordered list of field names

    Raises:
        RecordShapeError: If a record is not a mapping, lacks a selected
            field, or (strict) has a different field set than the first one
    """
    for index, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise RecordShapeError(
                f"Record {index} is a {type(item).__name__}, expected a mapping of fields",
                index=index,
            )

    if columns:
        selected = list(columns)
        for index, item in enumerate(items):
            missing = [col for col in selected if col not in item]
            if missing:
                raise RecordShapeError(
                    f"Record {index} is missing field(s): {', '.join(missing)}",
                    index=index,
                )
        return selected

    if not items:
        return []

    selected = list(items[0].keys())
    if strict:
        expected = set(selected)
        for index, item in enumerate(items[1:], 1):
            if set(item.keys()) != expected:
                raise RecordShapeError(
                    f"Record {index} has fields {sorted(item.keys())}, expected {sorted(expected)}",
                    index=index,
                )
    return selected


class OutputFormatter(ABC):
    """
    Base class for output formatters.

    Formatters convert a data set into a specific output format and handle
    output to the console stream, a file, or another stream.
    """

    def __init__(
        self,
        output: Path | TextIO | None = None,
        console: Console | None = None,
    ):
        """
        Initialize formatter.

        Args:
            output: File path or stream to write to (None = console stream)
            console: Rich console used for decorative output and messages
        """
        self.output_target = output
        self.console = console or default_console
        self._data: Sequence[Record] = []
        self._columns: list[str] = []
        self._title: str | None = None

    @abstractmethod
    def format_items(
        self,
        items: Sequence[Record],
        columns: Sequence[str] | None = None,
        title: str | None = None,
    ) -> "OutputFormatter":
        """
        Format a data set for output.

        Args:
            items: Records to format
            columns: Fields to include (None = all, in first-record order)
            title: Optional title for the output

        Returns:
            Self for method chaining
        """

    @abstractmethod
    def output(self) -> None:
        """Write formatted output to target (console stream, file, or stream)."""

    def _get_output_stream(self) -> TextIO:
        """Stream for machine-readable output: explicit stream, else the console's file."""
        if self.output_target is None or isinstance(self.output_target, Path):
            return self.console.file
        return self.output_target


class JSONFormatter(OutputFormatter):
    """
    JSON formatter for structured data output.

    Produces an indented JSON array of objects. Forward slashes are left
    unescaped so paths and URLs stay readable.
    """

    def __init__(
        self,
        output: Path | TextIO | None = None,
        console: Console | None = None,
        indent: int = 4,
        ensure_ascii: bool = False,
    ):
        super().__init__(output, console)
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self._formatted: str = ""

    def format_items(
        self,
        items: Sequence[Record],
        columns: Sequence[str] | None = None,
        title: str | None = None,
    ) -> "JSONFormatter":
        """Format items as JSON."""
        self._data = items
        self._title = title
        self._columns = select_columns(items, columns, strict=False) if columns else []

        if columns:
            output_data: Any = [{col: item[col] for col in self._columns} for item in items]
        else:
            output_data = [dict(item) if isinstance(item, Mapping) else item for item in items]

        try:
            self._formatted = json.dumps(
                output_data,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
                allow_nan=False,
                default=str,
            )
        except ValueError as e:
            # NaN and Infinity have no JSON representation
            raise SerializationError(str(e)) from e
        return self

    @property
    def formatted(self) -> str:
        """The serialized JSON text."""
        return self._formatted

    def output(self) -> None:
        """Output JSON to a file (with confirmation) or to the stream."""
        if isinstance(self.output_target, Path):
            self._write_file(self.output_target)
            return

        stream = self._get_output_stream()
        stream.write(self._formatted)
        stream.write("\n")
        stream.flush()

    def _write_file(self, path: Path) -> None:
        try:
            path.write_text(self._formatted + "\n", encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(path, e.strerror or str(e)) from e

        logger.info("Wrote %d records to %s", len(self._data), path)
        UIHelper(self.console).success(f"JSON output written to: {escape(str(path))}")


class TableFormatter(OutputFormatter):
    """
    Table formatter with two renderings.

    Interactive: a Rich table with borders and aligned columns.
    Simple (piped): a tab-separated header line plus one line per record.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        console: Console | None = None,
        interactive: bool = True,
        box: Any = ROUNDED,
    ):
        super().__init__(output, console)
        self.interactive = interactive
        self.box = box
        self._table: Table | None = None
        self._lines: list[str] = []

    def format_items(
        self,
        items: Sequence[Record],
        columns: Sequence[str] | None = None,
        title: str | None = None,
    ) -> "TableFormatter":
        """Format items into a Rich table or tab-separated lines."""
        self._data = items
        self._title = title
        self._columns = select_columns(items, columns, strict=True)
        self._table = None
        self._lines = []

        if not items:
            return self

        if self.interactive:
            self._table = Table(title=title, box=self.box, header_style="bold cyan", border_style="dim")
            for col in self._columns:
                # Use title case for headers
                self._table.add_column(col.replace("_", " ").title())
            for item in items:
                self._table.add_row(*(Text(_cell(item[col])) for col in self._columns))
        else:
            self._lines.append("\t".join(self._columns))
            for item in items:
                self._lines.append("\t".join(_cell(item[col]) for col in self._columns))

        return self

    @property
    def lines(self) -> list[str]:
        """Tab-separated lines of the simple rendering."""
        return list(self._lines)

    def output(self) -> None:
        """Output the table, or a warning when there is nothing to show."""
        if not self._data:
            UIHelper(self.console).warning("No data to display")
            return

        if self._table is not None:
            self.console.print(self._table)
            return

        stream = self._get_output_stream()
        for line in self._lines:
            stream.write(line)
            stream.write("\n")
        stream.flush()


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def get_formatter(
    format: OutputFormat | str,
    output: Path | TextIO | None = None,
    console: Console | None = None,
    **kwargs: Any,
) -> OutputFormatter:
    """
    Factory function to get the formatter for a data format.

    Args:
        format: Output format (json, table)
        output: Output target (None = console stream)
        console: Rich console instance
        **kwargs: Additional formatter-specific options

    Returns:
        OutputFormatter instance

    Raises:
        InvalidFormatError: If format is unknown or has no formatter (terminal)
    """
    format = OutputFormat.parse(format)

    formatters: dict[OutputFormat, type[OutputFormatter]] = {
        OutputFormat.TABLE: TableFormatter,
        OutputFormat.JSON: JSONFormatter,
    }

    formatter_class = formatters.get(format)
    if formatter_class is None:
        raise InvalidFormatError(format.value)

    return formatter_class(output=output, console=console, **kwargs)
