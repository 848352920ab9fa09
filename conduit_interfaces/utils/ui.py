"""
Rich UI utilities for decorative terminal output.

Provides the shared themed console, icons, and a small helper for styled
messages, headers, tables and interactive prompts.

Usage:
    from conduit_interfaces.utils.ui import console, ui

    # Status messages
    ui.success("JSON output written")
    ui.error("Write failed", details="Permission denied")
    ui.warning("No data to display")
    ui.info("Try --format=json")

    # Styled headers
    ui.header("Conduit Universal Formats Demo", icon=Icons.TARGET)
    ui.section("Available interfaces")

    # Tables
    table = ui.create_table("Interfaces", columns=["Interface", "Type"])
    table.add_row("DisplaysData", "Contract")
    console.print(table)

    # Prompts
    choice = ui.select("What would you like to explore?", {"details": "Details", "exit": "Exit"})
    if ui.confirm("Run the demo?", default=True):
        ...
"""

from typing import Any

from rich.box import DOUBLE, ROUNDED, SIMPLE
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# =============================================================================
# Custom Theme
# =============================================================================

CONDUIT_THEME = Theme(
    {
        # Status colors
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold cyan",
        "debug": "dim",
        "muted": "dim white",
        "comment": "yellow",
        # UI elements
        "header": "bold magenta",
        "subheader": "bold blue",
        "accent": "bold cyan",
        "highlight": "bold yellow",
        "code": "bold white",
        # Component status
        "status.active": "green",
        "status.launching": "magenta",
        "status.growing": "cyan",
        "status.unknown": "dim",
    }
)

# =============================================================================
# Global Consoles
# =============================================================================

# Command output (stdout). Piped JSON and simple tables go through console.file.
console = Console(theme=CONDUIT_THEME, highlight=True, emoji=True)

# Diagnostics (stderr) so logs and errors never mix with piped data.
err_console = Console(theme=CONDUIT_THEME, stderr=True, highlight=False, emoji=True)

# =============================================================================
# Icons & Symbols
# =============================================================================


class Icons:
    """Unicode icons for consistent visual feedback."""

    # Status
    SUCCESS = "✓"
    ERROR = "✗"
    WARNING = "⚠"
    INFO = "ℹ"
    BULLET = "•"

    # Component status
    ACTIVE = "✅"
    LAUNCHING = "🚀"
    GROWING = "🌱"
    UNKNOWN = "❓"

    # Browser
    TARGET = "🎯"
    SEARCH = "🔍"
    ROCKET = "🚀"
    FOLDER = "📁"
    PALETTE = "🎨"
    EXIT = "❌"
    WAVE = "👋"
    TIP = "💡"
    LIVE = "🔴"


# =============================================================================
# UI Helper Class
# =============================================================================


class UIHelper:
    """Central UI helper for consistent visual output and prompts."""

    def __init__(self, console: Console):
        self.console = console
        self.icons = Icons

    # -------------------------------------------------------------------------
    # Status Messages
    # -------------------------------------------------------------------------

    def success(self, message: str, details: str | None = None, prefix: str = Icons.SUCCESS) -> None:
        """Print a success message."""
        self._status(message, details, prefix, "success")

    def error(self, message: str, details: str | None = None, prefix: str = Icons.ERROR) -> None:
        """Print an error message."""
        text = Text()
        text.append(f"{prefix} ", style="error")
        text.append(message, style="error")
        if details:
            text.append(f"\n   {details}", style="muted")
        self.console.print(text, soft_wrap=True)

    def warning(self, message: str, details: str | None = None, prefix: str = Icons.WARNING) -> None:
        """Print a warning message."""
        self._status(message, details, prefix, "warning")

    def info(self, message: str, details: str | None = None, prefix: str = Icons.INFO) -> None:
        """Print an info message."""
        self._status(message, details, prefix, "info")

    def _status(self, message: str, details: str | None, prefix: str, style: str) -> None:
        text = Text()
        text.append(f"{prefix} ", style=style)
        text.append_text(Text.from_markup(message))
        if details:
            text.append(f"\n   {details}", style="muted")
        self.console.print(text, soft_wrap=True)

    def comment(self, message: str) -> None:
        """Print a highlighted remark (yellow)."""
        self.console.print(f"[comment]{message}[/comment]")

    def line(self, message: str = "") -> None:
        """Print text exactly as given (no markup, emoji codes or highlighting)."""
        self.console.print(message, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def newline(self, count: int = 1) -> None:
        """Print newlines."""
        for _ in range(count):
            self.console.print()

    # -------------------------------------------------------------------------
    # Headers & Sections
    # -------------------------------------------------------------------------

    def header(
        self,
        title: str,
        subtitle: str | None = None,
        icon: str | None = None,
        style: str = "header",
    ) -> None:
        """Print a styled header banner."""
        icon_str = f"{icon} " if icon else ""

        content = Text()
        content.append(f"{icon_str}{title}", style=style)
        if subtitle:
            content.append(f"\n{subtitle}", style="muted")

        self.console.print(Panel(content, box=DOUBLE, border_style=style, padding=(0, 2)))

    def section(self, title: str, icon: str | None = None, style: str = "subheader") -> None:
        """Print a section header with rule."""
        icon_str = f"{icon} " if icon else ""
        self.console.print()
        self.console.print(Rule(f"{icon_str}{title}", style=style, align="left"))

    # -------------------------------------------------------------------------
    # Tables
    # -------------------------------------------------------------------------

    def create_table(
        self,
        title: str | None = None,
        columns: list[str] | None = None,
        show_header: bool = True,
        box_style: Any = ROUNDED,
        header_style: str = "bold cyan",
        border_style: str = "dim",
    ) -> Table:
        """Create a styled table."""
        table = Table(
            title=title,
            show_header=show_header,
            box=box_style,
            header_style=header_style,
            border_style=border_style,
        )

        if columns:
            for col in columns:
                table.add_column(col)

        return table

    def key_value_table(
        self,
        data: dict[str, Any],
        title: str | None = None,
        key_style: str = "bold cyan",
    ) -> Table:
        """Create a two-column Property/Value table."""
        table = Table(title=title, box=SIMPLE, padding=(0, 1), header_style="bold cyan")
        table.add_column("Property", style=key_style, no_wrap=True)
        table.add_column("Value")

        for key, value in data.items():
            table.add_row(key, Text(str(value)) if value is not None else "[dim]N/A[/dim]")

        return table

    # -------------------------------------------------------------------------
    # Interactive / Confirmation
    # -------------------------------------------------------------------------

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask for confirmation with styled prompt."""
        default_hint = "[Y/n]" if default else "[y/N]"
        response = self.console.input(f"[bold]{message}[/bold] {escape(default_hint)} ").strip().lower()
        if not response:
            return default
        return response in ("y", "yes", "1", "true")

    def select(self, message: str, options: dict[str, str], default: str | None = None) -> str:
        """
        Ask the user to pick one of several options.

        Options are listed with a number. The answer may be the number or
        the option key; an empty answer picks the default.

        Args:
            message: Prompt label
            options: Mapping of option key to display label (in display order)
            default: Key returned on empty input

        Returns:
            The chosen option key
        """
        if not options:
            raise ValueError("select() needs at least one option")

        keys = list(options)
        self.console.print(f"[bold]{message}[/bold]")
        for number, key in enumerate(keys, 1):
            marker = " [muted](default)[/muted]" if key == default else ""
            self.console.print(f"  [accent]{number}[/accent]. {options[key]}{marker}")

        while True:
            response = self.console.input(f"[bold]{Icons.BULLET}[/bold] ").strip()
            if not response and default is not None:
                return default
            if response.isdigit() and 1 <= int(response) <= len(keys):
                return keys[int(response) - 1]
            if response in options:
                return response
            self.warning(f"Please choose 1-{len(keys)}")


# =============================================================================
# Singleton UI Instances
# =============================================================================

ui = UIHelper(console)
err_ui = UIHelper(err_console)

__all__ = [
    "CONDUIT_THEME",
    "Icons",
    "Table",
    "UIHelper",
    "console",
    "err_console",
    "err_ui",
    "ui",
]
