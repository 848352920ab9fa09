"""
Example command demonstrating universal output formats.

Usage:
    conduit interfaces example
    conduit interfaces example --format=json
    conduit interfaces example --format=table
    conduit interfaces example | jq '.[].name'
"""

from typing import Any

from rich.markup import escape

from conduit_interfaces.command import ConduitCommand
from conduit_interfaces.utils.ui import Icons

STATUS_ICONS = {
    "active": Icons.ACTIVE,
    "launching": Icons.LAUNCHING,
    "growing": Icons.GROWING,
}

SAMPLE_COMPONENTS: list[dict[str, Any]] = [
    {
        "name": "Conduit Interfaces",
        "status": "active",
        "version": "1.0.0",
        "description": "Universal output format foundation",
    },
    {
        "name": "Developer Liberation",
        "status": "launching",
        "version": "∞",
        "description": "Eliminating developer workflow pain",
    },
    {
        "name": "Component Ecosystem",
        "status": "growing",
        "version": "2.0.0",
        "description": "Modular CLI architecture",
    },
]


def status_icon(status: str) -> str:
    """Icon for a component status, ❓ when unknown."""
    return STATUS_ICONS.get(status, Icons.UNKNOWN)


class ExampleCommand(ConduitCommand):
    """Sample components rendered in every output format."""

    name = "example"
    description = "Example command showing universal output formats"
    table_title = "Conduit Components"

    def get_data(self) -> list[dict[str, Any]]:
        """Get sample data for demonstration."""
        return [dict(component) for component in SAMPLE_COMPONENTS]

    def output_terminal(self, data: list[dict[str, Any]]) -> int:
        """Custom terminal output with status icons."""
        self.ui.header("Conduit Universal Formats Demo", icon=Icons.TARGET)
        self.ui.newline()

        for component in data:
            status = str(component.get("status", ""))
            style = f"status.{status}" if status in STATUS_ICONS else "status.unknown"
            self.console.print(
                f"  {status_icon(status)} [comment]{escape(str(component['name']))}[/comment] "
                f"v{escape(str(component['version']))} [{style}]({escape(status)})[/{style}]",
                emoji=False,
                highlight=False,
            )
            self.ui.line(f"     {component['description']}")
            self.ui.newline()

        self.ui.info("Try different formats:", prefix=Icons.TIP)
        self.ui.line("   --format=json    (for automation)")
        self.ui.line("   --format=table   (for data display)")
        self.ui.line("   | jq             (auto-detects piping!)")

        return 0
