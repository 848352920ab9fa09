"""
Interactive interface browser.

Usage:
    conduit interfaces browse
    conduit interfaces browse --format=json   (for automation)

On a terminal the command shows a summary table and then a menu loop:

    menu ──details──▶ details ──▶ menu
         ──examples─▶ examples ─▶ menu
         ──files────▶ files ────▶ menu
         ──formats──▶ formats ──▶ menu
         ──exit─────▶ exit

Prompts go through an injected driver (select/confirm) so the loop can be
scripted.
"""

import logging
from enum import Enum
from typing import Any

from rich.markup import escape

from conduit_interfaces.command import ConduitCommand
from conduit_interfaces.commands.example import ExampleCommand
from conduit_interfaces.output import OutputFormat
from conduit_interfaces.utils.ui import Icons

logger = logging.getLogger(__name__)


class BrowseState(str, Enum):
    """States of the interactive browser."""

    MENU = "menu"
    DETAILS = "details"
    EXAMPLES = "examples"
    FILES = "files"
    FORMATS = "formats"
    EXIT = "exit"


# Event emitted when a view has finished rendering
DONE = "done"

TRANSITIONS: dict[BrowseState, dict[str, BrowseState]] = {
    BrowseState.MENU: {
        "details": BrowseState.DETAILS,
        "examples": BrowseState.EXAMPLES,
        "files": BrowseState.FILES,
        "formats": BrowseState.FORMATS,
        "exit": BrowseState.EXIT,
    },
    BrowseState.DETAILS: {DONE: BrowseState.MENU},
    BrowseState.EXAMPLES: {DONE: BrowseState.MENU},
    BrowseState.FILES: {DONE: BrowseState.MENU},
    BrowseState.FORMATS: {DONE: BrowseState.MENU},
    BrowseState.EXIT: {},
}

MENU_OPTIONS: dict[str, str] = {
    "details": f"{Icons.SEARCH} View detailed interface information",
    "examples": f"{Icons.ROCKET} See usage examples",
    "files": f"{Icons.FOLDER} Browse interface files",
    "formats": f"{Icons.PALETTE} Test output formats",
    "exit": f"{Icons.EXIT} Exit",
}


def transition(state: BrowseState, event: str) -> BrowseState:
    """
    Next browser state for an event.

    Raises:
        ValueError: If the event is not valid in the current state
    """
    try:
        return TRANSITIONS[state][event]
    except KeyError:
        raise ValueError(f"No transition from '{state.value}' on '{event}'") from None


INTERFACES: list[dict[str, str]] = [
    {
        "interface": "DisplaysData",
        "type": "Contract",
        "purpose": "Universal output format contract",
        "methods": "get_data(), output_terminal(), output_json(), output_table(), available_formats()",
        "file": "conduit_interfaces/contracts.py",
    },
    {
        "interface": "FormatsAsJson",
        "type": "Contract",
        "purpose": "JSON output formatting contract",
        "methods": "output_json()",
        "file": "conduit_interfaces/contracts.py",
    },
    {
        "interface": "FormatsAsJsonMixin",
        "type": "Mixin",
        "purpose": "JSON formatting implementation",
        "methods": "output_json()",
        "file": "conduit_interfaces/output/mixins.py",
    },
    {
        "interface": "FormatsAsTableMixin",
        "type": "Mixin",
        "purpose": "Table formatting with Rich",
        "methods": "output_table()",
        "file": "conduit_interfaces/output/mixins.py",
    },
    {
        "interface": "ConduitCommand",
        "type": "Abstract Class",
        "purpose": "Universal command foundation",
        "methods": "handle(), get_data(), output_terminal(), available_formats()",
        "file": "conduit_interfaces/command.py",
    },
]


class BrowseInterfacesCommand(ConduitCommand):
    """Browse the available output interfaces interactively."""

    name = "browse"
    description = "Browse available Conduit interfaces interactively"
    table_title = "Conduit Interfaces"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.history: list[BrowseState] = []

    def get_data(self) -> list[dict[str, Any]]:
        """Get interface data for browsing."""
        return [dict(item) for item in INTERFACES]

    def output_terminal(self, data: list[dict[str, Any]]) -> int:
        """Summary table, then the interactive menu when on a terminal."""
        self.ui.header("Conduit Universal Interface System", icon=Icons.TARGET)
        self.ui.section("Available interfaces and their purposes")

        table = self.ui.create_table(columns=["Interface", "Type", "Purpose"])
        for item in data:
            table.add_row(escape(item["interface"]), escape(item["type"]), escape(item["purpose"]))
        self.console.print(table)
        self.ui.newline()

        if self.should_show_interactive_mode():
            return self.run_interactive_mode(data)

        self.show_quick_help()
        return 0

    def run_interactive_mode(self, data: list[dict[str, Any]]) -> int:
        """Run the menu loop until the user exits."""
        self.history = []
        views = {
            BrowseState.DETAILS: self.show_detailed_view,
            BrowseState.EXAMPLES: self.show_examples,
            BrowseState.FILES: self.show_files,
            BrowseState.FORMATS: self.demo_formats,
        }

        state = BrowseState.MENU
        while state is not BrowseState.EXIT:
            self.history.append(state)
            if state is BrowseState.MENU:
                choice = self.prompts.select("What would you like to explore?", MENU_OPTIONS, default="details")
                state = transition(state, choice)
                continue

            views[state](data)
            self.ui.newline()
            state = transition(state, DONE)

        self.history.append(state)
        logger.debug("Browser path: %s", " -> ".join(s.value for s in self.history))
        self.ui.info("Happy coding with Conduit interfaces!", prefix=Icons.WAVE)
        return 0

    def show_detailed_view(self, data: list[dict[str, Any]]) -> None:
        """Show detailed interface information."""
        options = {item["interface"]: f"{item['interface']} ({item['type']})" for item in data}
        choice = self.prompts.select("Which interface would you like to explore?", options)
        selected = next(item for item in data if item["interface"] == choice)

        self.ui.info(f"{escape(selected['interface'])} Details", prefix=Icons.SEARCH)
        self.console.print(
            self.ui.key_value_table(
                {
                    "Type": selected["type"],
                    "Purpose": selected["purpose"],
                    "Methods": selected["methods"],
                    "File Location": selected["file"],
                }
            )
        )

    def show_examples(self, data: list[dict[str, Any]]) -> None:
        """Show usage examples."""
        self.ui.info("Usage Examples", prefix=Icons.ROCKET)

        self.ui.newline()
        self.ui.comment("1. Subclassing ConduitCommand:")
        self.ui.line("   class MyCommand(ConduitCommand):")
        self.ui.line("       def get_data(self): return [...]")
        self.ui.line("       def output_terminal(self, data): ...")

        self.ui.newline()
        self.ui.comment("2. Using the mixins directly:")
        self.ui.line("   class MyCommand(FormatsAsJsonMixin, FormatsAsTableMixin, DisplaysData): ...")

        self.ui.newline()
        self.ui.comment("3. Testing different formats:")
        self.ui.line("   conduit my-command --format=json")
        self.ui.line("   conduit my-command --format=table")
        self.ui.line("   conduit my-command | jq '.[].name'")

    def show_files(self, data: list[dict[str, Any]]) -> None:
        """Show interface file locations."""
        self.ui.info("Interface Files", prefix=Icons.FOLDER)

        table = self.ui.create_table(columns=["Interface", "File Path"])
        for item in data:
            table.add_row(escape(item["interface"]), escape(item["file"]))
        self.console.print(table)

        self.ui.newline()
        self.ui.comment(f"{Icons.TIP} Tip: These files are in the conduit_interfaces package")

    def demo_formats(self, data: list[dict[str, Any]]) -> None:
        """Show the formats and optionally run the example command in two of them."""
        self.ui.info("Output Format Demo", prefix=Icons.PALETTE)

        self.ui.newline()
        self.ui.comment("Available formats for every Conduit command:")

        table = self.ui.create_table(columns=["Format", "Usage", "Best For"])
        table.add_row("terminal", "Default interactive display", "Human reading")
        table.add_row("json", "--format=json or piped output", "Automation & jq")
        table.add_row("table", "--format=table", "Data analysis")
        table.add_row("file", "--output=file.json", "Reports & exports")
        self.console.print(table)

        self.ui.newline()

        if self.prompts.confirm("Would you like to see a live demo?", default=True):
            for fmt in (OutputFormat.JSON, OutputFormat.TABLE):
                self.ui.newline()
                self.ui.comment(f"{Icons.LIVE} Running: conduit interfaces example --format={fmt.value}")
                self.call(ExampleCommand, format=fmt)

    def show_quick_help(self) -> None:
        """Show quick help information."""
        self.ui.info("Quick Help:", prefix=Icons.TIP)
        self.ui.line("   Run without piping for interactive mode")
        self.ui.line("   --format=json    Export as JSON")
        self.ui.line("   --format=table   Show as data table")
        self.ui.line("   --output=file    Save to file")
