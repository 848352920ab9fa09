"""
Smoke-test command for the interfaces component.
"""

from rich.console import Console

from conduit_interfaces.utils.ui import UIHelper
from conduit_interfaces.utils.ui import console as default_console


class InitCommand:
    """Confirms the component is installed and registered."""

    name = "init"
    description = "Sample command for interfaces component"

    def __init__(self, console: Console | None = None):
        self.console = console or default_console
        self.ui = UIHelper(self.console)

    def handle(self) -> int:
        self.ui.success("interfaces component is working!", prefix="🚀")
        self.ui.line("This is a sample command. Implement your logic here.")
        return 0
