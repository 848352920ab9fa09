"""Console and prompt doubles shared by the tests."""

from collections import deque
from collections.abc import Iterable
from io import StringIO

from rich.console import Console

from conduit_interfaces.utils.ui import CONDUIT_THEME


def make_console() -> Console:
    """Plain, wide console writing to a StringIO."""
    return Console(
        file=StringIO(),
        theme=CONDUIT_THEME,
        force_terminal=False,
        color_system=None,
        width=200,
    )


def console_text(console: Console) -> str:
    """Everything written to a console created by make_console()."""
    return console.file.getvalue()


class ScriptedPrompts:
    """
    Prompt driver that replays canned answers.

    select() pops from selections (and checks the answer is offered);
    confirm() pops from confirmations, falling back to the default.
    """

    def __init__(self, selections: Iterable[str] = (), confirmations: Iterable[bool] = ()):
        self.selections = deque(selections)
        self.confirmations = deque(confirmations)
        self.asked: list[str] = []

    def select(self, message: str, options: dict[str, str], default: str | None = None) -> str:
        self.asked.append(message)
        choice = self.selections.popleft()
        assert choice in options, f"{choice!r} is not one of {list(options)}"
        return choice

    def confirm(self, message: str, default: bool = False) -> bool:
        self.asked.append(message)
        if self.confirmations:
            return self.confirmations.popleft()
        return default
