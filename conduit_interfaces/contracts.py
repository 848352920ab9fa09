"""
Capability contracts for commands that display data.

FormatsAsJson declares a command can emit its data set as JSON.
DisplaysData extends it with the data accessor, the terminal and table
renderers, and the list of supported formats. A command implementing
DisplaysData takes part in the universal --format switch.

Default implementations live in conduit_interfaces.output.mixins.
"""

from abc import ABC, abstractmethod
from typing import Any

Record = dict[str, Any]


class FormatsAsJson(ABC):
    """Contract for commands that can format output as JSON."""

    @abstractmethod
    def output_json(self, data: list[Record]) -> int:
        """Format and output data as JSON, returning an exit code."""


class DisplaysData(FormatsAsJson):
    """Contract for commands that display data in multiple formats."""

    @abstractmethod
    def get_data(self) -> list[Record]:
        """Get the data to be displayed/formatted."""

    @abstractmethod
    def output_terminal(self, data: list[Record]) -> int:
        """Format output for terminal (human-readable)."""

    @abstractmethod
    def output_table(self, data: list[Record]) -> int:
        """Format output as table."""

    @classmethod
    @abstractmethod
    def available_formats(cls) -> dict[str, str]:
        """Get available output formats as name -> description."""
