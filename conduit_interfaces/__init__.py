"""
Universal output format interfaces for conduit CLI commands.
"""

__version__ = "1.0.0"

from conduit_interfaces.command import ConduitCommand
from conduit_interfaces.contracts import DisplaysData, FormatsAsJson
from conduit_interfaces.errors import (
    ConduitError,
    InvalidFormatError,
    OutputWriteError,
    RecordShapeError,
    SerializationError,
)
from conduit_interfaces.output import FormatsAsJsonMixin, FormatsAsTableMixin, OutputFormat

__all__ = [
    "__version__",
    # Command base & contracts
    "ConduitCommand",
    "DisplaysData",
    "FormatsAsJson",
    "FormatsAsJsonMixin",
    "FormatsAsTableMixin",
    "OutputFormat",
    # Exceptions
    "ConduitError",
    "InvalidFormatError",
    "OutputWriteError",
    "RecordShapeError",
    "SerializationError",
]
