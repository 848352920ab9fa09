"""
Output formatting for conduit commands.

Provides the JSON and table formatters behind the universal --format
option, plus mixins that give commands default output_json/output_table.
"""

from .formatters import (
    FORMAT_DESCRIPTIONS,
    JSONFormatter,
    OutputFormat,
    OutputFormatter,
    TableFormatter,
    get_formatter,
    select_columns,
)
from .mixins import FormatsAsJsonMixin, FormatsAsTableMixin

__all__ = [
    "FORMAT_DESCRIPTIONS",
    "FormatsAsJsonMixin",
    "FormatsAsTableMixin",
    "JSONFormatter",
    "OutputFormat",
    "OutputFormatter",
    "TableFormatter",
    "get_formatter",
    "select_columns",
]
