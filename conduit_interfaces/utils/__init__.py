"""
Utility modules.
"""

from .terminal import is_interactive_output, is_piped_output
from .ui import Icons, UIHelper, console, err_console, err_ui, ui

__all__ = [
    "console",
    "err_console",
    "err_ui",
    "ui",
    "Icons",
    "UIHelper",
    # Terminal detection
    "is_interactive_output",
    "is_piped_output",
]
