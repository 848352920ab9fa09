"""
Terminal detection helpers.

Output is considered piped when the stream is not attached to a TTY
(redirected to a file, a pipe, or another process).
"""

import sys
from typing import TextIO


def is_interactive_output(stream: TextIO | None = None) -> bool:
    """Return True when the stream (default: current stdout) is a TTY."""
    if stream is None:
        stream = sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed stream
        return False


def is_piped_output(stream: TextIO | None = None) -> bool:
    """Return True when output is redirected away from a terminal."""
    return not is_interactive_output(stream)
