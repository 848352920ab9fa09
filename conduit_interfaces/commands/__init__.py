"""
Commands shipped with the interfaces component.

- example: sample data in every output format
- browse: interactive tour of the contracts and mixins
- init: smoke test that the component is registered
"""

from .browse import BrowseInterfacesCommand, BrowseState, transition
from .example import ExampleCommand
from .init import InitCommand

__all__ = [
    "BrowseInterfacesCommand",
    "BrowseState",
    "ExampleCommand",
    "InitCommand",
    "transition",
]
