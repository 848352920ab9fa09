"""Pytest configuration and shared fixtures."""

import logging
import os
from collections.abc import Callable
from typing import Any

import pytest
from helpers import ScriptedPrompts, make_console
from rich.console import Console

from conduit_interfaces.command import ConduitCommand
from conduit_interfaces.config import Settings, reset_settings


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run each test in an empty directory with default settings and clean logging."""
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith("CONDUIT_"):
            monkeypatch.delenv(key)
    reset_settings()

    yield

    reset_settings()
    logger = logging.getLogger("conduit_interfaces")
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


# ============================================================================
# Sample Data
# ============================================================================


@pytest.fixture
def sample_records() -> list[dict[str, Any]]:
    """Two homogeneous records with fields name, status."""
    return [
        {"name": "api", "status": "active"},
        {"name": "worker", "status": "growing"},
    ]


# ============================================================================
# Console & Commands
# ============================================================================


@pytest.fixture
def recording_console() -> Console:
    """Console whose output can be read back with helpers.console_text()."""
    return make_console()


@pytest.fixture
def make_command(recording_console) -> Callable[..., ConduitCommand]:
    """Factory building a command wired to the recording console."""

    def factory(
        command_cls: type[ConduitCommand],
        interactive: bool = True,
        prompts: Any = None,
        settings: Settings | None = None,
    ) -> ConduitCommand:
        return command_cls(
            console=recording_console,
            is_interactive=lambda: interactive,
            settings=settings or Settings(),
            prompts=prompts or ScriptedPrompts(),
        )

    return factory
