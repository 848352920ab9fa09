"""Tests for the ConduitCommand base and capability contracts."""

import json
import logging
from typing import Any
from unittest.mock import patch

import pytest
from helpers import console_text

from conduit_interfaces.command import ConduitCommand, parse_fields
from conduit_interfaces.config import OutputSettings, Settings
from conduit_interfaces.contracts import DisplaysData, FormatsAsJson
from conduit_interfaces.errors import (
    InvalidFormatError,
    OutputWriteError,
    RecordShapeError,
    SerializationError,
)
from conduit_interfaces.output import OutputFormat, get_formatter


class StubCommand(ConduitCommand):
    """Command with a fixed data set that records what it rendered."""

    name = "stub"
    description = "Stub command"

    records: list[dict[str, Any]] = [
        {"name": "api", "status": "active"},
        {"name": "worker", "status": "growing"},
    ]

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.fetch_count = 0
        self.terminal_data: list[dict[str, Any]] | None = None

    def get_data(self) -> list[dict[str, Any]]:
        self.fetch_count += 1
        return self.records

    def output_terminal(self, data: list[dict[str, Any]]) -> int:
        self.terminal_data = data
        self.ui.line("terminal view")
        return 0


class EmptyCommand(StubCommand):
    records: list[dict[str, Any]] = []


class TestContracts:
    """Tests for the capability contracts."""

    def test_command_implements_contracts(self, make_command):
        command = make_command(StubCommand)
        assert isinstance(command, DisplaysData)
        assert isinstance(command, FormatsAsJson)

    def test_displays_data_extends_formats_as_json(self):
        assert issubclass(DisplaysData, FormatsAsJson)

    def test_contracts_are_abstract(self):
        with pytest.raises(TypeError):
            FormatsAsJson()
        with pytest.raises(TypeError):
            DisplaysData()

    def test_command_base_requires_data_and_terminal_renderer(self):
        with pytest.raises(TypeError):
            ConduitCommand(settings=Settings())

    def test_available_formats(self):
        formats = StubCommand.available_formats()
        assert list(formats) == ["terminal", "json", "table"]
        assert formats["json"] == "Machine-readable JSON format"


class TestResolveFormat:
    """Tests for format resolution and the piping auto-upgrade."""

    def test_default_on_terminal(self, make_command):
        command = make_command(StubCommand, interactive=True)
        assert command.resolve_format(None) is OutputFormat.TERMINAL

    def test_terminal_stays_terminal_on_terminal(self, make_command):
        command = make_command(StubCommand, interactive=True)
        assert command.resolve_format("terminal") is OutputFormat.TERMINAL

    def test_default_upgrades_to_json_when_piped(self, make_command):
        command = make_command(StubCommand, interactive=False)
        assert command.resolve_format(None) is OutputFormat.JSON

    def test_terminal_upgrades_to_json_when_piped(self, make_command):
        command = make_command(StubCommand, interactive=False)
        assert command.resolve_format(OutputFormat.TERMINAL) is OutputFormat.JSON

    def test_table_not_upgraded_when_piped(self, make_command):
        command = make_command(StubCommand, interactive=False)
        assert command.resolve_format("table") is OutputFormat.TABLE

    def test_case_insensitive(self, make_command):
        command = make_command(StubCommand)
        assert command.resolve_format("Json") is OutputFormat.JSON

    def test_unknown_format_is_an_error(self, make_command):
        command = make_command(StubCommand)
        with pytest.raises(InvalidFormatError):
            command.resolve_format("xml")

    def test_auto_upgrade_can_be_disabled(self, make_command):
        settings = Settings(output=OutputSettings(auto_json_when_piped=False))
        command = make_command(StubCommand, interactive=False, settings=settings)
        assert command.resolve_format(None) is OutputFormat.TERMINAL

    def test_configured_default_format(self, make_command):
        settings = Settings(output=OutputSettings(default_format="table"))
        command = make_command(StubCommand, interactive=True, settings=settings)
        assert command.resolve_format(None) is OutputFormat.TABLE


class TestHandle:
    """Tests for dispatch to the renderers."""

    def test_terminal_dispatch_passes_data_unmodified(self, make_command, recording_console):
        command = make_command(StubCommand, interactive=True)
        assert command.handle() == 0
        assert command.terminal_data is StubCommand.records
        assert command.format is OutputFormat.TERMINAL
        assert "terminal view" in console_text(recording_console)

    def test_piped_default_outputs_json(self, make_command, recording_console):
        command = make_command(StubCommand, interactive=False)
        assert command.handle() == 0
        assert command.terminal_data is None
        assert json.loads(console_text(recording_console)) == StubCommand.records

    def test_json_dispatch(self, make_command, recording_console):
        command = make_command(StubCommand, interactive=True)
        assert command.handle(format="json") == 0
        assert json.loads(console_text(recording_console)) == StubCommand.records

    def test_table_dispatch_piped(self, make_command, recording_console):
        command = make_command(StubCommand, interactive=False)
        assert command.handle(format=OutputFormat.TABLE) == 0
        assert console_text(recording_console) == "name\tstatus\napi\tactive\nworker\tgrowing\n"

    def test_table_dispatch_interactive(self, make_command, recording_console):
        command = make_command(StubCommand, interactive=True)
        assert command.handle(format="table") == 0
        output = console_text(recording_console)
        assert "Status" in output
        assert "╭" in output

    def test_table_on_empty_data(self, make_command, recording_console):
        command = make_command(EmptyCommand, interactive=False)
        assert command.handle(format="table") == 0
        output = console_text(recording_console)
        assert "No data to display" in output
        assert "\t" not in output

    def test_invalid_format_raises_before_fetching_data(self, make_command):
        command = make_command(StubCommand)
        with pytest.raises(InvalidFormatError):
            command.handle(format="xml")
        assert command.fetch_count == 0

    def test_data_fetched_once(self, make_command):
        command = make_command(StubCommand, interactive=False)
        command.handle()
        assert command.fetch_count == 1

    def test_output_file(self, make_command, recording_console, tmp_path):
        path = tmp_path / "x.json"
        command = make_command(StubCommand, interactive=False)

        assert command.handle(output=str(path)) == 0

        assert json.loads(path.read_text(encoding="utf-8")) == StubCommand.records
        output = console_text(recording_console)
        assert str(path) in output
        assert '"status"' not in output

    def test_output_file_write_failure(self, make_command, tmp_path):
        command = make_command(StubCommand, interactive=True)
        with pytest.raises(OutputWriteError):
            command.handle(format="json", output=tmp_path / "nope" / "x.json")

    def test_output_ignored_for_table(self, make_command, tmp_path, caplog):
        path = tmp_path / "x.json"
        command = make_command(StubCommand, interactive=False)

        with caplog.at_level(logging.WARNING, logger="conduit_interfaces"):
            assert command.handle(format="table", output=path) == 0

        assert not path.exists()
        assert command.output_path is None
        assert "--output only applies to JSON output" in caplog.text

    def test_fields_selection(self, make_command, recording_console):
        command = make_command(StubCommand, interactive=False)
        command.handle(format="json", fields="name")
        assert json.loads(console_text(recording_console)) == [{"name": "api"}, {"name": "worker"}]

    def test_fields_selection_table(self, make_command, recording_console):
        command = make_command(StubCommand, interactive=False)
        command.handle(format="table", fields=["status"])
        assert console_text(recording_console).splitlines() == ["status", "active", "growing"]

    def test_unknown_field(self, make_command):
        command = make_command(StubCommand, interactive=False)
        with pytest.raises(RecordShapeError):
            command.handle(format="json", fields="owner")

    def test_non_finite_value_is_an_error(self, make_command, recording_console, monkeypatch):
        monkeypatch.setattr(StubCommand, "records", [{"name": "api", "ratio": float("inf")}])
        command = make_command(StubCommand, interactive=False)
        with pytest.raises(SerializationError):
            command.handle(format="json")
        assert console_text(recording_console) == ""

    def test_json_built_through_factory(self, make_command):
        command = make_command(StubCommand, interactive=False)
        with patch("conduit_interfaces.output.mixins.get_formatter", wraps=get_formatter) as mock_factory:
            command.handle(format="json")
        assert mock_factory.call_args.args[0] is OutputFormat.JSON
        assert mock_factory.call_args.kwargs["indent"] == 4

    def test_table_built_through_factory(self, make_command):
        command = make_command(StubCommand, interactive=False)
        with patch("conduit_interfaces.output.mixins.get_formatter", wraps=get_formatter) as mock_factory:
            command.handle(format="table")
        assert mock_factory.call_args.args[0] is OutputFormat.TABLE
        assert mock_factory.call_args.kwargs["interactive"] is False


class TestInteractiveMode:
    """Tests for piped detection helpers on the command."""

    def test_is_piped_output(self, make_command):
        assert make_command(StubCommand, interactive=False).is_piped_output() is True
        assert make_command(StubCommand, interactive=True).is_piped_output() is False

    def test_should_show_interactive_mode(self, make_command):
        command = make_command(StubCommand, interactive=True)
        command.handle()
        assert command.should_show_interactive_mode() is True

    def test_no_interaction_disables_interactive_mode(self, make_command):
        command = make_command(StubCommand, interactive=True)
        command.handle(no_interaction=True)
        assert command.should_show_interactive_mode() is False

    def test_piped_disables_interactive_mode(self, make_command):
        settings = Settings(output=OutputSettings(auto_json_when_piped=False))
        command = make_command(StubCommand, interactive=False, settings=settings)
        command.handle()
        assert command.should_show_interactive_mode() is False

    def test_call_shares_console_and_detection(self, make_command, recording_console):
        command = make_command(StubCommand, interactive=False)
        assert command.call(StubCommand, format="table") == 0
        assert console_text(recording_console).startswith("name\tstatus\n")


class TestParseFields:
    """Tests for parse_fields helper."""

    def test_none(self):
        assert parse_fields(None) is None

    def test_comma_separated(self):
        assert parse_fields("name, status") == ["name", "status"]

    def test_sequence(self):
        assert parse_fields(["name", " status "]) == ["name", "status"]

    def test_blank_means_all(self):
        assert parse_fields(" , ") is None
