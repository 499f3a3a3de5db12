"""Tests for the ``uxkit help`` command (cli/commands/help.py)."""

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from uxkit.cli.commands.help import HelpCommand
from uxkit.core.models import CommandOption
from uxkit.core.registry import CommandRegistry


@pytest.fixture
def registry(command_factory: Any) -> CommandRegistry:
    registry = CommandRegistry()
    registry.register(command_factory("study:list", description="List all research studies"))
    registry.register(
        command_factory(
            "study:show",
            description="Show one study",
            options=[CommandOption("format", "Output format", type="string", aliases=("f",))],
        )
    )
    return registry


class TestExecute:
    def test_general_listing(self, registry: CommandRegistry, output: Any) -> None:
        command = HelpCommand(registry, output)
        registry.register(command)

        result = asyncio.run(command.execute([], {}))

        assert result.success is True
        assert result.data == ["help", "study:list", "study:show"]
        assert "Available Commands:" in output.text
        assert "List all research studies" in output.text

    def test_single_command(self, registry: CommandRegistry, output: Any) -> None:
        result = asyncio.run(HelpCommand(registry, output).execute(["study:show"], {}))

        assert result.success is True
        assert "Command: study:show" in output.text
        assert "--format, -f: Output format" in output.text

    def test_unknown_command_is_structured_failure(
        self, registry: CommandRegistry, output: Any,
    ) -> None:
        result = asyncio.run(HelpCommand(registry, output).execute(["nope"], {}))

        assert result.success is False
        assert result.errors == ("Unknown command 'nope'",)
        assert output.error_lines == ["Unknown command 'nope'"]


class TestValidate:
    def test_no_argument_is_valid(self, registry: CommandRegistry, output: Any) -> None:
        assert asyncio.run(HelpCommand(registry, output).validate([], {})).valid is True

    def test_unknown_command(self, registry: CommandRegistry, output: Any) -> None:
        result = asyncio.run(HelpCommand(registry, output).validate(["nope"], {}))
        assert result.valid is False
        assert result.errors[0].field == "command"
        assert result.errors[0].value == "nope"


class TestShowHelp:
    def test_describes_itself(self, registry: CommandRegistry, output: Any) -> None:
        HelpCommand(registry, output).show_help()
        assert "Command: help" in output.text
        assert "command (required): Name of the command to describe" in output.text


class TestThroughApplication:
    def test_help_lists_builtins(self, output: Any) -> None:
        from uxkit.cli.app import build_application

        app = build_application(output=output)
        result = asyncio.run(app.execute(["help"]))

        assert result.success is True
        assert "doctor" in output.text
        assert "help" in output.text

    def test_help_for_unknown_command_fails_validation(self, output: Any) -> None:
        from uxkit.cli.app import build_application

        app = build_application(output=output)
        result = asyncio.run(app.execute(["help", "nope"]))

        assert result.success is False
        assert result.errors == ("command: Unknown command 'nope'",)
