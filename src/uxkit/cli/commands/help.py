"""``uxkit help [command]`` — help rendered from command metadata."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from uxkit.core.error_handler import error_message
from uxkit.core.help_system import HelpSystem
from uxkit.core.models import (
    CommandArgument,
    CommandExample,
    CommandOption,
    CommandResult,
    ValidationError,
    ValidationResult,
)
from uxkit.core.protocols import OutputSink
from uxkit.core.registry import CommandRegistry


class HelpCommand:
    """List every registered command, or describe one of them.

    Reads the same registry the application dispatches from, so commands
    registered after this one are listed too.
    """

    name = "help"
    description = "Show help for all commands or for a single command"
    usage = "uxkit help [command]"
    arguments: tuple[CommandArgument, ...] = (
        CommandArgument("command", "Name of the command to describe", required=False),
    )
    options: tuple[CommandOption, ...] = ()
    examples: tuple[CommandExample, ...] = (
        CommandExample("List all commands", "uxkit help"),
        CommandExample("Describe the doctor command", "uxkit help doctor"),
    )

    def __init__(
        self,
        registry: CommandRegistry,
        output: OutputSink,
        help_system: HelpSystem | None = None,
    ) -> None:
        self._registry = registry
        self._output = output
        self._help = help_system or HelpSystem()

    async def execute(self, args: Sequence[str], options: Mapping[str, Any]) -> CommandResult:
        try:
            if args:
                command = self._registry.get(args[0])
                if command is None:
                    message = f"Unknown command '{args[0]}'"
                    self._output.write_errorln(message)
                    return CommandResult.failure(message, errors=[message])
                self._output.writeln(self._help.generate_command_help(command).rstrip("\n"))
                return CommandResult.ok(f"Help for {command.name}")

            commands = sorted(self._registry.list_commands(), key=lambda command: command.name)
            self._output.writeln(self._help.generate_general_help(commands).rstrip("\n"))
            return CommandResult.ok(
                f"Listed {len(commands)} commands",
                data=[command.name for command in commands],
            )
        except Exception as exc:  # noqa: BLE001
            message = error_message(exc)
            self._output.write_errorln(f"Failed to render help: {message}")
            return CommandResult.failure(f"Failed to render help: {message}", errors=[message])

    async def validate(self, args: Sequence[str], options: Mapping[str, Any]) -> ValidationResult:
        errors: list[ValidationError] = []
        if args and not self._registry.has(args[0]):
            errors.append(
                ValidationError(
                    field="command",
                    message=f"Unknown command '{args[0]}'",
                    value=args[0],
                )
            )
        return ValidationResult.from_errors(errors)

    def show_help(self) -> None:
        self._output.writeln(self._help.generate_command_help(self).rstrip("\n"))
