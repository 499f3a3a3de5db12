"""In-memory store mapping command names to command instances.

One registry belongs to one :class:`~uxkit.cli.application.CLIApplication`;
there is no process-wide instance.  Mutation is assumed to happen
single-threaded during application setup.
"""

from __future__ import annotations

from collections.abc import Iterator

from uxkit.core.protocols import Command


class CommandRegistry:
    """Name → command mapping with last-registration-wins semantics."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, command: Command) -> None:
        """Store *command* under its name, silently replacing any previous entry."""
        self._commands[command.name] = command

    def unregister(self, name: str) -> None:
        """Remove *name* if present; no-op otherwise."""
        self._commands.pop(name, None)

    def get(self, name: str) -> Command | None:
        """Return the command registered as *name*, or ``None``."""
        return self._commands.get(name)

    def has(self, name: str) -> bool:
        return name in self._commands

    def list_commands(self) -> list[Command]:
        """Return a snapshot of every registered command."""
        return list(self._commands.values())

    def clear(self) -> None:
        self._commands.clear()

    def size(self) -> int:
        return len(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self.list_commands())
