"""Protocols (interfaces) consumed by the command framework.

Commands and output sinks satisfy these structurally — no explicit
inheritance required.  The registry, help formatter and orchestrator
depend ONLY on these protocols, never on concrete commands.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from uxkit.core.models import (
    CommandArgument,
    CommandExample,
    CommandOption,
    CommandResult,
    ValidationResult,
)


@runtime_checkable
class OutputSink(Protocol):
    """Line-oriented text sink for the normal and error streams.

    The actual destination (terminal, buffer, file) is the
    implementation's concern.
    """

    def writeln(self, text: str) -> None:
        """Write *text* followed by a newline to the normal stream."""
        ...  # pragma: no cover

    def write_errorln(self, text: str) -> None:
        """Write *text* followed by a newline to the error stream."""
        ...  # pragma: no cover


class Command(Protocol):
    """Contract every command implements.

    Commands are constructed once with their collaborators injected and
    are stateless across invocations: nothing but those collaborators
    may be kept on the instance between :meth:`execute` calls.
    """

    name: str
    """Unique identifier; ``:`` acts as a namespace separator (``study:list``)."""

    description: str
    usage: str
    arguments: Sequence[CommandArgument]
    options: Sequence[CommandOption]
    examples: Sequence[CommandExample]

    async def execute(
        self,
        args: Sequence[str],
        options: Mapping[str, Any],
    ) -> CommandResult:
        """Perform the command's effect.

        Well-behaved implementations catch their own failures and return
        ``CommandResult(success=False, ...)`` instead of raising.
        """
        ...  # pragma: no cover

    async def validate(
        self,
        args: Sequence[str],
        options: Mapping[str, Any],
    ) -> ValidationResult:
        """Check *args* and *options* without side effects.

        Never raises for bad input: every failed rule becomes a
        :class:`~uxkit.core.models.ValidationError` entry.
        """
        ...  # pragma: no cover

    def show_help(self) -> None:
        """Write command-specific help through the command's output sink."""
        ...  # pragma: no cover
