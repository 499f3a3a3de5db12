"""Core layer — the command contract, registry, help and error mapping.

Rules
-----
* No ``print()`` calls and no terminal I/O.
* No imports from ``cli`` or ``infra``.
* Everything here is deterministic and usable without a terminal.
"""

from uxkit.core.error_handler import ErrorHandler
from uxkit.core.help_system import HelpSystem
from uxkit.core.models import (
    CommandArgument,
    CommandExample,
    CommandOption,
    CommandResult,
    Invocation,
    ValidationError,
    ValidationResult,
)
from uxkit.core.protocols import Command, OutputSink
from uxkit.core.registry import CommandRegistry

__all__: list[str] = [
    "Command",
    "CommandArgument",
    "CommandExample",
    "CommandOption",
    "CommandRegistry",
    "CommandResult",
    "ErrorHandler",
    "HelpSystem",
    "Invocation",
    "OutputSink",
    "ValidationError",
    "ValidationResult",
]
