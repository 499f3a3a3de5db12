"""Custom exception hierarchy for uxkit.

Validation problems are never raised: commands report them as
:class:`~uxkit.core.models.ValidationError` records.  Everything that
*is* raised and crosses a layer boundary inherits from
:class:`UxKitError` so the CLI error boundary can render a clean
message without leaking internal stack traces.

Hierarchy
---------
UxKitError
├── DispatchError
│   ├── UnknownCommandError
│   └── ArgumentParseError
├── ExecutionError
└── MissingDependencyError
"""

from __future__ import annotations


class UxKitError(Exception):
    """Base exception for all uxkit errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Dispatch --------------------------------------------------------------

class DispatchError(UxKitError):
    """Raised when an invocation cannot be routed to a command.

    No command code runs when this is raised.
    """


class UnknownCommandError(DispatchError):
    """Raised when the requested command name is not registered."""

    def __init__(self, name: str, *, hint: str | None = None) -> None:
        super().__init__(f"unknown command '{name}'", hint=hint)
        self.name: str = name


class ArgumentParseError(DispatchError):
    """Raised when the command line is syntactically malformed."""


# --- Execution -------------------------------------------------------------

class ExecutionError(UxKitError):
    """Raised by command collaborators when their work fails.

    The built-in commands return structured failures instead; this is
    the exception for commands plugged in by applications.  When one
    escapes ``execute``, the orchestrator reports its message and, if
    set, its hint on the error sink.
    """


# --- Environment / tooling -------------------------------------------------

class MissingDependencyError(UxKitError):
    """Raised when an optional runtime dependency is not installed."""
