"""Domain models for the command framework.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and a few constructors.  They carry zero
I/O and no dependencies on external packages.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Command metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandArgument:
    """A positional parameter declared by a command.

    Declaration order defines positional binding at dispatch time.
    """

    name: str
    description: str
    required: bool = True
    type: str = "string"


@dataclass(frozen=True, slots=True)
class CommandOption:
    """A named parameter declared by a command."""

    name: str
    """Long flag name, rendered as ``--<name>``."""

    description: str

    type: str = "boolean"
    """One of ``"string"``, ``"number"``, ``"array"`` or ``"boolean"``."""

    required: bool = False

    default_value: Any = None
    """Value used when the caller does not pass the option."""

    aliases: tuple[str, ...] = ()
    """Short flag equivalents.  The first one is the canonical short form."""

    @property
    def takes_value(self) -> bool:
        return self.type in ("string", "number", "array")


@dataclass(frozen=True, slots=True)
class CommandExample:
    """A display-only usage example."""

    description: str
    command: str


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ValidationError:
    """One failed validation rule, scoped to a single field."""

    field: str
    message: str
    value: Any = None

    def format(self) -> str:
        """Render as ``"<field>: <message>"``."""
        return f"{self.field}: {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of :meth:`Command.validate`.

    ``valid`` is ``True`` exactly when ``errors`` is empty when built
    through :meth:`from_errors`.
    """

    valid: bool
    errors: tuple[ValidationError, ...] = ()

    @classmethod
    def passed(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def from_errors(cls, errors: Iterable[ValidationError]) -> ValidationResult:
        collected = tuple(errors)
        return cls(valid=not collected, errors=collected)


# ---------------------------------------------------------------------------
# Outcome record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CommandResult:
    """Uniform outcome of every command execution and every dispatch.

    This is the only contract a scripting caller should depend on.
    """

    success: bool
    message: str
    data: Any = None
    errors: tuple[str, ...] | None = None

    @classmethod
    def ok(cls, message: str, data: Any = None) -> CommandResult:
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(
        cls,
        message: str,
        errors: Iterable[str] | None = None,
    ) -> CommandResult:
        return cls(
            success=False,
            message=message,
            errors=tuple(errors) if errors is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view; ``data`` and ``errors`` are omitted when unset."""
        payload: dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        if self.errors is not None:
            payload["errors"] = list(self.errors)
        return payload


@dataclass(frozen=True, slots=True)
class Invocation:
    """A parsed command line bound to one command's declared parameters."""

    command_name: str
    args: tuple[str, ...] = ()
    options: dict[str, Any] = field(default_factory=dict)
    help_requested: bool = False
