"""Map raised failures to uniform :class:`CommandResult` records.

Formatting only: nothing here retries or recovers.  Friendly prefixes
are chosen by substring match on the raw message, with the equivalent
Python exception types and ``errno`` values mapped to the same text.
"""

from __future__ import annotations

import errno
from collections.abc import Iterable

from uxkit.core.models import CommandResult, ValidationError

UNKNOWN_ERROR = "Unknown error"


def error_message(error: BaseException) -> str:
    """Return the exception's message, or ``"Unknown error"`` when blank."""
    text = str(error)
    return text if text else UNKNOWN_ERROR


class ErrorHandler:
    """Stateless translator from exceptions to failed results."""

    def handle_error(self, error: BaseException) -> CommandResult:
        """Pass the message through, prefixing the well-known failure kinds."""
        message = error_message(error)
        code = getattr(error, "errno", None)

        if "ENOENT" in message or isinstance(error, FileNotFoundError) or code == errno.ENOENT:
            message = f"File not found: {message}"
        elif "EACCES" in message or isinstance(error, PermissionError) or code == errno.EACCES:
            message = f"Permission denied: {message}"
        elif "Command not found" in message:
            message = f"Command not found: {message}"

        return CommandResult.failure(message)

    def handle_validation_errors(
        self,
        errors: Iterable[ValidationError],
    ) -> CommandResult:
        """One ``"<field>: <message>"`` line per error, order preserved."""
        return CommandResult.failure(
            "Validation failed",
            errors=[error.format() for error in errors],
        )

    def handle_cli_error(self, error: BaseException) -> CommandResult:
        return CommandResult.failure(f"CLI Error: {error_message(error)}")

    def handle_system_error(self, error: BaseException) -> CommandResult:
        return CommandResult.failure(f"System Error: {error_message(error)}")
