"""Shared pytest fixtures and configuration for the uxkit test suite.

Guidelines
----------
* No internet access in any test.
* ``shutil.which`` is mocked wherever agent CLIs are probed.
* Core tests must be pure — no side effects.
* Async contract methods are driven with ``asyncio.run``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from uxkit.core.models import (
    CommandArgument,
    CommandExample,
    CommandOption,
    CommandResult,
    ValidationResult,
)


class RecordingOutput:
    """In-memory output sink capturing normal and error lines."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.error_lines: list[str] = []

    def writeln(self, text: str) -> None:
        self.lines.append(text)

    def write_errorln(self, text: str) -> None:
        self.error_lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def make_command(
    name: str = "test",
    *,
    description: str = "Test command",
    usage: str = "",
    arguments: Sequence[CommandArgument] = (),
    options: Sequence[CommandOption] = (),
    examples: Sequence[CommandExample] = (),
    result: CommandResult | None = None,
    validation: ValidationResult | None = None,
) -> Any:
    """Build a command double whose ``execute``/``validate`` are AsyncMocks."""
    command = MagicMock()
    command.name = name
    command.description = description
    command.usage = usage
    command.arguments = tuple(arguments)
    command.options = tuple(options)
    command.examples = tuple(examples)
    command.execute = AsyncMock(
        return_value=result or CommandResult.ok("Command executed"),
    )
    command.validate = AsyncMock(
        return_value=validation or ValidationResult.passed(),
    )
    command.show_help = MagicMock()
    return command


@pytest.fixture
def output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture
def command_factory() -> Any:
    """Return :func:`make_command` so tests can build command doubles."""
    return make_command


@pytest.fixture(autouse=True)
def _restore_uxkit_logger() -> Any:
    """Undo handler and level changes made by ``configure_logging``."""
    logger = logging.getLogger("uxkit")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    for handler in list(logger.handlers):
        if handler not in saved[0]:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(saved[1])
    logger.propagate = saved[2]
