"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
defaults and the small constructor helpers.
"""

from __future__ import annotations

import pytest

from uxkit.core.models import (
    CommandArgument,
    CommandOption,
    CommandResult,
    ValidationError,
    ValidationResult,
)


# ---------------------------------------------------------------------------
# Command metadata
# ---------------------------------------------------------------------------

class TestCommandArgument:
    def test_defaults(self) -> None:
        arg = CommandArgument("name", "Study name")
        assert arg.required is True
        assert arg.type == "string"

    def test_frozen(self) -> None:
        arg = CommandArgument("name", "Study name")
        with pytest.raises(AttributeError):
            arg.name = "other"  # type: ignore[misc]


class TestCommandOption:
    def test_defaults(self) -> None:
        opt = CommandOption("verbose", "Verbose output")
        assert opt.type == "boolean"
        assert opt.required is False
        assert opt.default_value is None
        assert opt.aliases == ()
        assert opt.takes_value is False

    @pytest.mark.parametrize("kind", ["string", "number", "array"])
    def test_value_types_take_a_value(self, kind: str) -> None:
        assert CommandOption("x", "x", type=kind).takes_value is True


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

class TestValidation:
    def test_error_format(self) -> None:
        err = ValidationError(field="x", message="m", value=3)
        assert err.format() == "x: m"

    def test_passed(self) -> None:
        result = ValidationResult.passed()
        assert result.valid is True
        assert result.errors == ()

    def test_from_errors_empty_is_valid(self) -> None:
        assert ValidationResult.from_errors([]).valid is True

    def test_from_errors_keeps_order(self) -> None:
        first = ValidationError("a", "first")
        second = ValidationError("b", "second")
        result = ValidationResult.from_errors([first, second])
        assert result.valid is False
        assert result.errors == (first, second)


# ---------------------------------------------------------------------------
# CommandResult
# ---------------------------------------------------------------------------

class TestCommandResult:
    def test_ok(self) -> None:
        result = CommandResult.ok("Found 0 studies", data=[])
        assert result.success is True
        assert result.data == []
        assert result.errors is None

    def test_failure_with_errors(self) -> None:
        result = CommandResult.failure("boom", errors=["boom"])
        assert result.success is False
        assert result.errors == ("boom",)

    def test_failure_without_errors(self) -> None:
        assert CommandResult.failure("boom").errors is None

    def test_to_dict_omits_unset_fields(self) -> None:
        assert CommandResult.ok("done").to_dict() == {"success": True, "message": "done"}

    def test_to_dict_includes_data_and_errors(self) -> None:
        result = CommandResult(success=False, message="m", data={"k": 1}, errors=("e",))
        assert result.to_dict() == {
            "success": False,
            "message": "m",
            "data": {"k": 1},
            "errors": ["e"],
        }

    def test_frozen(self) -> None:
        result = CommandResult.ok("done")
        with pytest.raises(AttributeError):
            result.success = False  # type: ignore[misc]
