"""Tests for environment-driven settings (settings.py)."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from uxkit.core.help_system import DEFAULT_TITLE
from uxkit.settings import AppSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for key in (
        "UXKIT_PROG_NAME",
        "UXKIT_DESCRIPTION",
        "UXKIT_LOG_LEVEL",
        "UXKIT_LOG_FILE",
        "UXKIT_HELP_COLUMN_WIDTH",
    ):
        monkeypatch.delenv(key, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


class TestDefaults:
    def test_defaults(self) -> None:
        settings = get_settings()
        assert settings.prog_name == "uxkit"
        assert settings.description == DEFAULT_TITLE
        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.help_column_width == 20


class TestEnvironment:
    def test_prefixed_variables_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UXKIT_PROG_NAME", "ux")
        monkeypatch.setenv("UXKIT_LOG_LEVEL", "debug")
        monkeypatch.setenv("UXKIT_HELP_COLUMN_WIDTH", "24")

        settings = AppSettings()
        assert settings.prog_name == "ux"
        assert settings.log_level == "DEBUG"
        assert settings.help_column_width == 24

    def test_log_file_is_a_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("UXKIT_LOG_FILE", str(tmp_path / "uxkit.log"))
        assert AppSettings().log_file == tmp_path / "uxkit.log"

    def test_dotenv_file(self, tmp_path: Path) -> None:
        (tmp_path / ".env").write_text("UXKIT_PROG_NAME=fromfile\n", encoding="utf-8")
        assert AppSettings().prog_name == "fromfile"


class TestValidation:
    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UXKIT_LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_column_width_bounds(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("UXKIT_HELP_COLUMN_WIDTH", "2")
        with pytest.raises(ValidationError):
            AppSettings()

    def test_empty_prog_name(self) -> None:
        with pytest.raises(ValidationError):
            AppSettings(prog_name="")
