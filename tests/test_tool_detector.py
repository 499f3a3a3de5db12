"""Tests for executable detection (infra/tool_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from uxkit.infra.tool_detector import AGENT_TOOLS, ToolStatus, detect_tool


class TestDetectTool:
    @patch("uxkit.infra.tool_detector.shutil.which")
    def test_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/usr/local/bin/codex"
        status = detect_tool("codex")

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.path.name == "codex"
        assert status.install_hint is None
        mock_which.assert_called_once_with("codex")

    @patch("uxkit.infra.tool_detector.shutil.which", return_value=None)
    def test_missing_known_tool_has_hint(self, _mock_which: MagicMock) -> None:
        status = detect_tool("codex")
        assert status.found is False
        assert status.path is None
        assert status.install_hint == "npm install -g @openai/codex"

    @patch("uxkit.infra.tool_detector.shutil.which", return_value=None)
    def test_missing_unknown_tool_has_generic_hint(self, _mock_which: MagicMock) -> None:
        status = detect_tool("whatever")
        assert status.install_hint is not None
        assert "whatever" in status.install_hint


class TestToolStatus:
    def test_frozen(self) -> None:
        status = ToolStatus(name="cursor", found=False, path=None, install_hint="x")
        with pytest.raises(AttributeError):
            status.found = True  # type: ignore[misc]

    def test_agent_tools(self) -> None:
        assert AGENT_TOOLS == ("codex", "cursor")
