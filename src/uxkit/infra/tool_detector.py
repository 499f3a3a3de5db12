"""Infrastructure: detection of external command-line tools.

Used to report whether the optional AI-agent CLIs that the
``--codex``/``--cursor`` integrations drive are reachable.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

AGENT_TOOLS: tuple[str, ...] = ("codex", "cursor")
"""Executables probed by ``uxkit doctor``."""

_INSTALL_HINTS: dict[str, str] = {
    "codex": "npm install -g @openai/codex",
    "cursor": "Install Cursor from https://cursor.com and enable its shell command",
}


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a PATH probe for one executable.

    Attributes
    ----------
    name : str
        Executable name that was probed.
    found : bool
        Whether the executable was located on PATH.
    path : Path | None
        Absolute path to the executable, or ``None``.
    install_hint : str | None
        Suggested install command.  ``None`` when the tool is present.
    """

    name: str
    found: bool
    path: Path | None
    install_hint: str | None


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str) -> ToolStatus:
    """Probe the system for *name*.

    Returns a :class:`ToolStatus` regardless of whether the tool is
    present — the caller decides whether to abort or merely warn.
    """
    result = shutil.which(name)

    if result is not None:
        return ToolStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_hint=None,
        )

    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_hint=_INSTALL_HINTS.get(name, f"Install {name} and make sure it is on PATH"),
    )
