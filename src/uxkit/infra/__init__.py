"""Infrastructure layer — operating-system probes.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by commands.
"""

from uxkit.infra.tool_detector import AGENT_TOOLS, ToolStatus, detect_tool

__all__: list[str] = [
    "AGENT_TOOLS",
    "ToolStatus",
    "detect_tool",
]
