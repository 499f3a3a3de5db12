"""``uxkit doctor`` — environment diagnostics command.

Gathers system information and writes a summary table (or JSON) of
whether the runtime environment satisfies uxkit's requirements.

Missing AI-agent CLIs are reported as WARN: they are only needed when
the ``--codex``/``--cursor`` integrations are used.
"""

from __future__ import annotations

import json
import platform
import sys
from collections.abc import Mapping, Sequence
from importlib import metadata
from typing import Any

from uxkit.core.error_handler import error_message
from uxkit.core.help_system import HelpSystem
from uxkit.core.models import (
    CommandArgument,
    CommandExample,
    CommandOption,
    CommandResult,
    ValidationError,
    ValidationResult,
)
from uxkit.core.protocols import OutputSink
from uxkit.infra.tool_detector import AGENT_TOOLS, detect_tool
from uxkit.version import __version__

OK = "OK"
WARN = "WARN"
FAIL = "FAIL"

FORMATS: tuple[str, ...] = ("table", "json")

Check = tuple[str, str, str]
"""(component, value, status) row."""


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _uxkit_version_check() -> Check:
    return "uxkit", __version__, OK


def _python_version_check() -> Check:
    """Return the Python row; anything older than 3.10 fails."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    return "Python", version, OK if ok else FAIL


def _rich_check() -> Check:
    """Rich is optional: plain output is used without it."""
    try:
        import rich  # noqa: F401
    except ModuleNotFoundError:
        return "rich", "NOT INSTALLED", WARN

    try:
        version = metadata.version("rich")
    except metadata.PackageNotFoundError:
        version = "unknown"
    return "rich", version, OK


def _os_check() -> Check:
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, OK


def _agent_tool_check(name: str) -> Check:
    status = detect_tool(name)
    if status.found:
        return name, str(status.path) if status.path else "found", OK
    return name, "not found", WARN


def collect_checks() -> list[Check]:
    return [
        _uxkit_version_check(),
        _python_version_check(),
        _rich_check(),
        _os_check(),
        *(_agent_tool_check(name) for name in AGENT_TOOLS),
    ]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _table_lines(checks: Sequence[Check]) -> list[str]:
    lines = [
        "uxkit doctor",
        "=" * 56,
        f"{'Component':<12} {'Value':<32} {'Status':<8}",
        "-" * 56,
    ]
    lines += [f"{label:<12} {value:<32} {status:<8}" for label, value, status in checks]
    return lines


def _as_records(checks: Sequence[Check]) -> list[dict[str, str]]:
    return [
        {"component": label, "value": value, "status": status}
        for label, value, status in checks
    ]


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

class DoctorCommand:
    """Run every diagnostic check and report the results."""

    name = "doctor"
    description = "Check the environment uxkit runs in"
    usage = "uxkit doctor [--format table|json]"
    arguments: tuple[CommandArgument, ...] = ()
    options: tuple[CommandOption, ...] = (
        CommandOption(
            name="format",
            description="Output format (table, json)",
            type="string",
            default_value="table",
            aliases=("f",),
        ),
    )
    examples: tuple[CommandExample, ...] = (
        CommandExample("Show diagnostics as a table", "uxkit doctor"),
        CommandExample("Show diagnostics as JSON", "uxkit doctor --format json"),
    )

    def __init__(self, output: OutputSink) -> None:
        self._output = output

    async def execute(self, args: Sequence[str], options: Mapping[str, Any]) -> CommandResult:
        try:
            checks = collect_checks()
            records = _as_records(checks)

            if options.get("format") == "json":
                self._output.writeln(json.dumps(records, indent=2))
            else:
                for line in _table_lines(checks):
                    self._output.writeln(line)
                self._write_install_hints()

            failed = [label for label, _, status in checks if status == FAIL]
            if failed:
                self._output.write_errorln("Some checks failed.")
                return CommandResult(
                    success=False,
                    message="Some checks failed",
                    data=records,
                    errors=tuple(f"{label}: check failed" for label in failed),
                )

            self._output.writeln("All checks passed.")
            return CommandResult.ok("All checks passed", data=records)
        except Exception as exc:  # noqa: BLE001
            message = error_message(exc)
            self._output.write_errorln(f"Diagnostics failed: {message}")
            return CommandResult.failure(f"Diagnostics failed: {message}", errors=[message])

    async def validate(self, args: Sequence[str], options: Mapping[str, Any]) -> ValidationResult:
        errors: list[ValidationError] = []
        output_format = options.get("format")
        if output_format is not None and output_format not in FORMATS:
            errors.append(
                ValidationError(
                    field="format",
                    message='Format must be either "table" or "json"',
                    value=output_format,
                )
            )
        return ValidationResult.from_errors(errors)

    def show_help(self) -> None:
        self._output.writeln(HelpSystem().generate_command_help(self).rstrip("\n"))

    def _write_install_hints(self) -> None:
        missing = [status for status in map(detect_tool, AGENT_TOOLS) if not status.found]
        if not missing:
            return
        self._output.writeln("")
        self._output.writeln("Optional AI agent tools not found. Install with:")
        for status in missing:
            self._output.writeln(f"  {status.name}: {status.install_hint}")
