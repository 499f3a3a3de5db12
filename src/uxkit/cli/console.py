"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) remain
functional even when Rich is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from uxkit.exceptions import MissingDependencyError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``MissingDependencyError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise MissingDependencyError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance, targeting stderr by default."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr, soft_wrap=True)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except MissingDependencyError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


class ConsoleOutput:
	"""Terminal :class:`~uxkit.core.protocols.OutputSink`.

	Normal lines go to stdout, error lines to stderr in red.  Text is
	printed verbatim: Rich markup and highlighting are disabled so help
	strings such as ``[options]`` survive untouched.  One Rich console
	per stream is created on first use and reused.
	"""

	def __init__(self) -> None:
		self._consoles: dict[bool, Any] = {}

	def _console(self, *, stderr: bool) -> Any:
		"""Cached Rich console for the stream, or ``None`` without Rich."""
		if stderr not in self._consoles:
			try:
				self._consoles[stderr] = get_rich_console(stderr=stderr)
			except MissingDependencyError:
				self._consoles[stderr] = None
		return self._consoles[stderr]

	def writeln(self, text: str) -> None:
		rich_console = self._console(stderr=False)
		if rich_console is None:
			print(text, file=sys.stdout)
			return
		rich_console.print(text, markup=False, highlight=False)

	def write_errorln(self, text: str) -> None:
		rich_console = self._console(stderr=True)
		if rich_console is None:
			print(text, file=sys.stderr)
			return
		rich_console.print(text, style="red", markup=False, highlight=False)
