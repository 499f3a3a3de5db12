"""Help text generation from command metadata.

Pure and stateless: every method returns a string and performs no I/O.
Callers decide where the text goes.
"""

from __future__ import annotations

from collections.abc import Iterable

from uxkit.core.protocols import Command
from uxkit.version import __version__

DEFAULT_TITLE = "UX-Kit CLI - UX Research Toolkit"
DEFAULT_TAGLINE = (
    "A lightweight CLI toolkit for UX research: studies, research "
    "questions, sources, interviews and synthesis."
)

_INTEGRATION_FLAGS: tuple[tuple[str, str], ...] = (
    ("--codex", "Enable Codex AI agent integration"),
    ("--cursor", "Enable Cursor IDE integration"),
    ("--custom", "Enable custom AI agent integration"),
)


class HelpSystem:
    """Render help for one command or for the whole command set.

    Parameters
    ----------
    program:
        Executable name shown in the "more information" hint.
    title:
        Banner line of the general help.
    version:
        Version shown under the banner.
    column_width:
        Width the command names are padded to in the general listing.
    """

    def __init__(
        self,
        *,
        program: str = "uxkit",
        title: str = DEFAULT_TITLE,
        version: str = __version__,
        tagline: str = DEFAULT_TAGLINE,
        column_width: int = 20,
    ) -> None:
        self._program = program
        self._title = title
        self._version = version
        self._tagline = tagline
        self._column_width = column_width

    # ------------------------------------------------------------------
    # Single command
    # ------------------------------------------------------------------

    def generate_command_help(self, command: Command) -> str:
        """Render name, description, usage, arguments, options and examples.

        Every listed argument is labelled ``(required)`` whatever its
        ``required`` flag says.
        """
        lines = [
            "",
            f"Command: {command.name}",
            f"Description: {command.description}",
        ]
        if command.usage:
            lines.append(f"Usage: {command.usage}")

        arguments = command.arguments or ()
        if arguments:
            lines += ["", "Arguments:"]
            # TODO: honour CommandArgument.required and print "(optional)".
            lines += [
                f"  {arg.name} (required): {arg.description}" for arg in arguments
            ]

        options = command.options or ()
        if options:
            lines += ["", "Options:"]
            for option in options:
                short = f", -{option.aliases[0]}" if option.aliases else ""
                lines.append(f"  --{option.name}{short}: {option.description}")

        examples = command.examples or ()
        if examples:
            lines += ["", "Examples:"]
            lines += [
                f"  {example.description}: {example.command}" for example in examples
            ]

        return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------
    # Whole command set
    # ------------------------------------------------------------------

    def generate_general_help(self, commands: Iterable[Command]) -> str:
        """Render the banner, one line per command, and the static sections."""
        lines = [
            "",
            self._title,
            f"Version: {self._version}",
            "",
            self._tagline,
            "",
            "Available Commands:",
        ]
        lines += [
            f"  {command.name.ljust(self._column_width)} {command.description}"
            for command in commands
        ]

        lines += ["", "AI Agent Integration:"]
        lines += [
            f"  {flag.ljust(self._column_width)} {text}"
            for flag, text in _INTEGRATION_FLAGS
        ]

        lines += [
            "",
            "For more information about a specific command, use:",
            f"  {self._program} <command> --help",
        ]
        return "\n".join(lines) + "\n"

    @staticmethod
    def format_help_text(title: str, description: str) -> str:
        """Title line, ``=`` underline of the same length, description line."""
        return f"\n{title}\n{'=' * len(title)}\n{description}\n"
