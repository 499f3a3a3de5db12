"""Command-line orchestrator: parse, dispatch, validate, execute, report.

:class:`CLIApplication` owns a :class:`~uxkit.core.registry.CommandRegistry`
and an ``argparse`` parser derived from the registered commands.  Each
call to :meth:`CLIApplication.execute` walks one invocation through

    parse → lookup → validate → execute

and always ends in exactly one :class:`~uxkit.core.models.CommandResult`.
Commands are expected to return structured failures; exceptions they
raise anyway are caught here and never escape :meth:`execute`.

Output collaborators are optional.  Without a normal output sink, help
and version text go to a :class:`~uxkit.cli.console.ConsoleOutput`;
without an error sink, failures are only returned and logged.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any, NoReturn

from uxkit.cli.console import ConsoleOutput
from uxkit.core.error_handler import ErrorHandler, error_message
from uxkit.core.help_system import DEFAULT_TITLE
from uxkit.core.models import CommandOption, CommandResult, Invocation
from uxkit.core.protocols import Command, OutputSink
from uxkit.core.registry import CommandRegistry
from uxkit.exceptions import (
    ArgumentParseError,
    DispatchError,
    UnknownCommandError,
    UxKitError,
)
from uxkit.version import __version__

SUCCESS_MESSAGE = "Command executed successfully"
HELP_MESSAGE = "Help displayed"
VERSION_MESSAGE = "Version displayed"

INTEGRATION_FLAGS: tuple[tuple[str, str], ...] = (
    ("codex", "enable Codex AI agent integration"),
    ("cursor", "enable Cursor IDE integration"),
    ("custom", "enable custom AI agent integration"),
)

_HELP_FLAGS = frozenset({"-h", "--help"})
_VERSION_FLAGS = frozenset({"-V", "--version"})
_COMMAND_DEST = "__command__"


# ---------------------------------------------------------------------------
# Parsing layer
# ---------------------------------------------------------------------------

class _ParserExit(Exception):
    """Raised in place of ``sys.exit`` once argparse has printed its text."""

    def __init__(self, status: int, message: str | None) -> None:
        super().__init__(message or "")
        self.status = status
        self.message = message


class CommandLineParser(argparse.ArgumentParser):
    """``argparse`` parser that reports through callbacks instead of exiting.

    * Usage errors raise :class:`~uxkit.exceptions.ArgumentParseError`.
    * Help text is handed to *emit* rather than written to stdout.
    * Sub-parsers inherit both behaviours (argparse builds them with
      ``type(self)`` and forwards the ``emit`` keyword).
    """

    def __init__(
        self,
        *args: Any,
        emit: Callable[[str], None] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._emit: Callable[[str], None] = emit or (lambda text: print(text))

    def print_help(self, file: Any = None) -> None:
        self._emit(self.format_help().rstrip("\n"))

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        raise _ParserExit(status, message)

    def error(self, message: str) -> NoReturn:
        raise ArgumentParseError(message, hint=self.format_usage().strip())


def _number(value: str) -> int | float:
    """argparse ``type=`` converter for ``"number"`` options."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc


def _arg_dest(index: int) -> str:
    return f"__arg_{index}"


def _option_dest(index: int) -> str:
    return f"__opt_{index}"


def _flag_dest(name: str) -> str:
    return f"__flag_{name}"


def _add_option(parser: argparse.ArgumentParser, index: int, option: CommandOption) -> None:
    """Declare *option* on *parser* according to its ``type``."""
    flags = [f"--{option.name}", *(f"-{alias}" for alias in option.aliases)]
    dest = _option_dest(index)

    if option.type == "array":
        parser.add_argument(
            *flags, dest=dest, action="append", default=None,
            metavar="<value>", help=option.description,
        )
    elif option.takes_value:
        parser.add_argument(
            *flags, dest=dest, default=option.default_value,
            type=_number if option.type == "number" else str,
            metavar="<value>", help=option.description,
        )
    else:
        parser.add_argument(
            *flags, dest=dest, action="store_true",
            default=bool(option.default_value), help=option.description,
        )


def _resolve_option(option: CommandOption, value: Any) -> Any:
    if option.type == "array":
        if value is not None:
            return list(value)
        return list(option.default_value or ())
    return value


def _reserved_flags(command: Command) -> list[str]:
    """Flags declared by *command* that collide with ``-h``/``--help``."""
    clashes = []
    for option in command.options or ():
        flags = [f"--{option.name}", *(f"-{alias}" for alias in option.aliases)]
        clashes += [flag for flag in flags if flag in _HELP_FLAGS]
    return clashes


def _before_separator(tokens: Sequence[str]) -> list[str]:
    """Tokens up to (excluding) a ``--`` end-of-options marker."""
    tokens = list(tokens)
    if "--" in tokens:
        return tokens[: tokens.index("--")]
    return tokens


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

class CLIApplication:
    """Register commands and run command lines against them.

    Parameters
    ----------
    registry:
        Store for the commands.  A fresh one is created when omitted, so
        independent applications never share state.
    prog, description, version:
        Shown in parser usage, help and version output.
    error_handler:
        Maps exceptions to results.  Defaults to :class:`ErrorHandler`.
    """

    def __init__(
        self,
        registry: CommandRegistry | None = None,
        *,
        prog: str = "uxkit",
        description: str = DEFAULT_TITLE,
        version: str = __version__,
        error_handler: ErrorHandler | None = None,
    ) -> None:
        self._registry: CommandRegistry = registry if registry is not None else CommandRegistry()
        self._prog = prog
        self._description = description
        self._version = version
        self._error_handler: ErrorHandler = error_handler or ErrorHandler()
        self._output: OutputSink | None = None
        self._error_output: OutputSink | None = None
        self._default_output: OutputSink | None = None
        self._logger: logging.Logger = logging.getLogger(__name__)
        self._parser: CommandLineParser | None = None

    # ------------------------------------------------------------------
    # Collaborators
    # ------------------------------------------------------------------

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def set_output(self, output: OutputSink) -> None:
        self._output = output

    def set_error_output(self, error_output: OutputSink) -> None:
        self._error_output = error_output

    def set_logger(self, logger: logging.Logger) -> None:
        self._logger = logger

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_command(self, command: Command) -> None:
        """Add *command* to the registry and to the parsing layer.

        A command registered under an existing name replaces it.

        Raises
        ------
        ArgumentParseError
            If the command's declared parameters cannot be expressed on
            the command line (e.g. two options sharing a flag).  The
            registry is left as it was before the call.  ``-h`` and
            ``--help`` are reserved for command help.
        """
        reserved = _reserved_flags(command)
        if reserved:
            raise ArgumentParseError(
                f"invalid definition for command '{command.name}': "
                f"{', '.join(reserved)} is reserved for help",
            )

        previous = self._registry.get(command.name)
        self._registry.register(command)
        try:
            self._parser = self._build_parser()
        except argparse.ArgumentError as exc:
            if previous is not None:
                self._registry.register(previous)
            else:
                self._registry.unregister(command.name)
            self._parser = None
            raise ArgumentParseError(
                f"invalid definition for command '{command.name}': {exc}",
            ) from exc
        self._logger.debug("Registered command %s", command.name)

    def unregister_command(self, name: str) -> None:
        self._registry.unregister(name)
        self._parser = None

    def get_command(self, name: str) -> Command | None:
        return self._registry.get(name)

    def list_commands(self) -> list[Command]:
        return self._registry.list_commands()

    def get_parser(self) -> CommandLineParser:
        """Return the parser for the currently registered commands."""
        if self._parser is None:
            self._parser = self._build_parser()
        return self._parser

    # ------------------------------------------------------------------
    # Help / version
    # ------------------------------------------------------------------

    def show_help(self) -> None:
        self._emit(self.get_parser().format_help().rstrip("\n"))

    def show_version(self) -> None:
        self._emit(f"{self._prog} {self._version}")

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def execute(self, argv: Sequence[str] | None = None) -> CommandResult:
        """Run one command line and return its outcome.

        *argv* excludes the program name; ``sys.argv[1:]`` is used when
        it is ``None``.  Never raises for command or usage failures.
        """
        tokens = list(sys.argv[1:] if argv is None else argv)
        self._logger.debug("Dispatching %s", tokens)

        if not tokens or tokens[0] in _HELP_FLAGS:
            self.show_help()
            return CommandResult.ok(HELP_MESSAGE)
        if tokens[0] in _VERSION_FLAGS:
            self.show_version()
            return CommandResult.ok(VERSION_MESSAGE)

        try:
            invocation = self._parse(tokens)
        except _ParserExit as exc:
            if exc.status == 0:
                return CommandResult.ok(HELP_MESSAGE)
            return self._dispatch_failure(ArgumentParseError(exc.message or "invalid usage"))
        except DispatchError as exc:
            return self._dispatch_failure(exc)

        if invocation is None:
            self.show_help()
            return CommandResult.ok(HELP_MESSAGE)

        command = self._registry.get(invocation.command_name)
        if command is None:
            return self._dispatch_failure(UnknownCommandError(invocation.command_name))

        if invocation.help_requested:
            command.show_help()
            return CommandResult.ok(HELP_MESSAGE)

        return await self._run(command, invocation)

    async def _run(self, command: Command, invocation: Invocation) -> CommandResult:
        """Validate, then execute; the command never runs on invalid input."""
        args = list(invocation.args)
        options = dict(invocation.options)

        try:
            validation = await command.validate(args, options)
            if not validation.valid:
                result = self._error_handler.handle_validation_errors(validation.errors)
                self._logger.debug("Validation failed for %s: %s", command.name, result.errors)
                details = "; ".join(result.errors or ())
                self._report(f"Error: {result.message}: {details}" if details else f"Error: {result.message}")
                return result

            self._logger.debug("Executing %s args=%s", command.name, args)
            outcome = await command.execute(args, options)
        except Exception as exc:  # noqa: BLE001
            handled = self._error_handler.handle_error(exc)
            self._logger.debug("Command %s raised", command.name, exc_info=True)
            self._report(f"Execution error: {handled.message}")
            if isinstance(exc, UxKitError) and exc.hint:
                self._report(f"Hint: {exc.hint}")
            return CommandResult.failure(handled.message)

        if outcome is None:
            self._report(f"Error: command '{command.name}' returned no result")
            return CommandResult.failure(f"Command '{command.name}' returned no result")
        if outcome.success:
            return CommandResult.ok(SUCCESS_MESSAGE)

        # Coarse status only: the command's data/errors are not relayed.
        self._logger.debug("Command %s reported failure: %s", command.name, outcome.message)
        return CommandResult.failure(outcome.message)

    def _parse(self, tokens: list[str]) -> Invocation | None:
        """Bind *tokens* to a registered command.

        Returns ``None`` when the tokens select no command.

        Raises
        ------
        UnknownCommandError
            If the first token names no registered command.
        ArgumentParseError
            If the tokens do not fit the command's declaration.
        """
        head = tokens[0]
        if not head.startswith("-"):
            if not self._registry.has(head):
                raise UnknownCommandError(
                    head,
                    hint=f"Run '{self._prog} --help' to list the available commands.",
                )
            if _HELP_FLAGS.intersection(_before_separator(tokens[1:])):
                return Invocation(command_name=head, help_requested=True)

        namespace = self.get_parser().parse_args(tokens)
        name = getattr(namespace, _COMMAND_DEST, None)
        if name is None:
            return None

        command = self._registry.get(name)
        if command is None:
            raise UnknownCommandError(name)
        return self._bind(command, vars(namespace))

    @staticmethod
    def _bind(command: Command, values: dict[str, Any]) -> Invocation:
        args = tuple(
            values[_arg_dest(index)]
            for index in range(len(command.arguments or ()))
            if values.get(_arg_dest(index)) is not None
        )

        options: dict[str, Any] = {
            option.name: _resolve_option(option, values.get(_option_dest(index)))
            for index, option in enumerate(command.options or ())
        }
        for flag, _ in INTEGRATION_FLAGS:
            options.setdefault(flag, bool(values.get(_flag_dest(flag), False)))

        return Invocation(command_name=command.name, args=args, options=options)

    # ------------------------------------------------------------------
    # Parser construction
    # ------------------------------------------------------------------

    def _build_parser(self) -> CommandLineParser:
        parser = CommandLineParser(
            prog=self._prog,
            description=self._description,
            allow_abbrev=False,
            emit=self._emit,
        )
        parser.add_argument(
            "-V", "--version", action="store_true",
            help="show the version and exit",
        )
        subparsers = parser.add_subparsers(
            dest=_COMMAND_DEST, metavar="<command>", title="commands",
        )
        for command in self._registry.list_commands():
            self._configure_command(subparsers, command)
        return parser

    def _configure_command(self, subparsers: Any, command: Command) -> None:
        """Declare *command*'s arguments, options and the integration flags."""
        sub = subparsers.add_parser(
            command.name,
            help=command.description,
            description=command.description,
            add_help=False,
            allow_abbrev=False,
            emit=self._emit,
        )

        for index, argument in enumerate(command.arguments or ()):
            sub.add_argument(
                _arg_dest(index),
                metavar=argument.name,
                nargs=None if argument.required else "?",
                help=argument.description,
            )

        options = command.options or ()
        for index, option in enumerate(options):
            _add_option(sub, index, option)

        declared = {option.name for option in options}
        group = sub.add_argument_group("integration flags")
        for flag, text in INTEGRATION_FLAGS:
            if flag not in declared:
                group.add_argument(
                    f"--{flag}", dest=_flag_dest(flag), action="store_true", help=text,
                )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def _emit(self, text: str) -> None:
        self._normal_output().writeln(text)

    def _normal_output(self) -> OutputSink:
        if self._output is not None:
            return self._output
        if self._default_output is None:
            self._default_output = ConsoleOutput()
        return self._default_output

    def _report(self, line: str) -> None:
        if self._error_output is not None:
            self._error_output.write_errorln(line)

    def _dispatch_failure(self, error: DispatchError) -> CommandResult:
        message = error_message(error)
        self._logger.debug("Dispatch failed: %s", message)
        self._report(f"Error: {message}")
        return CommandResult.failure(message)
