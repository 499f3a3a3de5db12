"""Process entry point: build the application, run it, map to exit codes.

This module is the **sole error boundary** for the entire application.
:func:`cli` catches :class:`~uxkit.exceptions.UxKitError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders
user-friendly messages via Rich and exits with a well-defined code.

Architecture notes
------------------
* No command logic lives here — commands are built and registered,
  then the :class:`~uxkit.cli.application.CLIApplication` dispatches.
* This is the only place that translates a
  :class:`~uxkit.core.models.CommandResult` into an OS exit code.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence

from uxkit.cli import exit_codes
from uxkit.cli.application import CLIApplication
from uxkit.cli.commands import DoctorCommand, HelpCommand
from uxkit.cli.console import ConsoleOutput, console
from uxkit.cli.logs import configure_logging
from uxkit.core.error_handler import ErrorHandler
from uxkit.core.help_system import HelpSystem
from uxkit.core.models import CommandResult
from uxkit.core.protocols import OutputSink
from uxkit.core.registry import CommandRegistry
from uxkit.exceptions import UxKitError
from uxkit.settings import AppSettings, get_settings


# ---------------------------------------------------------------------------
# Application assembly
# ---------------------------------------------------------------------------

def build_application(
    settings: AppSettings | None = None,
    output: OutputSink | None = None,
) -> CLIApplication:
    """Create a fully wired application with the built-in commands.

    Parameters
    ----------
    settings:
        Configuration; read from the environment when ``None``.
    output:
        Sink shared by the application and its commands.  A terminal
        :class:`ConsoleOutput` when ``None``.
    """
    settings = settings or get_settings()
    sink = output or ConsoleOutput()
    registry = CommandRegistry()

    app = CLIApplication(
        registry,
        prog=settings.prog_name,
        description=settings.description,
    )
    app.set_output(sink)
    app.set_error_output(sink)

    help_system = HelpSystem(
        program=settings.prog_name,
        column_width=settings.help_column_width,
    )
    app.register_command(HelpCommand(registry, sink, help_system))
    app.register_command(DoctorCommand(sink))
    return app


def to_exit_code(result: CommandResult) -> int:
    return exit_codes.SUCCESS if result.success else exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the uxkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    settings = get_settings()
    app = build_application(settings)
    app.set_logger(configure_logging(settings.log_level, settings.log_file))

    result = asyncio.run(app.execute(argv))
    return to_exit_code(result)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    errors = ErrorHandler()
    try:
        code = main()
        sys.exit(code)
    except UxKitError as exc:
        console.print(f"[bold red]{errors.handle_cli_error(exc).message}[/bold red]")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            f"[bold red]{errors.handle_system_error(exc).message}[/bold red]\n"
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
