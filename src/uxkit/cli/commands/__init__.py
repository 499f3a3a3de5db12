"""Built-in commands shipped with every uxkit application."""

from uxkit.cli.commands.doctor import DoctorCommand
from uxkit.cli.commands.help import HelpCommand

__all__: list[str] = ["DoctorCommand", "HelpCommand"]
