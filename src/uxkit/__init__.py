"""uxkit — UX research toolkit command line.

Built around a small command execution framework: commands are
registered, validated, dispatched and reported on uniformly.
"""

from uxkit.version import __version__

__all__: list[str] = ["__version__"]
