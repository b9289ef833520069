"""Actions toolkit.

Emit workflow commands (outputs, exported variables, masked secrets, PATH
additions, saved state and log annotations) on stdout, and read inputs and
saved state from the environment.
"""

__version__ = "0.1.0"

from actions_toolkit.core import Core, Log, LogLevel

__all__ = ["__version__", "Core", "Log", "LogLevel"]
