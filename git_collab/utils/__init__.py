"""Shell execution and logging helpers."""

from .logger import setup_logging
from .shell import ShellCommandError, run_command

__all__ = [
    "ShellCommandError",
    "run_command",
    "setup_logging",
]
