"""Core runtime helpers: logging and shell command execution."""

from core.shell import CommandResult, CommandRunner, ScriptedCommandRunner, ShellCommandRunner

__all__ = [
    "CommandResult",
    "CommandRunner",
    "ScriptedCommandRunner",
    "ShellCommandRunner",
]
