"""Shell command execution seam used by every probe."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Mapping, Protocol, Union

from core.logging import log_command, logger


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a single shell command."""

    stdout: str = ""
    stderr: str = ""
    success: bool = False


class CommandRunner(Protocol):
    """Run a shell command string and capture its output."""

    async def run(self, command: str) -> CommandResult:
        """Return captured stdout/stderr; success means exit status zero."""


class ShellCommandRunner:
    """Command runner backed by ``/bin/sh``."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    async def run(self, command: str) -> CommandResult:
        log_command(command)
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await process.communicate()
        except (OSError, ValueError) as exc:
            logger.warning("Unable to spawn %r: %s", command, exc)
            return CommandResult(stdout="", stderr=str(exc), success=False)

        result = CommandResult(
            stdout=stdout.decode(self._encoding, errors="replace"),
            stderr=stderr.decode(self._encoding, errors="replace"),
            success=process.returncode == 0,
        )
        logger.debug("exit=%s for %r", process.returncode, command)
        return result


ScriptedResponse = Union[CommandResult, Exception]


@dataclass
class ScriptedCommandRunner:
    """Fake command runner for offline diagnostics.

    Responses are keyed by a substring of the command; the first key found
    in the command wins. Exception values are raised instead of returned.
    Commands with no matching key get ``default``.
    """

    responses: Mapping[str, ScriptedResponse] = field(default_factory=dict)
    default: CommandResult = field(default_factory=CommandResult)
    calls: list[str] = field(default_factory=list)

    async def run(self, command: str) -> CommandResult:
        self.calls.append(command)
        for pattern, response in self.responses.items():
            if pattern in command:
                if isinstance(response, Exception):
                    raise response
                return response
        return self.default
