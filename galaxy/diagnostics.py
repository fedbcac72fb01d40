"""Diagnostics routines for the GOG Galaxy client."""

from __future__ import annotations

from dataclasses import dataclass
from shlex import quote

from core.logging import logger
from core.shell import CommandRunner
from diagnostics.heuristics import is_authenticated_process
from diagnostics.models import CompanionClientResult


@dataclass(frozen=True)
class CompanionSettings:
    """How to find the companion client and judge its login state."""

    process_name: str = "GOG Galaxy"
    auth_markers: tuple[str, ...] = ("--authenticated", "--logged-in")
    socket_path: str = "/tmp/gog_galaxy_socket"


async def probe(runner: CommandRunner, settings: CompanionSettings | None = None) -> CompanionClientResult:
    """Check that the client is running, looks logged in and exposes its socket.

    Authentication is inferred from process command-line flags only; the
    client itself is never queried.

    Args:
        runner: Command runner used for process and socket checks.
        settings: Optional client configuration.

    Returns:
        Companion client result. When the client is not running no further
        checks are made.
    """

    client = settings or CompanionSettings()
    issues: list[str] = []

    try:
        pgrep = await runner.run(f"pgrep -f {quote(client.process_name)} > /dev/null 2>&1")
        if not pgrep.success:
            issues.append(f"{client.process_name} is not running")
            return CompanionClientResult(running=False, authenticated=False, issues=tuple(issues))

        ps = await runner.run(
            f"ps aux | grep -i {quote(client.process_name.lower())} | grep -v grep"
        )
        processes = [line for line in ps.stdout.strip().split("\n") if line]
        authenticated = any(
            is_authenticated_process(line, client.auth_markers) for line in processes
        )
        if not authenticated:
            issues.append(f"{client.process_name} may not be authenticated")

        socket = await runner.run(f"test -S {quote(client.socket_path)} 2>/dev/null")
        if not socket.success:
            issues.append(f"{client.process_name} socket not found")

        return CompanionClientResult(running=True, authenticated=authenticated, issues=tuple(issues))
    except Exception as exc:  # noqa: BLE001 - probe should not raise
        logger.warning("Companion client probe failed: %s", exc)
        issues.append(f"Error checking {client.process_name}: {exc}")
        return CompanionClientResult(running=False, authenticated=False, issues=tuple(issues))
