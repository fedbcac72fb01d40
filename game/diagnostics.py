"""Diagnostics routines for the game installation."""

from __future__ import annotations

from shlex import quote

from core.logging import logger
from core.shell import CommandRunner
from diagnostics.heuristics import has_owner_rwx
from diagnostics.models import InstallationResult
from game.layout import GameLayout


async def probe(runner: CommandRunner, layout: GameLayout | None = None) -> InstallationResult:
    """Check that the game executable and install directory exist.

    Args:
        runner: Command runner used for every filesystem check.
        layout: Optional installation layout; defaults to the stock GOG paths.

    Returns:
        Installation result with one issue per failing check.
    """

    settings = layout or GameLayout()
    executable = settings.executable
    issues: list[str] = []

    try:
        found = await runner.run(f"test -f {quote(executable)}")
        if not found.success:
            issues.append("Game executable not found at expected location")
            return InstallationResult(installed=False, executable_path=executable, issues=tuple(issues))

        install_dir = await runner.run(f"test -d {quote(settings.install_dir)}")
        if not install_dir.success:
            issues.append("Game installation directory not found")

        listing = await runner.run(f"ls -la {quote(executable)}")
        if not has_owner_rwx(listing.stdout):
            issues.append("Game executable lacks execute permissions")

        return InstallationResult(
            installed=found.success and install_dir.success,
            executable_path=executable,
            issues=tuple(issues),
        )
    except Exception as exc:  # noqa: BLE001 - probe should not raise
        logger.warning("Installation probe failed: %s", exc)
        issues.append(f"Error checking game installation: {exc}")
        return InstallationResult(installed=False, executable_path=executable, issues=tuple(issues))
