"""Diagnostics routines for installation path permissions."""

from __future__ import annotations

from shlex import quote

from core.logging import logger
from core.shell import CommandRunner
from diagnostics.heuristics import is_path_accessible, parse_stat_output
from diagnostics.models import PermissionCheck, PermissionsResult
from game.layout import GameLayout

STAT_FORMAT = "%Sp %Su"


async def probe(runner: CommandRunner, layout: GameLayout | None = None) -> PermissionsResult:
    """Inspect the mode string and owner of each installation path."""

    settings = layout or GameLayout()
    executable = settings.executable
    permissions: list[PermissionCheck] = []
    issues: list[str] = []

    for path in settings.permission_paths():
        try:
            listing = await runner.run(f"ls -la {quote(path)}")
            if not listing.success:
                issues.append(f"Cannot access path: {path}")
                permissions.append(PermissionCheck(path=path, permissions="No access", accessible=False))
                continue

            stat = await runner.run(f"stat -f {quote(STAT_FORMAT)} {quote(path)}")
            mode, owner = parse_stat_output(stat.stdout)
            accessible = is_path_accessible(mode, path, executable)
            if not accessible:
                issues.append(f"Insufficient permissions for: {path}")

            permissions.append(
                PermissionCheck(path=path, permissions=mode, accessible=accessible, owner=owner)
            )
        except Exception as exc:  # noqa: BLE001 - keep checking remaining paths
            logger.warning("Permission probe failed for %s: %s", path, exc)
            issues.append(f"Error checking permissions for {path}: {exc}")
            permissions.append(PermissionCheck(path=path, permissions="Error checking", accessible=False))

    return PermissionsResult(permissions=tuple(permissions), issues=tuple(issues))
