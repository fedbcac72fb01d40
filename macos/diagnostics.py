"""Diagnostics routines for the host macOS version."""

from __future__ import annotations

from core.logging import logger
from core.shell import CommandRunner
from diagnostics.heuristics import is_os_compatible, parse_os_version
from diagnostics.models import OsVersionResult

UNKNOWN_VERSION = "Unknown"
MINIMUM_VERSION = (15, 5)


async def probe(runner: CommandRunner, minimum: tuple[int, int] = MINIMUM_VERSION) -> OsVersionResult:
    """Query the product version and compare it against the minimum."""

    issues: list[str] = []
    try:
        result = await runner.run("sw_vers -productVersion")
        version = result.stdout.strip()
        parsed = parse_os_version(version) if result.success else None
        if parsed is None:
            issues.append("Unable to determine macOS version")
            return OsVersionResult(version=UNKNOWN_VERSION, compatible=False, issues=tuple(issues))

        compatible = is_os_compatible(parsed, minimum)
        if not compatible:
            issues.append(
                f"macOS {version} is below minimum requirement ({minimum[0]}.{minimum[1]}+)"
            )
        return OsVersionResult(version=version, compatible=compatible, issues=tuple(issues))
    except Exception as exc:  # noqa: BLE001 - probe should not raise
        logger.warning("macOS version probe failed: %s", exc)
        issues.append(f"Error checking macOS version: {exc}")
        return OsVersionResult(version=UNKNOWN_VERSION, compatible=False, issues=tuple(issues))
