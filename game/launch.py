"""Timed launch of the game binary with loader tracing enabled.

This starts the real executable, so the aggregator only runs it when the
launch step is enabled.
"""

from __future__ import annotations

from dataclasses import dataclass
from shlex import quote

from core.logging import logger
from core.shell import CommandRunner
from diagnostics import heuristics
from diagnostics.models import LaunchResult
from game.layout import GameLayout

COMPLETION_MARKER = "Launch completed/failed"


@dataclass(frozen=True)
class LaunchSettings:
    """Configuration for the launch probe."""

    enabled: bool = True
    timeout_s: int = 5
    trace_env: str = "DYLD_PRINT_LIBRARIES"


def build_launch_command(executable: str, settings: LaunchSettings) -> str:
    return (
        f"{settings.trace_env}=1 timeout {settings.timeout_s}s {quote(executable)} 2>&1"
        f" || echo {quote(COMPLETION_MARKER)}"
    )


async def probe(
    runner: CommandRunner,
    layout: GameLayout | None = None,
    settings: LaunchSettings | None = None,
) -> LaunchResult:
    """Launch the game briefly and scan its output for failure signatures.

    Args:
        runner: Command runner used to start the game.
        layout: Optional installation layout.
        settings: Optional launch configuration.

    Returns:
        Launch result; success is False when any failure signature matched.
    """

    game = layout or GameLayout()
    launch = settings or LaunchSettings()
    issues: list[str] = []

    try:
        result = await runner.run(build_launch_command(game.executable, launch))
        output = result.stdout
        if not result.success:
            output = f"{output}\n{result.stderr}\n{COMPLETION_MARKER}"

        failed = False
        if heuristics.has_library_load_failure(output):
            failed = True
            issues.append("Dynamic library loading failed")
            missing = heuristics.extract_missing_library(output)
            if missing:
                issues.append(f"Missing library: {missing}")

        if heuristics.has_crash_signature(output):
            failed = True
            issues.append("Game crashed during launch")

        if heuristics.has_permission_denied(output):
            failed = True
            issues.append("Permission denied during launch")

        if heuristics.has_start_failure(output) or (not result.success and not failed):
            failed = True
            issues.append("Game executable could not be started")

        return LaunchResult(success=not failed, issues=tuple(issues))
    except Exception as exc:  # noqa: BLE001 - probe should not raise
        logger.warning("Launch probe failed: %s", exc)
        issues.append(f"Error testing game launch: {exc}")
        return LaunchResult(success=False, issues=tuple(issues))
