"""Request boundary that turns a diagnostic run into a response payload."""

from __future__ import annotations

from typing import Any

from config.settings import DiagnosticSettings
from core.logging import logger
from core.shell import CommandRunner
from diagnostics.runner import run_diagnostics

ERROR_MESSAGE = "Diagnostic failed"


async def handle_diagnostic_request(
    runner: CommandRunner | None = None,
    settings: DiagnosticSettings | None = None,
    *,
    include_launch: bool | None = None,
) -> tuple[dict[str, Any], int]:
    """Run diagnostics and return ``(payload, status)``.

    On success the payload is the full report. If the run itself raises,
    the payload is ``{"error", "details"}`` with status 500; callers tell
    the two apart by shape.
    """

    try:
        report = await run_diagnostics(runner, settings, include_launch=include_launch)
    except Exception as exc:  # noqa: BLE001 - boundary converts to an error payload
        logger.exception("Diagnostic run failed")
        return {"error": ERROR_MESSAGE, "details": str(exc) or type(exc).__name__}, 500
    return report.to_payload(), 200


def is_error_payload(payload: dict[str, Any]) -> bool:
    return "error" in payload and "gameInstalled" not in payload
