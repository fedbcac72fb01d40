"""Diagnostics helpers for REDscript Doctor."""

from diagnostics.models import DiagnosticReport, Issue, IssueCategory, Severity

__all__ = [
    "DiagnosticReport",
    "Issue",
    "IssueCategory",
    "Severity",
    "format_report",
    "handle_diagnostic_request",
    "run_diagnostics",
]


def __getattr__(name: str):
    if name in {"format_report", "run_diagnostics"}:
        from diagnostics import runner

        return getattr(runner, name)
    if name == "handle_diagnostic_request":
        from diagnostics.service import handle_diagnostic_request

        return handle_diagnostic_request
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
