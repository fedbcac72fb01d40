"""String heuristics applied to command output.

These are deliberately shallow: they look for substrings and count lines
rather than parsing the underlying formats. Probes call them by name so a
smarter check can replace one without touching probe control flow.
"""

from __future__ import annotations

import re
from typing import Iterable

_VERSION_PATTERN = re.compile(r"^\s*(\d+)(?:\.(\d+))?")
_MISSING_LIBRARY_PATTERN = re.compile(r"dyld: Library not loaded: (.+)")

LIBRARY_NOT_LOADED = "dyld: Library not loaded"
CRASH_MARKERS = ("Segmentation fault", "Bus error")
PERMISSION_DENIED = "Permission denied"
NOT_STARTED_MARKERS = (
    "No such file or directory",
    "command not found",
    "failed to run command",
)


def has_owner_rwx(listing: str) -> bool:
    """Return True if an ``ls -la`` line shows owner read/write/execute."""

    return "-rwx" in listing


def parse_os_version(text: str) -> tuple[int, int] | None:
    """Return (major, minor) from a dotted version string, minor defaulting to 0."""

    match = _VERSION_PATTERN.match(text or "")
    if not match:
        return None
    major = int(match.group(1))
    minor = int(match.group(2)) if match.group(2) is not None else 0
    return major, minor


def is_os_compatible(version: tuple[int, int], minimum: tuple[int, int]) -> bool:
    major, minor = version
    min_major, min_minor = minimum
    return major > min_major or (major == min_major and minor >= min_minor)


def count_dependency_lines(otool_output: str) -> int:
    """Approximate dependency count as newline-split segments minus one."""

    return len(otool_output.split("\n")) - 1


def parse_stat_output(text: str) -> tuple[str, str | None]:
    """Split ``stat -f "%Sp %Su"`` output into mode string and owner."""

    parts = text.strip().split()
    if not parts:
        return "", None
    owner = parts[1] if len(parts) > 1 else None
    return parts[0], owner


def is_path_accessible(mode: str, path: str, executable_path: str) -> bool:
    """Readable, and executable too when the path is the game binary."""

    readable = "r" in mode
    executable = "x" in mode
    return readable and (executable or path != executable_path)


def is_authenticated_process(line: str, markers: Iterable[str]) -> bool:
    return any(marker in line for marker in markers)


def has_library_load_failure(output: str) -> bool:
    return LIBRARY_NOT_LOADED in output


def extract_missing_library(output: str) -> str | None:
    match = _MISSING_LIBRARY_PATTERN.search(output)
    if not match:
        return None
    return match.group(1).strip()


def has_crash_signature(output: str) -> bool:
    return any(marker in output for marker in CRASH_MARKERS)


def has_permission_denied(output: str) -> bool:
    return PERMISSION_DENIED in output


def has_start_failure(output: str) -> bool:
    return any(marker in output for marker in NOT_STARTED_MARKERS)
