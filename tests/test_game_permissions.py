"""Tests for the installation permission probe."""

from __future__ import annotations

import asyncio
from shlex import quote

from core.shell import CommandResult, ScriptedCommandRunner
from game.layout import GameLayout
from game.permissions import probe

LAYOUT = GameLayout()
PATHS = LAYOUT.permission_paths()
OK = CommandResult(success=True)


def _stat(path: str) -> str:
    return f"stat -f {quote('%Sp %Su')} {quote(path)}"


def test_permission_probe_reads_mode_and_owner() -> None:
    responses: dict = {"ls -la": OK}
    for path in PATHS:
        responses[_stat(path)] = CommandResult(stdout="drwxr-xr-x v\n", success=True)
    runner = ScriptedCommandRunner(responses=responses)

    result = asyncio.run(probe(runner, LAYOUT))

    assert [check.path for check in result.permissions] == PATHS
    assert all(check.accessible for check in result.permissions)
    assert result.permissions[0].permissions == "drwxr-xr-x"
    assert result.permissions[0].owner == "v"
    assert result.issues == ()


def test_permission_probe_requires_execute_bit_only_on_executable() -> None:
    """A readable directory without x is fine; the game binary is not."""

    responses: dict = {
        "ls -la": OK,
        _stat(LAYOUT.executable): CommandResult(stdout="-rw-r--r-- v\n", success=True),
    }
    for path in PATHS:
        if path != LAYOUT.executable:
            responses[_stat(path)] = CommandResult(stdout="dr--r--r-- v\n", success=True)
    runner = ScriptedCommandRunner(responses=responses)

    result = asyncio.run(probe(runner, LAYOUT))

    assert [check.accessible for check in result.permissions] == [True, True, True, False, True]
    assert result.issues == (f"Insufficient permissions for: {LAYOUT.executable}",)


def test_permission_probe_marks_unreachable_paths() -> None:
    runner = ScriptedCommandRunner()

    result = asyncio.run(probe(runner, LAYOUT))

    assert all(check.permissions == "No access" for check in result.permissions)
    assert all(check.owner is None for check in result.permissions)
    assert result.issues == tuple(f"Cannot access path: {path}" for path in PATHS)
    assert not any(call.startswith("stat") for call in runner.calls)


def test_permission_probe_isolates_per_path_errors() -> None:
    responses: dict = {
        "ls -la": OK,
        _stat(LAYOUT.app_bundle): RuntimeError("stat exploded"),
    }
    for path in PATHS:
        if path != LAYOUT.app_bundle:
            responses[_stat(path)] = CommandResult(stdout="drwxr-xr-x v\n", success=True)
    runner = ScriptedCommandRunner(responses=responses)

    result = asyncio.run(probe(runner, LAYOUT))

    assert result.permissions[1].permissions == "Error checking"
    assert result.permissions[1].accessible is False
    assert result.issues == (
        f"Error checking permissions for {LAYOUT.app_bundle}: stat exploded",
    )
    assert len(result.permissions) == 5
