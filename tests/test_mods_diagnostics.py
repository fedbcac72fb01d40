"""Tests for the REDscript mod probe."""

from __future__ import annotations

import asyncio
from shlex import quote

from core.shell import CommandResult, ScriptedCommandRunner
from mods.diagnostics import ModSettings, probe

SETTINGS = ModSettings()
SECOND_DIR = SETTINGS.search_dirs[1]
OK = CommandResult(success=True)
SCRIPTS = f"{SECOND_DIR}/a.reds\n{SECOND_DIR}/nested/b.reds\n"
LISTING = CommandResult(stdout="-rw-r--r--  1 v  staff  42 a.reds\n", success=True)


def test_mod_probe_short_circuits_when_no_directory_exists() -> None:
    """Missing directories yield one issue and no scripts or log."""

    runner = ScriptedCommandRunner()

    result = asyncio.run(probe(runner, SETTINGS))

    assert result.installed is False
    assert result.compiled is False
    assert result.scripts is None
    assert result.compilation_log is None
    assert result.issues == ("REDscript mod directory not found",)
    assert len(runner.calls) == 3
    assert all(call.startswith("test -d") for call in runner.calls)


def test_mod_probe_uses_first_existing_directory() -> None:
    runner = ScriptedCommandRunner(
        responses={
            f"test -d {quote(SECOND_DIR)}": OK,
            "find ": CommandResult(stdout=SCRIPTS, success=True),
            "ls -la": LISTING,
            f"test -f {quote(SECOND_DIR + '/r6/scripts/compiled.reds')}": OK,
        }
    )

    result = asyncio.run(probe(runner, SETTINGS))

    assert result.installed is True
    assert result.compiled is True
    assert result.path == SECOND_DIR
    assert result.scripts == (f"{SECOND_DIR}/a.reds", f"{SECOND_DIR}/nested/b.reds")
    assert result.compilation_log == LISTING.stdout
    assert result.issues == ()
    assert sum(call.startswith("test -d") for call in runner.calls) == 2


def test_mod_probe_reports_uncompiled_scripts() -> None:
    runner = ScriptedCommandRunner(
        responses={
            f"test -d {quote(SECOND_DIR)}": OK,
            "find ": CommandResult(stdout=SCRIPTS, success=True),
            "ls -la": LISTING,
        }
    )

    result = asyncio.run(probe(runner, SETTINGS))

    assert result.installed is True
    assert result.compiled is False
    assert result.issues == ("REDscript files not compiled",)


def test_mod_probe_reports_empty_directory() -> None:
    """No scripts means no compiled check and a fallback listing."""

    runner = ScriptedCommandRunner(
        responses={
            f"test -d {quote(SECOND_DIR)}": OK,
            "find ": CommandResult(stdout="", success=True),
            "ls -la": CommandResult(stdout="No .reds files\n", success=True),
        }
    )

    result = asyncio.run(probe(runner, SETTINGS))

    assert result.installed is True
    assert result.compiled is False
    assert result.scripts is None
    assert result.compilation_log == "No .reds files\n"
    assert result.issues == ("No REDscript files (.reds) found",)
    assert not any("compiled.reds" in call for call in runner.calls)


def test_mod_probe_expands_home_directory(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    runner = ScriptedCommandRunner()

    asyncio.run(probe(runner, ModSettings(search_dirs=("~/red4ext",))))

    assert runner.calls == [f"test -d {quote(str(tmp_path / 'red4ext'))}"]


def test_mod_probe_converts_runner_errors() -> None:
    runner = ScriptedCommandRunner(responses={"test -d": RuntimeError("disk gone")})

    result = asyncio.run(probe(runner, SETTINGS))

    assert result.installed is False
    assert result.compiled is False
    assert result.issues == ("Error checking REDscript: disk gone",)
