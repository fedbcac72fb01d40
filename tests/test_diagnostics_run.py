"""Tests for the diagnostics command-line entry point."""

from __future__ import annotations

import json

import pytest

from config.controller import ConfigController
from core.logging import disable_file_logging, set_level
from diagnostics.run import EXIT_ERROR, EXIT_ISSUES, EXIT_OK, exit_code_for, main


@pytest.fixture(autouse=True)
def _reset_singletons():
    ConfigController.reset_instance()
    yield
    ConfigController.reset_instance()


def test_offline_json_report(capsys) -> None:
    """Offline mode reports everything missing and exits non-zero."""

    code = main(["--offline", "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert code == EXIT_ISSUES
    assert payload["gameInstalled"] is False
    assert payload["launchSuccess"] is False
    assert len(payload["issues"]) == 14


def test_offline_text_report_with_launch_skipped(capsys) -> None:
    code = main(["--offline", "--skip-launch"])
    out = capsys.readouterr().out

    assert code == EXIT_ISSUES
    assert "Launch test passed:  skipped" in out
    assert "Launch Test" not in out


def test_config_dir_disables_launch(tmp_path, capsys) -> None:
    (tmp_path / "default.yaml").write_text("launch:\n  enabled: false\n", encoding="utf-8")

    main(["--offline", "--config-dir", str(tmp_path)])

    assert "Launch test passed:  skipped" in capsys.readouterr().out


def test_exit_codes() -> None:
    assert exit_code_for({"error": "Diagnostic failed", "details": "x"}) == EXIT_ERROR
    assert exit_code_for({"gameInstalled": True, "issues": []}) == EXIT_OK
    assert (
        exit_code_for(
            {"gameInstalled": True, "issues": [{"severity": "medium", "title": "t", "description": "d"}]}
        )
        == EXIT_OK
    )


def test_log_file_receives_report_run(tmp_path, capsys) -> None:
    log_path = tmp_path / "doctor.log"

    try:
        code = main(["--offline", "--skip-launch", "--log-level", "DEBUG", "--log-file", str(log_path)])
    finally:
        disable_file_logging()
        set_level("INFO")

    assert code == EXIT_ISSUES
    assert "sw_vers -productVersion" in log_path.read_text(encoding="utf-8")
