"""Command-line entry point for running diagnostics."""

from __future__ import annotations

import argparse
import asyncio
import json
from pathlib import Path

from config.controller import ConfigController
from config.settings import load_settings
from core.logging import enable_file_logging, log_error, set_level
from core.shell import CommandResult, ScriptedCommandRunner, ShellCommandRunner
from diagnostics.models import Severity
from diagnostics.runner import format_report
from diagnostics.service import handle_diagnostic_request, is_error_payload

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""

    parser = argparse.ArgumentParser(
        description="Check a macOS Cyberpunk 2077 install, GOG Galaxy and REDscript."
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON.")
    parser.add_argument(
        "--offline",
        action="store_true",
        help="Run probes against a scripted runner where nothing is installed.",
    )
    parser.add_argument(
        "--skip-launch",
        action="store_true",
        help="Do not start the game during diagnostics.",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding default.yaml and an optional override.yaml.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file.")
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level.")
    return parser.parse_args(argv)


def offline_runner() -> ScriptedCommandRunner:
    """Return a runner that reports every check as absent."""

    return ScriptedCommandRunner(
        responses={
            "timeout ": CommandResult(
                stdout="timeout: failed to run command: No such file or directory\nLaunch completed/failed\n",
                success=True,
            ),
        }
    )


def exit_code_for(payload: dict) -> int:
    if is_error_payload(payload):
        return EXIT_ERROR
    high = Severity.HIGH.value
    return EXIT_ISSUES if any(issue["severity"] == high for issue in payload["issues"]) else EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Run diagnostics and return an exit code."""

    args = parse_args(argv)
    controller = ConfigController.get_instance(config_dir=args.config_dir)
    config = controller.get_config()
    set_level(args.log_level or config["logging_level"])

    if args.log_file is not None:
        enable_file_logging(args.log_file)
    elif config["file_logging_enabled"]:
        enable_file_logging(Path(config["log_file"]))

    settings = load_settings(config)
    runner = offline_runner() if args.offline else ShellCommandRunner()
    include_launch = settings.launch.enabled and not args.skip_launch

    payload, status = asyncio.run(
        handle_diagnostic_request(runner, settings, include_launch=include_launch)
    )

    if args.json:
        print(json.dumps(payload, indent=2))
    elif is_error_payload(payload):
        log_error(f"{payload['error']}: {payload['details']} (status {status})")
    else:
        print(format_report(payload, launch_skipped=not include_launch))
    return exit_code_for(payload)


if __name__ == "__main__":
    raise SystemExit(main())
