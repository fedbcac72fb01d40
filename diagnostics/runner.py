"""Diagnostics runner utilities."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from config.settings import DiagnosticSettings, load_settings
from core.logging import logger as LOGGER
from core.shell import CommandRunner, ShellCommandRunner
from diagnostics.models import DiagnosticReport, Issue, IssueCategory, LaunchResult
from galaxy.diagnostics import probe as galaxy_probe
from game.diagnostics import probe as installation_probe
from game.launch import probe as launch_probe
from game.libraries import probe as libraries_probe
from game.permissions import probe as permissions_probe
from macos.diagnostics import probe as macos_probe
from mods.diagnostics import probe as redscript_probe


def build_issues(groups: Iterable[tuple[IssueCategory, Sequence[str]]]) -> list[Issue]:
    """Flatten per-probe issue strings, in order, tagging each with its category."""

    issues: list[Issue] = []
    for category, descriptions in groups:
        issues.extend(Issue.from_category(category, description) for description in descriptions)
    return issues


async def run_diagnostics(
    runner: CommandRunner | None = None,
    settings: DiagnosticSettings | None = None,
    *,
    include_launch: bool | None = None,
) -> DiagnosticReport:
    """Run every probe in order and merge the results into one report.

    Probes run one after another. Each probe handles its own command
    failures; anything else raised here aborts the run.

    Args:
        runner: Command runner shared by all probes; defaults to the shell.
        settings: Optional ``DiagnosticSettings``; defaults to the loaded config.
        include_launch: Override for whether the game is actually launched.

    Returns:
        The complete diagnostic report.
    """

    if settings is None:
        settings = load_settings()
    shell = runner or ShellCommandRunner()
    if include_launch is None:
        include_launch = settings.launch.enabled

    LOGGER.info("Checking game installation at %s", settings.game.install_dir)
    installation = await installation_probe(shell, settings.game)
    LOGGER.info("Checking macOS version")
    os_version = await macos_probe(shell, settings.macos_minimum)
    LOGGER.info("Checking bundled libraries")
    libraries = await libraries_probe(shell, settings.game)
    LOGGER.info("Checking permissions")
    permissions = await permissions_probe(shell, settings.game)
    LOGGER.info("Checking %s", settings.galaxy.process_name)
    gog_galaxy = await galaxy_probe(shell, settings.galaxy)
    LOGGER.info("Checking REDscript")
    redscript = await redscript_probe(shell, settings.redscript)
    if include_launch:
        LOGGER.info("Launching game for %ss", settings.launch.timeout_s)
        launch = await launch_probe(shell, settings.game, settings.launch)
    else:
        LOGGER.info("Launch test skipped")
        launch = LaunchResult(success=False, skipped=True)

    issues = build_issues(
        [
            (IssueCategory.INSTALLATION, installation.issues),
            (IssueCategory.MACOS_VERSION, os_version.issues),
            (IssueCategory.LIBRARIES, libraries.issues),
            (IssueCategory.PERMISSIONS, permissions.issues),
            (IssueCategory.GOG_GALAXY, gog_galaxy.issues),
            (IssueCategory.REDSCRIPT, redscript.issues),
            (IssueCategory.LAUNCH, launch.issues),
        ]
    )
    LOGGER.info("Diagnostics finished with %d issue(s)", len(issues))

    return DiagnosticReport(
        installation=installation,
        os_version=os_version,
        libraries=libraries,
        permissions=permissions,
        gog_galaxy=gog_galaxy,
        redscript=redscript,
        launch=launch,
        issues=tuple(issues),
    )


def _yes_no(value: bool) -> str:
    return "yes" if value else "no"


def format_report(payload: dict[str, Any], *, launch_skipped: bool = False) -> str:
    """Return a human-friendly rendering of a report payload."""

    launch = "skipped" if launch_skipped else _yes_no(payload["launchSuccess"])
    galaxy = payload["gogGalaxy"]
    lines = [
        "Diagnostics report",
        "-" * 60,
        f"Game installed:      {_yes_no(payload['gameInstalled'])}",
        f"macOS version:       {payload['macosVersion']} (compatible: {_yes_no(payload['macosCompatible'])})",
        f"REDscript installed: {_yes_no(payload['redscriptInstalled'])}",
        f"REDscript compiled:  {_yes_no(payload['redscriptCompiled'])}",
        f"GOG Galaxy running:  {_yes_no(galaxy['running'])}",
        f"Launch test passed:  {launch}",
        "-" * 60,
    ]
    for library in payload["libraries"]:
        status = "found" if library["found"] else "MISSING"
        info = f" ({library['loadingInfo']})" if library.get("loadingInfo") else ""
        lines.append(f"[lib] {library['name']}: {status}{info}")
    for check in payload["permissions"]:
        owner = f" owner={check['owner']}" if check.get("owner") else ""
        lines.append(f"[perm] {check['path']}: {check['permissions']}{owner}")
    lines.append("-" * 60)
    if not payload["issues"]:
        lines.append("No issues found")
    for issue in payload["issues"]:
        lines.append(f"[{issue['severity'].upper()}] {issue['title']}: {issue['description']}")
    lines.append("-" * 60)
    return "\n".join(lines)
