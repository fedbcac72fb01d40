"""Diagnostics routines for the REDscript mod installation."""

from __future__ import annotations

from dataclasses import dataclass
import os
from shlex import quote

from core.logging import logger
from core.shell import CommandRunner
from diagnostics.models import ModInstallationResult

NO_FILES_MARKER = "No .reds files"


@dataclass(frozen=True)
class ModSettings:
    """Where REDscript may live and what marks a compiled install."""

    search_dirs: tuple[str, ...] = (
        "/Applications/Cyberpunk 2077/archive/pc/mod",
        "/Applications/Cyberpunk 2077/Cyberpunk2077.app/Contents/Resources/red4ext",
        "~/Library/Application Support/Cyberpunk 2077/red4ext",
    )
    script_extension: str = ".reds"
    compiled_marker: str = "r6/scripts/compiled.reds"


async def _find_mod_dir(runner: CommandRunner, search_dirs: tuple[str, ...]) -> str | None:
    for candidate in search_dirs:
        path = os.path.expanduser(candidate)
        result = await runner.run(f"test -d {quote(path)}")
        if result.success:
            return path
    return None


async def probe(runner: CommandRunner, settings: ModSettings | None = None) -> ModInstallationResult:
    """Locate the mod directory and check its scripts were compiled.

    Args:
        runner: Command runner used for filesystem checks.
        settings: Optional mod configuration.

    Returns:
        Mod installation result. ``compilation_log`` is a directory listing
        of script files, not a build log.
    """

    mods = settings or ModSettings()
    issues: list[str] = []

    try:
        mod_dir = await _find_mod_dir(runner, mods.search_dirs)
        if mod_dir is None:
            issues.append("REDscript mod directory not found")
            return ModInstallationResult(installed=False, compiled=False, issues=tuple(issues))

        pattern = f"*{mods.script_extension}"
        found = await runner.run(f"find {quote(mod_dir)} -name {quote(pattern)} 2>/dev/null")
        scripts = [line for line in found.stdout.strip().split("\n") if line]
        if not scripts:
            issues.append(f"No REDscript files ({mods.script_extension}) found")

        listing = await runner.run(
            f"cd {quote(mod_dir)} && ls -la {pattern} 2>/dev/null || echo {quote(NO_FILES_MARKER)}"
        )

        compiled = False
        if scripts:
            marker = os.path.join(mod_dir, mods.compiled_marker)
            compiled = (await runner.run(f"test -f {quote(marker)} 2>/dev/null")).success
            if not compiled:
                issues.append("REDscript files not compiled")

        return ModInstallationResult(
            installed=True,
            compiled=compiled,
            path=mod_dir,
            compilation_log=listing.stdout,
            scripts=tuple(scripts) if scripts else None,
            issues=tuple(issues),
        )
    except Exception as exc:  # noqa: BLE001 - probe should not raise
        logger.warning("REDscript probe failed: %s", exc)
        issues.append(f"Error checking REDscript: {exc}")
        return ModInstallationResult(installed=False, compiled=False, issues=tuple(issues))
