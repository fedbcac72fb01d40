"""Diagnostics routines for the bundled dynamic libraries."""

from __future__ import annotations

from shlex import quote

from core.logging import logger
from core.shell import CommandRunner
from diagnostics.heuristics import count_dependency_lines
from diagnostics.models import LibrariesResult, LibraryCheck
from game.layout import GameLayout


async def probe(runner: CommandRunner, layout: GameLayout | None = None) -> LibrariesResult:
    """Check every required library and count its linked dependencies.

    A failure on one library is recorded against that library only.
    """

    settings = layout or GameLayout()
    libraries: list[LibraryCheck] = []
    issues: list[str] = []

    for name, path in settings.library_paths():
        try:
            found = await runner.run(f"test -f {quote(path)}")
            loading_info = ""
            if found.success:
                otool = await runner.run(f"otool -L {quote(path)}")
                loading_info = f"Dependencies: {count_dependency_lines(otool.stdout)}"
            else:
                issues.append(f"Required library missing: {name}")

            libraries.append(
                LibraryCheck(name=name, path=path, found=found.success, loading_info=loading_info)
            )
        except Exception as exc:  # noqa: BLE001 - keep checking remaining libraries
            logger.warning("Library probe failed for %s: %s", name, exc)
            issues.append(f"Error checking library {name}: {exc}")
            libraries.append(
                LibraryCheck(name=name, path=path, found=False, loading_info=f"Error: {exc}")
            )

    return LibrariesResult(libraries=tuple(libraries), issues=tuple(issues))
