"""Models for diagnostic probe results and the aggregate report."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity attached to a reported issue."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IssueCategory(str, Enum):
    """Probe category an issue originates from."""

    INSTALLATION = "installation"
    MACOS_VERSION = "macos_version"
    LIBRARIES = "libraries"
    PERMISSIONS = "permissions"
    GOG_GALAXY = "gog_galaxy"
    REDSCRIPT = "redscript"
    LAUNCH = "launch"

    @property
    def title(self) -> str:
        return _CATEGORY_TITLES[self]

    @property
    def severity(self) -> Severity:
        return _CATEGORY_SEVERITIES[self]


_CATEGORY_TITLES = {
    IssueCategory.INSTALLATION: "Game Installation",
    IssueCategory.MACOS_VERSION: "macOS Version",
    IssueCategory.LIBRARIES: "Library Issue",
    IssueCategory.PERMISSIONS: "Permission Issue",
    IssueCategory.GOG_GALAXY: "GOG Galaxy",
    IssueCategory.REDSCRIPT: "REDscript",
    IssueCategory.LAUNCH: "Launch Test",
}

_CATEGORY_SEVERITIES = {
    IssueCategory.INSTALLATION: Severity.HIGH,
    IssueCategory.MACOS_VERSION: Severity.HIGH,
    IssueCategory.LIBRARIES: Severity.HIGH,
    IssueCategory.PERMISSIONS: Severity.MEDIUM,
    IssueCategory.GOG_GALAXY: Severity.MEDIUM,
    IssueCategory.REDSCRIPT: Severity.MEDIUM,
    IssueCategory.LAUNCH: Severity.HIGH,
}


@dataclass(frozen=True)
class Issue:
    """Human-readable finding surfaced in the report."""

    severity: Severity
    title: str
    description: str

    @classmethod
    def from_category(cls, category: IssueCategory, description: str) -> "Issue":
        return cls(severity=category.severity, title=category.title, description=description)

    def to_payload(self) -> dict[str, str]:
        return {
            "severity": self.severity.value,
            "title": self.title,
            "description": self.description,
        }


@dataclass(frozen=True)
class LibraryCheck:
    """Presence of one bundled dynamic library."""

    name: str
    path: str
    found: bool
    loading_info: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "path": self.path, "found": self.found}
        if self.loading_info is not None:
            payload["loadingInfo"] = self.loading_info
        return payload


@dataclass(frozen=True)
class PermissionCheck:
    """Mode string and ownership of one installation path."""

    path: str
    permissions: str
    accessible: bool
    owner: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "path": self.path,
            "permissions": self.permissions,
            "accessible": self.accessible,
        }
        if self.owner is not None:
            payload["owner"] = self.owner
        return payload


@dataclass(frozen=True)
class InstallationResult:
    installed: bool
    executable_path: str
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class OsVersionResult:
    version: str
    compatible: bool
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class LibrariesResult:
    libraries: tuple[LibraryCheck, ...] = ()
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class PermissionsResult:
    permissions: tuple[PermissionCheck, ...] = ()
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class CompanionClientResult:
    running: bool
    authenticated: bool
    issues: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        return {
            "running": self.running,
            "authenticated": self.authenticated,
            "issues": list(self.issues),
        }


@dataclass(frozen=True)
class ModInstallationResult:
    installed: bool
    compiled: bool
    path: str | None = None
    compilation_log: str | None = None
    scripts: tuple[str, ...] | None = None
    issues: tuple[str, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"installed": self.installed, "compiled": self.compiled}
        if self.compilation_log is not None:
            payload["compilationLog"] = self.compilation_log
        if self.scripts is not None:
            payload["scripts"] = list(self.scripts)
        return payload


@dataclass(frozen=True)
class LaunchResult:
    success: bool
    skipped: bool = False
    issues: tuple[str, ...] = ()


@dataclass(frozen=True)
class DiagnosticReport:
    """Aggregate outcome of one diagnostic run."""

    installation: InstallationResult
    os_version: OsVersionResult
    libraries: LibrariesResult
    permissions: PermissionsResult
    gog_galaxy: CompanionClientResult
    redscript: ModInstallationResult
    launch: LaunchResult
    issues: tuple[Issue, ...] = ()

    @property
    def game_installed(self) -> bool:
        return self.installation.installed

    @property
    def macos_version(self) -> str:
        return self.os_version.version

    @property
    def macos_compatible(self) -> bool:
        return self.os_version.compatible

    @property
    def redscript_installed(self) -> bool:
        return self.redscript.installed

    @property
    def redscript_compiled(self) -> bool:
        return self.redscript.compiled

    @property
    def launch_success(self) -> bool:
        return self.launch.success

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-ready report consumed by the UI."""

        return {
            "gameInstalled": self.game_installed,
            "macosVersion": self.macos_version,
            "macosCompatible": self.macos_compatible,
            "redscriptInstalled": self.redscript_installed,
            "redscriptCompiled": self.redscript_compiled,
            "launchSuccess": self.launch_success,
            "issues": [issue.to_payload() for issue in self.issues],
            "libraries": [library.to_payload() for library in self.libraries.libraries],
            "permissions": [check.to_payload() for check in self.permissions.permissions],
            "gogGalaxy": self.gog_galaxy.to_payload(),
            "redscript": self.redscript.to_payload(),
        }
