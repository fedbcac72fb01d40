"""Filesystem layout of the macOS game installation."""

from __future__ import annotations

from dataclasses import dataclass
import os

DEFAULT_LIBRARIES = (
    "libBink2MacArm64.dylib",
    "libGalaxy.dylib",
    "libGameServicesGOG.dylib",
    "libREDGalaxy64.dylib",
)


@dataclass(frozen=True)
class GameLayout:
    """Locations of the game bundle and the libraries it ships with."""

    install_dir: str = "/Applications/Cyberpunk 2077"
    bundle_name: str = "Cyberpunk2077.app"
    executable_name: str = "Cyberpunk2077"
    libraries: tuple[str, ...] = DEFAULT_LIBRARIES

    @property
    def app_bundle(self) -> str:
        return os.path.join(self.install_dir, self.bundle_name)

    @property
    def macos_dir(self) -> str:
        return os.path.join(self.app_bundle, "Contents", "MacOS")

    @property
    def frameworks_dir(self) -> str:
        return os.path.join(self.app_bundle, "Contents", "Frameworks")

    @property
    def executable(self) -> str:
        return os.path.join(self.macos_dir, self.executable_name)

    def library_paths(self) -> list[tuple[str, str]]:
        """Return (name, path) pairs for every required library."""

        return [(name, os.path.join(self.frameworks_dir, name)) for name in self.libraries]

    def permission_paths(self) -> list[str]:
        """Return the paths whose permissions are inspected, outermost first."""

        return [
            self.install_dir,
            self.app_bundle,
            self.macos_dir,
            self.executable,
            self.frameworks_dir,
        ]
