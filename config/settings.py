"""Typed diagnostic settings built from the loaded configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from config.controller import ConfigController, ConfigError
from galaxy.diagnostics import CompanionSettings
from game.launch import LaunchSettings
from game.layout import GameLayout
from macos.diagnostics import MINIMUM_VERSION
from mods.diagnostics import ModSettings


@dataclass(frozen=True)
class DiagnosticSettings:
    """Everything the probes need to know about the installation."""

    game: GameLayout = field(default_factory=GameLayout)
    macos_minimum: tuple[int, int] = MINIMUM_VERSION
    galaxy: CompanionSettings = field(default_factory=CompanionSettings)
    redscript: ModSettings = field(default_factory=ModSettings)
    launch: LaunchSettings = field(default_factory=LaunchSettings)


def _parse_minimum_version(value: str) -> tuple[int, int]:
    parts = value.strip().split(".")
    try:
        major = int(parts[0])
        minor = int(parts[1]) if len(parts) > 1 else 0
    except ValueError as exc:
        raise ConfigError(f"Invalid macos.minimum_version {value!r}") from exc
    return major, minor


def load_settings(config: dict[str, Any] | None = None) -> DiagnosticSettings:
    """Build settings from a normalized config dict or the loaded controller."""

    if config is None:
        config = ConfigController.get_instance().get_config()

    game_cfg = config["game"]
    galaxy_cfg = config["galaxy"]
    redscript_cfg = config["redscript"]
    launch_cfg = config["launch"]

    return DiagnosticSettings(
        game=GameLayout(
            install_dir=game_cfg["install_dir"],
            bundle_name=game_cfg["bundle_name"],
            executable_name=game_cfg["executable_name"],
            libraries=tuple(game_cfg["libraries"]),
        ),
        macos_minimum=_parse_minimum_version(config["macos"]["minimum_version"]),
        galaxy=CompanionSettings(
            process_name=galaxy_cfg["process_name"],
            auth_markers=tuple(galaxy_cfg["auth_markers"]),
            socket_path=galaxy_cfg["socket_path"],
        ),
        redscript=ModSettings(
            search_dirs=tuple(redscript_cfg["search_dirs"]),
            script_extension=redscript_cfg["script_extension"],
            compiled_marker=redscript_cfg["compiled_marker"],
        ),
        launch=LaunchSettings(
            enabled=launch_cfg["enabled"],
            timeout_s=launch_cfg["timeout_s"],
            trace_env=launch_cfg["trace_env"],
        ),
    )
