"""Configuration controller for YAML-based settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

PACKAGE_CONFIG_DIR = Path(__file__).resolve().parent


class ConfigError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


@dataclass(frozen=True)
class ConfigPaths:
    """Filesystem paths for configuration files."""

    config_dir: Path
    config_file: Path
    override_file: Path


class ConfigController:
    """Singleton controller for loading configuration."""

    _instance: "ConfigController | None" = None

    def __init__(self, config_dir: Path | None = None, config_file: str = "default.yaml") -> None:
        if ConfigController._instance is not None:
            raise RuntimeError("You cannot create another ConfigController class")

        directory = config_dir if config_dir is not None else PACKAGE_CONFIG_DIR
        self.paths = ConfigPaths(
            config_dir=directory,
            config_file=directory / config_file,
            override_file=directory / "override.yaml",
        )
        self.config: dict[str, Any] = {}
        self.load_config()

    @classmethod
    def get_instance(cls, config_dir: Path | None = None) -> "ConfigController":
        """Return the singleton instance of the controller."""

        if cls._instance is None:
            cls._instance = cls(config_dir=config_dir)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    def load_config(self) -> None:
        """Load configuration from default and override YAML files."""

        config = self._read_yaml(self.paths.config_file)
        if self.paths.override_file.exists():
            override_config = self._read_yaml(self.paths.override_file)
            if override_config:
                config = self._deep_merge(config, override_config)

        self.config = self._normalize_config(config)

    def get_config(self) -> dict[str, Any]:
        """Return the currently loaded configuration."""

        return dict(self.config)

    def _read_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with path.open("r", encoding="utf-8") as file:
                data = yaml.safe_load(file) or {}
        except OSError as exc:
            raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Malformed config file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge dictionaries, overriding base values with override values."""

        merged = dict(base)
        for key, value in override.items():
            if (
                key in merged
                and isinstance(merged[key], dict)
                and isinstance(value, dict)
            ):
                merged[key] = self._deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def _normalize_config(self, config: dict[str, Any]) -> dict[str, Any]:
        """Fill in defaults for every section the probes read."""

        normalized = dict(config)
        normalized["logging_level"] = str(normalized.get("logging_level", "INFO"))
        normalized["file_logging_enabled"] = bool(normalized.get("file_logging_enabled", False))
        normalized["log_file"] = str(normalized.get("log_file", "~/Library/Logs/redscript-doctor.log"))

        game_cfg = dict(normalized.get("game") or {})
        game_cfg["install_dir"] = str(game_cfg.get("install_dir", "/Applications/Cyberpunk 2077"))
        game_cfg["bundle_name"] = str(game_cfg.get("bundle_name", "Cyberpunk2077.app"))
        game_cfg["executable_name"] = str(game_cfg.get("executable_name", "Cyberpunk2077"))
        game_cfg["libraries"] = [
            str(name)
            for name in game_cfg.get(
                "libraries",
                [
                    "libBink2MacArm64.dylib",
                    "libGalaxy.dylib",
                    "libGameServicesGOG.dylib",
                    "libREDGalaxy64.dylib",
                ],
            )
        ]
        normalized["game"] = game_cfg

        macos_cfg = dict(normalized.get("macos") or {})
        macos_cfg["minimum_version"] = str(macos_cfg.get("minimum_version", "15.5"))
        normalized["macos"] = macos_cfg

        galaxy_cfg = dict(normalized.get("galaxy") or {})
        galaxy_cfg["process_name"] = str(galaxy_cfg.get("process_name", "GOG Galaxy"))
        galaxy_cfg["auth_markers"] = [
            str(marker) for marker in galaxy_cfg.get("auth_markers", ["--authenticated", "--logged-in"])
        ]
        galaxy_cfg["socket_path"] = str(galaxy_cfg.get("socket_path", "/tmp/gog_galaxy_socket"))
        normalized["galaxy"] = galaxy_cfg

        install_dir = game_cfg["install_dir"]
        redscript_cfg = dict(normalized.get("redscript") or {})
        redscript_cfg["search_dirs"] = [
            str(path)
            for path in redscript_cfg.get(
                "search_dirs",
                [
                    f"{install_dir}/archive/pc/mod",
                    f"{install_dir}/{game_cfg['bundle_name']}/Contents/Resources/red4ext",
                    "~/Library/Application Support/Cyberpunk 2077/red4ext",
                ],
            )
        ]
        redscript_cfg["script_extension"] = str(redscript_cfg.get("script_extension", ".reds"))
        redscript_cfg["compiled_marker"] = str(
            redscript_cfg.get("compiled_marker", "r6/scripts/compiled.reds")
        )
        normalized["redscript"] = redscript_cfg

        launch_cfg = dict(normalized.get("launch") or {})
        launch_cfg["enabled"] = bool(launch_cfg.get("enabled", True))
        launch_cfg["timeout_s"] = int(launch_cfg.get("timeout_s", 5))
        launch_cfg["trace_env"] = str(launch_cfg.get("trace_env", "DYLD_PRINT_LIBRARIES"))
        normalized["launch"] = launch_cfg

        return normalized
