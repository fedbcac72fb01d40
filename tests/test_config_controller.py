"""Tests for configuration loading and settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from config.controller import PACKAGE_CONFIG_DIR, ConfigController, ConfigError
from config.settings import DiagnosticSettings, load_settings


@pytest.fixture(autouse=True)
def _reset_singletons():
    ConfigController.reset_instance()
    yield
    ConfigController.reset_instance()


def _write(path: Path, text: str) -> None:
    path.write_text(text, encoding="utf-8")


def test_packaged_defaults_match_built_in_settings() -> None:
    """The shipped default.yaml describes the stock GOG install."""

    config = ConfigController.get_instance().get_config()

    assert load_settings(config) == DiagnosticSettings()
    assert config["launch"]["enabled"] is True


def test_empty_config_is_normalized(tmp_path: Path) -> None:
    _write(tmp_path / "default.yaml", "{}")

    config = ConfigController(config_dir=tmp_path).get_config()

    assert config["logging_level"] == "INFO"
    assert config["macos"]["minimum_version"] == "15.5"
    assert load_settings(config) == DiagnosticSettings()


def test_override_is_deep_merged(tmp_path: Path) -> None:
    _write(tmp_path / "default.yaml", "game:\n  install_dir: /Games/Cyberpunk 2077\n")
    _write(tmp_path / "override.yaml", "launch:\n  enabled: false\n  timeout_s: 9\n")

    settings = load_settings(ConfigController(config_dir=tmp_path).get_config())

    assert settings.game.install_dir == "/Games/Cyberpunk 2077"
    assert settings.game.bundle_name == "Cyberpunk2077.app"
    assert settings.launch.enabled is False
    assert settings.launch.timeout_s == 9
    assert settings.redscript.search_dirs[0] == "/Games/Cyberpunk 2077/archive/pc/mod"


def test_malformed_yaml_raises_config_error(tmp_path: Path) -> None:
    _write(tmp_path / "default.yaml", "game: [unclosed\n")

    with pytest.raises(ConfigError):
        ConfigController(config_dir=tmp_path)


def test_missing_default_raises_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        ConfigController(config_dir=tmp_path)


def test_invalid_minimum_version_raises_config_error(tmp_path: Path) -> None:
    _write(tmp_path / "default.yaml", "macos:\n  minimum_version: fifteen\n")

    with pytest.raises(ConfigError):
        load_settings(ConfigController(config_dir=tmp_path).get_config())


def test_singleton_refuses_second_instance(tmp_path: Path) -> None:
    _write(tmp_path / "default.yaml", "{}")
    ConfigController.get_instance(config_dir=tmp_path)

    with pytest.raises(RuntimeError):
        ConfigController(config_dir=tmp_path)


def test_install_dir_override_moves_mod_search_dirs(tmp_path: Path) -> None:
    """Mod folders follow game.install_dir when only the install root is overridden."""

    _write(tmp_path / "default.yaml", (PACKAGE_CONFIG_DIR / "default.yaml").read_text(encoding="utf-8"))
    _write(tmp_path / "override.yaml", "game:\n  install_dir: /Games/Cyberpunk 2077\n")

    settings = load_settings(ConfigController(config_dir=tmp_path).get_config())

    assert settings.redscript.search_dirs == (
        "/Games/Cyberpunk 2077/archive/pc/mod",
        "/Games/Cyberpunk 2077/Cyberpunk2077.app/Contents/Resources/red4ext",
        "~/Library/Application Support/Cyberpunk 2077/red4ext",
    )
