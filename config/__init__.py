"""Configuration package utilities."""

__all__ = ["ConfigController", "ConfigError", "DiagnosticSettings", "load_settings"]


def __getattr__(name: str):
    if name in {"ConfigController", "ConfigError"}:
        from config import controller

        return getattr(controller, name)
    if name in {"DiagnosticSettings", "load_settings"}:
        from config import settings

        return getattr(settings, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
