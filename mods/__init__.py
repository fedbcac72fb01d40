"""REDscript mod probes."""

from mods.diagnostics import ModSettings

__all__ = ["ModSettings"]
