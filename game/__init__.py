"""Game installation probes."""

from game.layout import GameLayout

__all__ = ["GameLayout"]
