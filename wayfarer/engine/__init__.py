"""
Wayfarer Game Engine.

The exploration loop that creates the character, moves it through the
world and hands off to combat sessions.
"""

from __future__ import annotations

from wayfarer.engine.game import GameEngine
from wayfarer.engine.models import EngineConfig, ExplorationResult, GameState

__all__ = [
    "EngineConfig",
    "ExplorationResult",
    "GameEngine",
    "GameState",
]
