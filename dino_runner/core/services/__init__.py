"""
Core services exports.

Event system and configuration loading. InputManager needs pygame and is
imported from its module directly.
"""

from dino_runner.core.services.config_manager import load_config
from dino_runner.core.services.event_manager import (
    EventManager,
    BaseEvent,
    GameStartedEvent,
    PlayerJumpedEvent,
    ObstacleSpawnedEvent,
    ScoreChangedEvent,
    GameOverEvent,
)

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'GameStartedEvent',
    'PlayerJumpedEvent',
    'ObstacleSpawnedEvent',
    'ScoreChangedEvent',
    'GameOverEvent',
]
