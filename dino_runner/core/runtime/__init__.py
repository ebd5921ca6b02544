"""
Runtime exports.

Session state, settings and config loading. The pygame GameLoop is not
re-exported so the core imports without a display.
"""

from dino_runner.core.runtime.game_settings import (
    Display,
    Fonts,
    Colors,
    Layers,
    Debug,
)
from dino_runner.core.runtime.game_config import DEFAULT_CONFIG, load_game_config
from dino_runner.core.runtime.game_session import GameSession, GameSnapshot, SessionState
from dino_runner.core.runtime.play_area import GeometryError, PlayArea, StaticGeometry

__all__ = [
    # Settings
    'Display',
    'Fonts',
    'Colors',
    'Layers',
    'Debug',
    # Config
    'DEFAULT_CONFIG',
    'load_game_config',
    # Session
    'GameSession',
    'GameSnapshot',
    'SessionState',
    # Geometry
    'GeometryError',
    'PlayArea',
    'StaticGeometry',
]
