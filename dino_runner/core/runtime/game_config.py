"""
game_config.py
--------------
Gameplay tunables with default fallbacks.

The game always starts even if game.json is missing or incomplete:
whatever the file provides is merged over DEFAULT_CONFIG.
"""

from dino_runner.core.services.config_manager import load_config

# ===========================================================
# Default Fallback Configuration
# ===========================================================
DEFAULT_CONFIG = {
    # -----------------------------------------------------------
    # Play Area (fallback when the renderer reports nothing)
    # -----------------------------------------------------------
    "play_area": {
        "width": 800,
        "height": 250,
        "ground_height": 10,     # Player and obstacles rest on this line
    },

    # -----------------------------------------------------------
    # Player Geometry & Physics
    # -----------------------------------------------------------
    "player": {
        "left": 20,
        "width": 40,
        "height": 50,
    },
    "physics": {
        "gravity": 0.6,          # Units per frame squared
        "jump_force": 12.0,      # Initial upward velocity
        "time_scaled": False,    # Scale steps by frame delta instead of per-cycle
        "reference_frame_ms": 1000 / 60,
    },

    # -----------------------------------------------------------
    # Obstacles
    # -----------------------------------------------------------
    "obstacles": {
        "min_width": 15,
        "max_width": 25,
        "min_height": 30,
        "max_height": 50,
    },

    # -----------------------------------------------------------
    # Difficulty Steps
    # -----------------------------------------------------------
    "difficulty": {
        "tier_size": 500,
        "base_speed": 4.0,
        "speed_step": 0.5,
        "max_speed": 10.0,
        "base_spawn_interval": 1800,
        "spawn_interval_step": 200,
        "min_spawn_interval": 800,
    },

    # -----------------------------------------------------------
    # Score
    # -----------------------------------------------------------
    "score": {
        "interval": 100,         # Time units per point
    },
}


def load_game_config(path="game.json", overrides=None):
    """
    Load game.json and apply fallback defaults for missing fields.

    Args:
        path: Config filename (resolved via the config index) or full path
        overrides: Optional nested dict applied on top (CLI flags)

    Returns:
        dict: Complete game configuration dictionary.
    """
    config = load_config(path, DEFAULT_CONFIG)
    for section, values in (overrides or {}).items():
        config.setdefault(section, {}).update(values)
    return config
