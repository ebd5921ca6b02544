"""
game_settings.py
----------------
Centralized constants for the window and presentation layer.
Gameplay tunables live in config/game.json (see game_config.py).
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    FPS: int = 60
    CAPTION: str = "Dino Runner"


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    SCORE_SIZE: int = 28
    MESSAGE_SIZE: int = 24
    HINT_SIZE: int = 20


# ===========================================================
# Colors
# ===========================================================

class Colors:
    """RGB tuples used by the renderer."""
    BACKGROUND = (247, 247, 247)
    GROUND = (83, 83, 83)
    PLAYER = (64, 64, 64)           # Normal status
    PLAYER_DEAD = (217, 4, 41)      # Shown after a collision
    OBSTACLE = (0, 112, 0)
    TEXT = (32, 32, 32)
    MESSAGE_BG = (255, 255, 255)
    BUTTON = (83, 83, 83)
    BUTTON_TEXT = (255, 255, 255)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    OBSTACLES: int = 300
    PLAYER: int = 400
    UI: int = 600
    OVERLAY: int = 700      # Game-over message and restart button
    DEBUG: int = 900


# ===========================================================
# Debug Display
# ===========================================================

class Debug:
    """Visual debug toggles -- not related to logging."""
    FRAME_TIME_WARNING: float = 16.67
    HITBOX_VISIBLE: bool = False
    HITBOX_LINE_WIDTH: int = 1
