"""
input_manager.py
----------------
Translates pygame events into the runner's discrete actions.

Provides:
- "press"   : space / up arrow, mouse click or finger tap on the play area
- "restart" : click or tap on the RESTART button while it is shown
- "quit"    : window close or escape

The game core only ever sees these action names.
"""

import pygame

from dino_runner.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "press": [pygame.K_SPACE, pygame.K_UP],
    "quit": [pygame.K_ESCAPE],
}


class InputManager:
    """
    Maps raw pygame events to action names.

    Usage:
        for event in pygame.event.get():
            action = input_manager.handle_event(event, restart_rect)
            if action == "press":
                game.press(now)
    """

    def __init__(self, key_bindings=None, screen_size=(800, 250)):
        """
        Args:
            key_bindings: Custom key bindings dict (uses DEFAULT_KEY_BINDINGS if None)
            screen_size: Window size, used to convert normalized touch coordinates
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.screen_size = screen_size
        self._key_to_action = {
            key: action
            for action, keys in self.key_bindings.items()
            for key in keys
        }
        DebugLogger.init_entry("InputManager")

    # ===========================================================
    # Event Translation
    # ===========================================================

    def handle_event(self, event, restart_rect=None):
        """
        Translate one pygame event.

        Args:
            event: pygame event
            restart_rect: Rect of the visible RESTART button, or None when hidden

        Returns:
            str | None: Action name, or None if the event is not bound.
        """
        if event.type == pygame.QUIT:
            return "quit"

        if event.type == pygame.KEYDOWN:
            action = self._key_to_action.get(event.key)
            if action:
                DebugLogger.action(f"Key -> {action}")
            return action

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # SDL mirrors each finger tap as a mouse click; FINGERDOWN handles taps
            if getattr(event, "touch", False):
                return None
            return self._pointer_action(event.pos, restart_rect)

        if event.type == pygame.FINGERDOWN:
            width, height = self.screen_size
            pos = (event.x * width, event.y * height)
            return self._pointer_action(pos, restart_rect)

        return None

    def _pointer_action(self, pos, restart_rect):
        if restart_rect is not None and restart_rect.collidepoint(pos):
            DebugLogger.action("Tap -> restart")
            return "restart"

        width, height = self.screen_size
        if 0 <= pos[0] < width and 0 <= pos[1] < height:
            DebugLogger.action("Tap -> press")
            return "press"
        return None
