"""
game_loop.py
------------
Defines the GameLoop class that drives the runner in a pygame window.

Responsibilities
----------------
- Initialize pygame, the window and the presentation systems
- Feed pygame events through the InputManager into the GameplayController
- Hand one timestamp per frame to the controller (event -> update -> render)
- Draw the controller's snapshot through the HUD and DrawManager
"""

import time

import pygame

from dino_runner.core.debug.debug_logger import DebugLogger
from dino_runner.core.runtime.game_settings import Debug, Display
from dino_runner.core.runtime.play_area import PlayArea
from dino_runner.core.services.event_manager import EventManager
from dino_runner.core.services.input_manager import InputManager
from dino_runner.graphics.draw_manager import DrawManager
from dino_runner.scenes.gameplay_controller import GameplayController
from dino_runner.systems.collision.hitbox import Hitbox
from dino_runner.ui.hud_manager import HudManager


class SurfaceGeometry:
    """Reads the play area from the live window surface every cycle."""

    def __init__(self, ground_height):
        self.ground_height = ground_height

    def get_play_area(self) -> PlayArea:
        surface = pygame.display.get_surface()
        if surface is None:
            return PlayArea.validated(None, None, self.ground_height)
        width, height = surface.get_size()
        return PlayArea.validated(width, height, self.ground_height)


class GameLoop:
    """Core runtime controller that manages the game's main loop."""

    def __init__(self, config, fps=Display.FPS, rng=None):
        """
        Args:
            config: Full game config dict
            fps: Frame cap handed to pygame's clock
            rng: random.Random for obstacle sizes
        """
        DebugLogger.section("Initializing GameLoop")

        pygame.init()
        pygame.font.init()

        area = config["play_area"]
        self.size = (area["width"], area["height"])
        self.screen = pygame.display.set_mode(self.size)
        pygame.display.set_caption(Display.CAPTION)
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {self.size[0]}x{self.size[1]} @ {fps} FPS")

        self.fps = fps
        self.clock = pygame.time.Clock()
        self.running = True
        self._last_perf_warn_time = 0.0

        self.events = EventManager()
        self.input_manager = InputManager(screen_size=self.size)
        self.draw_manager = DrawManager()

        self.game = GameplayController(
            config,
            geometry=SurfaceGeometry(area["ground_height"]),
            events=self.events,
            rng=rng,
        )
        self.hud = HudManager(self.draw_manager, config, self.events, self.size)

        DebugLogger.system("Dino Runner initialized. Press SPACE or tap to start!")

    # ===========================================================
    # Core Runtime Loop
    # ===========================================================

    def run(self):
        """Main loop that runs until the window is closed."""
        DebugLogger.section("Game Loop")

        while self.running:
            self.clock.tick(self.fps)
            now = pygame.time.get_ticks()

            self._handle_events(now)
            self.game.update(now)
            self._draw()

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self, now):
        """Route pygame events to the controller as start/jump/restart."""
        for event in pygame.event.get():
            action = self.input_manager.handle_event(event, self.hud.restart_rect)

            if action == "quit":
                self.running = False
                DebugLogger.action("Quit signal received")
                break
            if action == "press":
                self.game.press(now)
            elif action == "restart":
                self.game.start(now)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        start = time.perf_counter()

        self.draw_manager.clear()
        self.hud.draw(self.game.snapshot(), self._debug_hitboxes())
        self.draw_manager.render(self.screen)
        pygame.display.flip()

        frame_time_ms = (time.perf_counter() - start) * 1000
        if frame_time_ms > Debug.FRAME_TIME_WARNING:
            now = time.perf_counter()
            if now - self._last_perf_warn_time > 1.0:  # Throttle to 1/sec
                self._last_perf_warn_time = now
                DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f} ms", category="render")

    def _debug_hitboxes(self):
        if not Debug.HITBOX_VISIBLE:
            return ()
        area = PlayArea.validated(self.size[0], self.size[1], self.game.cfg["play_area"]["ground_height"])
        boxes = [Hitbox.for_player(self.game.player, area)]
        boxes.extend(Hitbox.for_obstacle(o, area) for o in self.game.session.obstacles)
        return boxes
