"""
hud_manager.py
--------------
Turns a GameSnapshot into draw calls.

Draws the ground line, the player (normal or dead colour, leg animation
while running), the obstacles, the score and the game-over message with
its RESTART button. Score text is kept current through ScoreChangedEvent.
"""

import pygame

from dino_runner.core.runtime.game_session import SessionState
from dino_runner.core.runtime.game_settings import Colors, Debug, Fonts, Layers
from dino_runner.core.services.event_manager import GameStartedEvent, ScoreChangedEvent
from dino_runner.entities.entity_state import PlayerStatus


IDLE_HINT = "Press SPACE or tap to start"
LEG_SWAP_FRAMES = 6


class HudManager:

    def __init__(self, draw_manager, cfg, events, screen_size):
        """
        Args:
            draw_manager: DrawManager receiving the queued shapes
            cfg: Full game config (player geometry, ground height)
            events: EventManager to subscribe to
            screen_size: (width, height) of the play area
        """
        self.draw_manager = draw_manager
        self.player_cfg = cfg["player"]
        self.ground_height = cfg["play_area"]["ground_height"]
        self.width, self.height = screen_size

        self.score_text = "Score: 0"
        self.restart_rect = None
        self._frame = 0

        events.subscribe(ScoreChangedEvent, self.on_score_changed)
        events.subscribe(GameStartedEvent, self.on_game_started)

    # ===========================================================
    # Event Handlers
    # ===========================================================

    def on_score_changed(self, event):
        self.score_text = f"Score: {event.score}"

    def on_game_started(self, event):
        self.score_text = "Score: 0"

    # ===========================================================
    # Drawing
    # ===========================================================

    def draw(self, snapshot, hitboxes=()):
        """Queue everything for one frame."""
        self._frame += 1
        dm = self.draw_manager
        floor_y = self.height - self.ground_height

        dm.queue_rect((0, floor_y, self.width, self.ground_height), Colors.GROUND, Layers.BACKGROUND)

        for obstacle in snapshot.obstacles:
            right = self.width - obstacle.offset
            dm.queue_rect(
                (right - obstacle.width, floor_y - obstacle.height, obstacle.width, obstacle.height),
                Colors.OBSTACLE, Layers.OBSTACLES
            )

        self._draw_player(snapshot)

        dm.queue_text(self.score_text, (self.width - 150, 12), Colors.TEXT, Fonts.SCORE_SIZE, Layers.UI)

        if snapshot.state == SessionState.IDLE:
            dm.queue_text(IDLE_HINT, (self.width / 2, self.height / 2),
                          Colors.TEXT, Fonts.HINT_SIZE, Layers.UI, center=True)

        self._draw_message(snapshot)

        if Debug.HITBOX_VISIBLE:
            for box in hitboxes:
                dm.queue_rect(box.as_tuple(), (255, 200, 0), Layers.DEBUG, Debug.HITBOX_LINE_WIDTH)

    def _draw_player(self, snapshot):
        cfg = self.player_cfg
        color = Colors.PLAYER_DEAD if snapshot.player_status == PlayerStatus.DEAD else Colors.PLAYER
        bottom = self.height - snapshot.player_bottom
        top = bottom - cfg["height"]

        # Body stops short of the feet; legs fill the last 10 px
        self.draw_manager.queue_rect((cfg["left"], top, cfg["width"], cfg["height"] - 10),
                                     color, Layers.PLAYER)

        leg_w = cfg["width"] // 4
        back_leg = (cfg["left"] + 6, bottom - 10, leg_w, 10)
        front_leg = (cfg["left"] + cfg["width"] - 6 - leg_w, bottom - 10, leg_w, 10)
        if snapshot.player_running and (self._frame // LEG_SWAP_FRAMES) % 2:
            back_leg = (back_leg[0], bottom - 10, leg_w, 6)
        elif snapshot.player_running:
            front_leg = (front_leg[0], bottom - 10, leg_w, 6)

        self.draw_manager.queue_rect(back_leg, color, Layers.PLAYER)
        self.draw_manager.queue_rect(front_leg, color, Layers.PLAYER)

    def _draw_message(self, snapshot):
        if not snapshot.message_visible:
            self.restart_rect = None
            return

        box = pygame.Rect(0, 0, 360, 150)
        box.center = (self.width // 2, self.height // 2 - 10)
        self.draw_manager.queue_rect(box, Colors.MESSAGE_BG, Layers.OVERLAY)
        self.draw_manager.queue_rect(box, Colors.TEXT, Layers.OVERLAY, 2)
        self.draw_manager.queue_text(snapshot.message, (box.centerx, box.centery - 15),
                                     Colors.TEXT, Fonts.MESSAGE_SIZE, Layers.OVERLAY, center=True)

        self.restart_rect = pygame.Rect(0, 0, 120, 30)
        self.restart_rect.midbottom = (box.centerx, box.bottom - 10)
        self.draw_manager.queue_rect(self.restart_rect, Colors.BUTTON, Layers.OVERLAY + 1)
        self.draw_manager.queue_text("RESTART", self.restart_rect.center, Colors.BUTTON_TEXT,
                                     Fonts.HINT_SIZE, Layers.OVERLAY + 2, center=True)
