"""
draw_manager.py
---------------
Layered draw queue for primitive shapes and text.

Responsibilities:
- Maintain a per-layer queue of rects and text
- Cache fonts
- Render everything in layer order onto the target surface
"""

import pygame

from dino_runner.core.debug.debug_logger import DebugLogger
from dino_runner.core.runtime.game_settings import Colors


class DrawManager:
    """Handles all rendering operations with layered batching."""

    def __init__(self):
        self.fonts = {}
        self.layers = {}   # {layer: [(kind, payload), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False
        self.background = Colors.BACKGROUND

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Fonts
    # ===========================================================

    def get_font(self, size, name=None):
        key = (name, size)
        if key not in self.fonts:
            self.fonts[key] = pygame.font.Font(name, size)
        return self.fonts[key]

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for items in self.layers.values():
            items.clear()

    def _queue(self, layer, item):
        if layer not in self.layers:
            self.layers[layer] = []
            self._layers_dirty = True
        self.layers[layer].append(item)

    def queue_rect(self, rect, color, layer=0, width=0):
        """
        Queue a filled (width=0) or outlined rectangle.

        Args:
            rect: (x, y, w, h) tuple or pygame.Rect
            color: RGB tuple
            layer: Render layer (lower = first)
        """
        if rect is None:
            DebugLogger.warn(f"Skipped invalid rect at layer {layer}", category="render")
            return
        self._queue(layer, ("rect", (pygame.Rect(rect), color, width)))

    def queue_text(self, text, pos, color, size, layer=0, center=False):
        """
        Queue a line of text. Multi-line strings are split and stacked.

        Args:
            pos: Top-left position, or the center when center=True
        """
        self._queue(layer, ("text", (text, pos, color, size, center)))

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """Render all queued items to target surface in layer order."""
        target_surface.fill(self.background)

        if self._layers_dirty:
            self._layer_keys_cache = sorted(self.layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            for kind, payload in self.layers[layer]:
                if kind == "rect":
                    rect, color, width = payload
                    pygame.draw.rect(target_surface, color, rect, width)
                else:
                    self._render_text(target_surface, *payload)

    def _render_text(self, surface, text, pos, color, size, center):
        font = self.get_font(size)
        lines = text.split("\n")
        line_height = font.get_linesize()
        x, y = pos
        if center:
            y -= line_height * len(lines) / 2

        for i, line in enumerate(lines):
            image = font.render(line, True, color)
            rect = image.get_rect()
            if center:
                rect.midtop = (x, y + i * line_height)
            else:
                rect.topleft = (x, y + i * line_height)
            surface.blit(image, rect)
