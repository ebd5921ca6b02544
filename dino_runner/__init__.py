"""Dino Runner: a single-lane runner game built on pygame."""

__version__ = "1.0.0"
