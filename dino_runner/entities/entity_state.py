"""
entity_state.py
---------------
Defines runtime state enumerations for the runner's entities.
Contains only states that change over time during gameplay.
"""

from enum import IntEnum


class PlayerStatus(IntEnum):
    """
    Visual status the renderer shows for the player.

    NORMAL -> regular colour
    DEAD   -> terminal indicator after a collision, cleared on restart
    """
    NORMAL = 0
    DEAD = 1
