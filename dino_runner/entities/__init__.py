from dino_runner.entities.entity_state import PlayerStatus
from dino_runner.entities.obstacle import Obstacle
from dino_runner.entities.player import Player

__all__ = ['PlayerStatus', 'Obstacle', 'Player']
