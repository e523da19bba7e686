"""
flappy_console: a Flappy Bird clone on a character-cell grid.
"""

from .console import CellBuffer, Console
from .data_models import GameConfig, GameMode, Key, Obstacle, Player, DEFAULT_CONFIG
from .simulation import Simulation

__all__ = [
    "CellBuffer",
    "Console",
    "GameConfig",
    "GameMode",
    "Key",
    "Obstacle",
    "Player",
    "DEFAULT_CONFIG",
    "Simulation",
]

__version__ = "0.1.0"
