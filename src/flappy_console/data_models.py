"""
data_models.py: Data structures for the game state.
"""

import random
from dataclasses import dataclass
from enum import Enum

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FRAME_DURATION, TIME_SCALE, GRAVITY,
    INITIAL_SPEED, FLAP_HEIGHT, PLAYER_X, PLAYER_Y, GAP_Y_MIN, GAP_Y_MAX,
    BASE_GAP_SIZE, MIN_GAP_SIZE, PLAYER_GLYPH, OBSTACLE_GLYPH,
    YELLOW, RED, BLACK
)
from .console import Console
from .physics_core import (
    integrate_fall, gap_bounds, is_outside_gap, gap_size_for_score
)


class GameMode(Enum):
    MENU = "menu"
    PLAYING = "playing"
    END = "end"


class Key(Enum):
    """The only keys the game reacts to; anything else arrives as None."""
    FLAP = "space"
    PLAY = "p"
    QUIT = "q"


@dataclass(frozen=True)
class GameConfig:
    """Screen geometry, timing and physics handed to a Simulation."""
    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    frame_duration: float = FRAME_DURATION
    time_scale: float = TIME_SCALE
    gravity: float = GRAVITY
    initial_speed: float = INITIAL_SPEED
    flap_height: int = FLAP_HEIGHT
    player_x: int = PLAYER_X
    player_y: int = PLAYER_Y
    gap_y_min: int = GAP_Y_MIN
    gap_y_max: int = GAP_Y_MAX
    base_gap_size: int = BASE_GAP_SIZE
    min_gap_size: int = MIN_GAP_SIZE

    def __post_init__(self):
        # Obstacles spawn at screen_width and must cross the player's column
        # before they scroll off, or the obstacle queue runs dry.
        if not 0 < self.player_x < self.screen_width:
            raise ValueError(
                f"player_x must be within (0, {self.screen_width}), got {self.player_x}")
        if self.gap_y_min >= self.gap_y_max:
            raise ValueError(
                f"empty gap range [{self.gap_y_min}, {self.gap_y_max})")
        if self.min_gap_size < 2:
            raise ValueError(f"min_gap_size must be at least 2, got {self.min_gap_size}")


DEFAULT_CONFIG = GameConfig()


@dataclass
class Player:
    """The controlled bird. Column is fixed, row and speed change every frame."""
    x: int
    y: int
    speed: float = INITIAL_SPEED

    @classmethod
    def spawn(cls, x: int, y: int, config: GameConfig = DEFAULT_CONFIG) -> "Player":
        return cls(x=x, y=y, speed=config.initial_speed)

    def flap(self, config: GameConfig = DEFAULT_CONFIG):
        """Jumps up instantly and drops any built-up fall speed."""
        self.y -= config.flap_height
        self.speed = config.initial_speed

    def apply_gravity(self, elapsed_ms: float, config: GameConfig = DEFAULT_CONFIG):
        self.y, self.speed = integrate_fall(
            self.y, self.speed, elapsed_ms,
            gravity=config.gravity, time_scale=config.time_scale)

    def render(self, console: Console):
        console.set(self.x, self.y, YELLOW, BLACK, PLAYER_GLYPH)


@dataclass
class Obstacle:
    """A wall with a single gap, scrolling left one column per step."""
    x: int
    gap_y: int
    size: int

    @classmethod
    def spawn(cls, x: int, score: int, rng: random.Random,
              config: GameConfig = DEFAULT_CONFIG) -> "Obstacle":
        """
        Creates an obstacle at column x. The gap centre is drawn from
        [gap_y_min, gap_y_max) and the gap narrows as the score grows.
        """
        return cls(
            x=x,
            gap_y=rng.randrange(config.gap_y_min, config.gap_y_max),
            size=gap_size_for_score(score, config.base_gap_size, config.min_gap_size),
        )

    def move_left(self):
        self.x -= 1

    def render(self, console: Console, screen_height: int = SCREEN_HEIGHT):
        top, bottom = gap_bounds(self.gap_y, self.size)
        for y in range(0, top):
            console.set(self.x, y, RED, BLACK, OBSTACLE_GLYPH)
        for y in range(bottom, screen_height):
            console.set(self.x, y, RED, BLACK, OBSTACLE_GLYPH)

    def intersects(self, player: Player) -> bool:
        """True when the player shares this column but is above or below the gap."""
        return player.x == self.x and is_outside_gap(player.y, self.gap_y, self.size)
