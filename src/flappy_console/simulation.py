"""
simulation.py: The per-frame game loop and its Menu/Playing/End state machine.
"""

import logging
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from .constants import NAVY
from .console import Console
from .data_models import GameConfig, GameMode, Key, Obstacle, Player, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    Owns the whole game state and advances it once per rendered frame.
    The boundary calls tick() with the frame's elapsed milliseconds and
    the key pressed this frame, if any.
    """
    config: GameConfig = DEFAULT_CONFIG
    rng: random.Random = field(default_factory=random.Random)
    mode: GameMode = GameMode.MENU
    frame_time: float = 0.0
    score: int = 0
    player: Player = field(init=False)
    obstacles: Deque[Obstacle] = field(init=False)

    def __post_init__(self):
        self.player = self._spawn_player()
        self.obstacles = deque([self._spawn_obstacle(0)])

    @property
    def tail(self) -> Obstacle:
        """The most recently spawned obstacle."""
        return self.obstacles[-1]

    def _spawn_player(self) -> Player:
        return Player.spawn(self.config.player_x, self.config.player_y, self.config)

    def _spawn_obstacle(self, score: int) -> Obstacle:
        return Obstacle.spawn(self.config.screen_width, score, self.rng, self.config)

    def restart(self):
        """Starts a fresh round: new player, one obstacle at the right edge, zero score."""
        self.mode = GameMode.PLAYING
        self.player = self._spawn_player()
        self.frame_time = 0.0
        self.score = 0
        self.obstacles = deque([self._spawn_obstacle(0)])
        logger.info("New round started")

    def tick(self, console: Console, frame_time_ms: float, key: Optional[Key] = None):
        console.cls()

        if self.mode is GameMode.MENU:
            self.main_menu(console, key)
        elif self.mode is GameMode.PLAYING:
            self.play(console, frame_time_ms, key)
        elif self.mode is GameMode.END:
            self.dead(console, key)

    def _handle_menu_key(self, console: Console, key: Optional[Key]):
        if key is Key.PLAY:
            self.restart()
        elif key is Key.QUIT:
            logger.info("Quit requested from %s", self.mode.value)
            console.quitting = True

    def main_menu(self, console: Console, key: Optional[Key] = None):
        console.print_centered(5, "Welcome to Flappy Bird")
        console.print_centered(8, "(P) Play Game")
        console.print_centered(9, "(Q) Quit Game")
        self._handle_menu_key(console, key)

    def dead(self, console: Console, key: Optional[Key] = None):
        console.cls()
        console.print_centered(5, "You are dead")
        console.print_centered(6, f"You earned {self.score} points")
        console.print_centered(9, "(P) Play Again")
        console.print_centered(10, "(Q) Quit Game")
        self._handle_menu_key(console, key)

    def game_over(self, console: Console, key: Optional[Key] = None):
        self.mode = GameMode.END
        logger.info("Game over with %d points", self.score)
        self.dead(console, key)

    def scroll_obstacles(self):
        """One scroll step: every obstacle moves a column left, the head drops off past column 0."""
        for obstacle in self.obstacles:
            obstacle.move_left()
        if self.obstacles and self.obstacles[0].x < 0:
            self.obstacles.popleft()

    def render_obstacles(self, console: Console):
        for obstacle in self.obstacles:
            obstacle.render(console, self.config.screen_height)

    def is_lost(self) -> bool:
        return (self.player.y > self.config.screen_height
                or self.tail.intersects(self.player))

    def play(self, console: Console, frame_time_ms: float, key: Optional[Key] = None):
        # 1. Background
        console.cls_bg(NAVY)

        # 2. Scroll obstacles once per frame_duration of accumulated time
        self.frame_time += frame_time_ms
        if self.frame_time > self.config.frame_duration:
            self.frame_time = 0.0
            self.scroll_obstacles()

        # 3. Flap before gravity so the speed reset counts this frame
        if key is Key.FLAP:
            self.player.flap(self.config)
        self.player.apply_gravity(frame_time_ms, self.config)

        # 4. Draw
        self.player.render(console)
        self.render_obstacles(console)

        # 5. Loss check
        if self.is_lost():
            self.game_over(console, key)

        # 6. HUD
        console.print(0, 0, "Press SPACE to flap.")
        console.print(0, 1, f"Score: {self.score}")

        # 7. Passed the tail obstacle: score and spawn the next one
        if self.player.x > self.tail.x:
            self.score += 1
            self.obstacles.append(self._spawn_obstacle(self.score))
            logger.debug("Score %d, next gap size %d", self.score, self.tail.size)
