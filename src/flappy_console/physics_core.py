"""
physics_core.py: The shared, deterministic kinematic functions and gap geometry.
"""

from typing import Tuple

from .constants import (
    GRAVITY, TIME_SCALE, BASE_GAP_SIZE, MIN_GAP_SIZE
)


def integrate_fall(y: int, speed: float, elapsed_ms: float,
                   gravity: float = GRAVITY,
                   time_scale: float = TIME_SCALE) -> Tuple[int, float]:
    """
    Advances a falling body by one rendered frame.

    Elapsed wall-clock milliseconds are scaled down by ``time_scale`` and fed
    into ``dy = v*t + g*t^2/2``. The displacement is truncated to whole rows
    and the resulting row is floored at the top of the screen.
    Returns the new (row, speed).
    """
    t = elapsed_ms / time_scale
    new_speed = speed + gravity * t
    distance = speed * t + 0.5 * gravity * t * t

    y += int(distance)  # int() truncates toward zero
    if y < 0:
        y = 0

    return y, new_speed


def gap_bounds(gap_y: int, size: int) -> Tuple[int, int]:
    """Returns the (top, bottom) rows of a gap centred at gap_y."""
    half_size = size // 2
    return gap_y - half_size, gap_y + half_size


def is_outside_gap(row: int, gap_y: int, size: int) -> bool:
    top, bottom = gap_bounds(gap_y, size)
    return row < top or row > bottom


def gap_size_for_score(score: int,
                       base: int = BASE_GAP_SIZE,
                       minimum: int = MIN_GAP_SIZE) -> int:
    """The gap loses one row per point scored, down to ``minimum``."""
    return max(minimum, base - score)
