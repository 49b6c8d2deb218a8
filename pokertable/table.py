"""Game settings, screen layout and the players seated around the table."""

from __future__ import annotations

import math
from dataclasses import dataclass

MIN_PLAYERS = 2
MAX_PLAYERS = 10
DEFAULT_START_PLAYERS = 5
START_MONEY = 2000
TABLE_RADIUS = 250
SEAT_RADIUS = 40

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 750
PIXEL_WIDTH = 1
PIXEL_HEIGHT = 1

_PI = 3.14159265


@dataclass
class Player:
    """A player's seat on the table and the money they hold."""

    x: float
    y: float
    money: int = START_MONEY


def seat_positions(player_count: int) -> list[tuple[float, float]]:
    """Evenly spaced seats on the table edge, the first at the top."""
    if player_count < 1:
        raise ValueError("at least one player is needed")
    start_angle = 3 * _PI / 2
    step = 2 * _PI / player_count
    center_x = SCREEN_WIDTH // 2
    center_y = SCREEN_HEIGHT // 2
    return [
        (
            center_x + TABLE_RADIUS * math.cos(start_angle + seat * step),
            center_y + TABLE_RADIUS * math.sin(start_angle + seat * step),
        )
        for seat in range(player_count)
    ]


def seat_players(player_count: int) -> list[Player]:
    """Players placed at the seats for the given number of players."""
    return [Player(x, y) for x, y in seat_positions(player_count)]