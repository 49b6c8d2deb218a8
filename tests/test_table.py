import math

import pytest

from pokertable.table import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    START_MONEY,
    TABLE_RADIUS,
    seat_players,
    seat_positions,
)


@pytest.mark.parametrize("count", [2, 5, 10])
def test_seats_on_table_edge(count):
    cx, cy = SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2
    positions = seat_positions(count)
    assert len(positions) == count
    for x, y in positions:
        assert math.hypot(x - cx, y - cy) == pytest.approx(TABLE_RADIUS)


def test_two_seats_are_opposite():
    (x1, y1), (x2, y2) = seat_positions(2)
    assert x1 + x2 == pytest.approx(SCREEN_WIDTH // 2 * 2, abs=1e-6)
    assert y1 + y2 == pytest.approx(SCREEN_HEIGHT // 2 * 2, abs=1e-6)


def test_seat_players_start_money():
    players = seat_players(5)
    assert [(p.x, p.y) for p in players] == seat_positions(5)
    assert all(p.money == START_MONEY for p in players)


def test_no_players_rejected():
    with pytest.raises(ValueError):
        seat_positions(0)