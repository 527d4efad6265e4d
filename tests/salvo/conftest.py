from __future__ import annotations

import random

import pytest

from salvo.game.core.factory import generate_game
from salvo.game.core.models import DEFAULT_FLEET, Coord, Direction, Game, ShipTemplate, Side
from salvo.game.core.placement import place_ship


def place_fixed_fleet(game: Game, side: Side) -> Game:
    """Lay the default fleet out horizontally on even rows from x=0."""
    for row, ship_type in enumerate(DEFAULT_FLEET):
        result = place_ship(
            game, side, ShipTemplate.for_type(ship_type), Coord(0, row * 2), Direction.HORIZONTAL
        )
        assert result.ok, result.error
        game = result.game
    return game


@pytest.fixture
def new_game() -> Game:
    return generate_game()


@pytest.fixture
def fleet_game(new_game: Game) -> Game:
    return place_fixed_fleet(place_fixed_fleet(new_game, Side.ONE), Side.TWO)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1337)
