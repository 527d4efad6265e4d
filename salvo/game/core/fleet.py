"""Random fleet layout built on the placement rules."""

from __future__ import annotations

import random

from salvo.game.core.models import (
    BOARD_SIZE,
    DEFAULT_FLEET,
    Coord,
    Direction,
    Game,
    ShipTemplate,
    ShipType,
    Side,
)
from salvo.game.core.placement import place_ship

MAX_ATTEMPTS_PER_SHIP = 10_000


def random_fleet(
    game: Game,
    side: Side,
    rng: random.Random,
    fleet: tuple[ShipType, ...] = DEFAULT_FLEET,
) -> Game:
    """Place every ship of ``fleet`` on ``side``'s board at random legal positions."""
    for ship_type in fleet:
        template = ShipTemplate.for_type(ship_type)
        # Origins are restricted so the ship fits along its axis.
        span = BOARD_SIZE - template.length + 1
        for _ in range(MAX_ATTEMPTS_PER_SHIP):
            direction = rng.choice([Direction.HORIZONTAL, Direction.VERTICAL])
            if direction is Direction.HORIZONTAL:
                origin = Coord(rng.randrange(span), rng.randrange(BOARD_SIZE))
            else:
                origin = Coord(rng.randrange(BOARD_SIZE), rng.randrange(span))
            result = place_ship(game, side, template, origin, direction)
            if result.ok:
                game = result.game
                break
        else:
            raise RuntimeError(f"Failed to place {ship_type.value} at random.")
    return game
