import random

from salvo.game.core.fleet import random_fleet
from salvo.game.core.geometry import in_bounds
from salvo.game.core.models import DEFAULT_FLEET, ShipType, Side
from salvo.game.core.rules import fleet_complete


def test_random_fleet_is_complete_and_legal(new_game, seeded_rng) -> None:
    game = random_fleet(new_game, Side.TWO, seeded_rng)
    board = game.board_two
    assert fleet_complete(board)
    assert [ship.type for ship in board.ships] == list(DEFAULT_FLEET)
    cells = [cell for ship in board.ships for cell in ship.location]
    assert len(cells) == len(set(cells)) == sum(ship.length for ship in board.ships)
    assert all(in_bounds(cell) for cell in cells)
    assert game.board_one == new_game.board_one


def test_random_fleet_is_reproducible_with_seed(new_game) -> None:
    first = random_fleet(new_game, Side.ONE, random.Random(9))
    second = random_fleet(new_game, Side.ONE, random.Random(9))
    assert first == second


def test_random_fleet_places_subset(new_game, seeded_rng) -> None:
    game = random_fleet(new_game, Side.ONE, seeded_rng, fleet=(ShipType.DESTROYER,))
    assert [ship.type for ship in game.board_one.ships] == [ShipType.DESTROYER]
