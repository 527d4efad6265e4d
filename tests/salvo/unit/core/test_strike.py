from salvo.game.core.errors import InvalidTargetError, TargetRejection
from salvo.game.core.models import Coord, ShipType, Side
from salvo.game.core.rules import active_side, start_battle
from salvo.game.core.strike import StrikeOutcome, strike


def test_strike_miss_records_and_hands_over_turn(fleet_game) -> None:
    game = start_battle(fleet_game, Side.ONE)
    result = strike(game, Coord(9, 9))
    assert result.ok
    assert result.outcome is StrikeOutcome.MISS
    assert result.ship is None
    assert result.game.board_two.received_strikes == (Coord(9, 9),)
    assert result.game.board_one.received_strikes == ()
    assert result.game.move_counter == 1
    assert not result.game.player_one.turn
    assert result.game.player_two.turn
    assert game.board_two.received_strikes == ()


def test_active_player_two_strikes_board_one(fleet_game) -> None:
    game = start_battle(fleet_game, Side.TWO)
    result = strike(game, Coord(0, 0))
    assert result.outcome is StrikeOutcome.HIT
    assert result.game.board_one.ships[0].hits == (Coord(0, 0),)
    assert result.game.board_two == game.board_two
    assert active_side(result.game) is Side.ONE


def test_turns_alternate_regardless_of_outcome(fleet_game) -> None:
    game = start_battle(fleet_game, Side.ONE)
    game = strike(game, Coord(0, 0)).game  # hit on board two
    assert active_side(game) is Side.TWO
    game = strike(game, Coord(9, 9)).game  # miss on board one
    assert active_side(game) is Side.ONE
    assert game.move_counter == 2


def test_repeat_strike_is_rejected_without_state_change(fleet_game) -> None:
    game = start_battle(fleet_game, Side.ONE)
    game = strike(game, Coord(9, 9)).game
    game = strike(game, Coord(9, 9)).game  # player two strikes board one
    result = strike(game, Coord(9, 9))
    assert isinstance(result.error, InvalidTargetError)
    assert result.error.reason is TargetRejection.REPEAT
    assert result.game is game
    assert result.game.move_counter == 2
    assert active_side(result.game) is Side.ONE


def test_out_of_bounds_strike_is_rejected(fleet_game) -> None:
    game = start_battle(fleet_game, Side.ONE)
    result = strike(game, Coord(10, 3))
    assert isinstance(result.error, InvalidTargetError)
    assert result.error.reason is TargetRejection.OUT_OF_BOUNDS
    assert result.game is game


def test_last_cell_sinks_only_that_ship(fleet_game) -> None:
    game = start_battle(fleet_game, Side.ONE)
    destroyer_cells = game.board_two.ships[4].location
    result = None
    for cell in destroyer_cells:
        result = strike(game, cell)
        game = start_battle(result.game, Side.ONE)
    assert result is not None
    assert result.outcome is StrikeOutcome.SUNK
    assert result.ship is not None and result.ship.type is ShipType.DESTROYER
    assert not game.board_two.ships[4].alive
    assert all(ship.alive for ship in game.board_two.ships[:4])
    assert all(ship.alive for ship in game.board_one.ships)


def test_strike_without_active_player_defaults_to_player_one(fleet_game) -> None:
    result = strike(fleet_game, Coord(9, 9))
    assert result.game.board_two.received_strikes == (Coord(9, 9),)
    assert active_side(result.game) is Side.TWO
