from salvo.game.core.board import Board
from salvo.game.core.factory import generate_game
from salvo.game.core.models import PlayerType


def test_generate_game_defaults() -> None:
    game = generate_game()
    assert game.player_one.name == "Player One"
    assert game.player_one.type is PlayerType.HUMAN
    assert game.player_two.name == "Player Two"
    assert game.player_two.type is PlayerType.COMPUTER
    assert not game.player_one.turn and not game.player_two.turn
    assert game.board_one == Board() and game.board_two == Board()
    assert game.move_counter == 0


def test_generate_game_is_deterministic() -> None:
    assert generate_game() == generate_game()
