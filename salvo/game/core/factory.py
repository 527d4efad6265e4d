"""Initial game state construction."""

from __future__ import annotations

from salvo.game.core.board import Board
from salvo.game.core.models import Game, Player, PlayerType

PLAYER_ONE_NAME = "Player One"
PLAYER_TWO_NAME = "Player Two"


def generate_game() -> Game:
    """Create a fresh game: human vs computer, empty boards, no turn assigned yet."""
    return Game(
        player_one=Player(name=PLAYER_ONE_NAME, type=PlayerType.HUMAN, turn=False),
        player_two=Player(name=PLAYER_TWO_NAME, type=PlayerType.COMPUTER, turn=False),
        board_one=Board(),
        board_two=Board(),
        move_counter=0,
    )
