import random

from salvo.game.ai.random_strike import RandomStrikeAI
from salvo.game.app.console import parse_coord, parse_placement, render_board, run_console
from salvo.game.app.session import GameSession
from salvo.game.core.board import Board
from salvo.game.core.models import Coord, Direction, Ship, ShipType, Side


def test_parse_helpers() -> None:
    assert parse_coord("3 4") == Coord(3, 4)
    assert parse_coord("3,4") == Coord(3, 4)
    assert parse_coord("x y") is None
    assert parse_placement("0 1 h") == (Coord(0, 1), Direction.HORIZONTAL)
    assert parse_placement("1 0 vertical") == (Coord(1, 0), Direction.VERTICAL)
    assert parse_placement("1 0 diagonal") is None


def test_render_board_hides_ships_unless_revealed() -> None:
    board = Board().with_ship(Ship(ShipType.DESTROYER, 2, location=(Coord(0, 0), Coord(1, 0))))
    board = board.with_strike(Coord(1, 0)).with_strike(Coord(5, 5))
    hidden = render_board(board, reveal=False).splitlines()
    revealed = render_board(board, reveal=True).splitlines()
    assert hidden[1] == "0 . X . . . . . . . ."
    assert revealed[1] == "0 S X . . . . . . . ."
    assert hidden[6][2:].split()[5] == "o"


def test_run_console_stops_when_input_ends() -> None:
    answers = iter(["random", "nonsense", "12 0", "9 9"])
    output: list[str] = []

    def read(_prompt: str) -> str:
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    session = GameSession()
    rng = random.Random(3)
    winner = run_console(session, RandomStrikeAI(rng), rng, read=read, write=output.append)
    assert winner is None
    assert "Enter a target like '3 4'." in output
    assert any("is not on the board" in line for line in output)
    assert session.game.board_two.received_strikes == (Coord(9, 9),)
    assert session.game.move_counter == 2


def test_run_console_plays_to_completion() -> None:
    rng = random.Random(11)
    targets = iter(f"{x} {y}" for y in range(10) for x in range(10))
    output: list[str] = []
    session = GameSession()
    winner = run_console(
        session,
        RandomStrikeAI(random.Random(4)),
        rng,
        human_first=False,
        read=lambda prompt: "random" if "random" in prompt else next(targets),
        write=output.append,
    )
    assert winner in (Side.ONE, Side.TWO)
    assert output[-1].endswith("wins.")
