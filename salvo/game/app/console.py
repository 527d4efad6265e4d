"""Text console driver: human player one against a computer player two."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

import numpy as np

from salvo.game.ai.strategy import StrikeStrategy
from salvo.game.app.session import GameSession
from salvo.game.core.board import STRIKE_HIT, STRIKE_MISS, WATER, Board
from salvo.game.core.models import BOARD_SIZE, Coord, Direction, Side
from salvo.game.core.rules import attacking_side, remaining_fleet

logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

_DIRECTIONS = {
    "h": Direction.HORIZONTAL,
    "horizontal": Direction.HORIZONTAL,
    "v": Direction.VERTICAL,
    "vertical": Direction.VERTICAL,
}


def render_board(board: Board, *, reveal: bool) -> str:
    """Render a board as text; ships are drawn only when ``reveal`` is set."""
    cells = np.full((BOARD_SIZE, BOARD_SIZE), ".", dtype="<U1")
    if reveal:
        cells[board.occupancy_grid() != WATER] = "S"
    strikes = board.strike_grid()
    cells[strikes == STRIKE_MISS] = "o"
    cells[strikes == STRIKE_HIT] = "X"
    header = "  " + " ".join(str(x) for x in range(BOARD_SIZE))
    rows = [f"{y} " + " ".join(cells[y]) for y in range(BOARD_SIZE)]
    return "\n".join([header, *rows])


def parse_coord(text: str) -> Coord | None:
    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return Coord(x=int(parts[0]), y=int(parts[1]))
    except ValueError:
        return None


def parse_placement(text: str) -> tuple[Coord, Direction] | None:
    """Parse ``x y h|v`` into an origin and direction."""
    parts = text.replace(",", " ").split()
    if len(parts) != 3:
        return None
    origin = parse_coord(" ".join(parts[:2]))
    direction = _DIRECTIONS.get(parts[2].lower())
    if origin is None or direction is None:
        return None
    return origin, direction


def run_console(
    session: GameSession,
    striker: StrikeStrategy,
    rng: random.Random,
    *,
    human_first: bool = True,
    read: Reader = input,
    write: Writer = print,
) -> Side | None:
    """Play a full match; returns the winner, or ``None`` if input ends first."""
    try:
        _run_setup(session, rng, read, write)
        session.place_random(Side.TWO, rng)
        session.start(Side.ONE if human_first else Side.TWO)
        write(session.last_message)
        while session.winner is None:
            if attacking_side(session.game) is Side.TWO:
                session.computer_turn(striker)
                write(session.last_message)
                continue
            _run_human_strike(session, read, write)
    except EOFError:
        logger.info("console_input_closed move=%d", session.game.move_counter)
        return None
    write(session.last_message)
    return session.winner


def _run_setup(session: GameSession, rng: random.Random, read: Reader, write: Writer) -> None:
    write("Place your ships.")
    while True:
        pending = remaining_fleet(session.game.board(Side.ONE))
        if not pending:
            return
        ship_type = pending[0]
        write(render_board(session.game.board_one, reveal=True))
        answer = read(f"{ship_type.value} ({ship_type.length}) as 'x y h|v' or 'random': ").strip()
        if answer.lower() == "random":
            session.place_random(Side.ONE, rng)
            write(session.last_message)
            continue
        parsed = parse_placement(answer)
        if parsed is None:
            write("Enter a placement like '3 4 h'.")
            continue
        origin, direction = parsed
        session.place(Side.ONE, ship_type, origin, direction)
        write(session.last_message)


def _run_human_strike(session: GameSession, read: Reader, write: Writer) -> None:
    write(render_board(session.game.board_two, reveal=False))
    coord = parse_coord(read("Strike as 'x y': "))
    if coord is None:
        write("Enter a target like '3 4'.")
        return
    session.fire(coord)
    write(session.last_message)
