"""Uniform random legal strike selection."""

from __future__ import annotations

import random

import numpy as np

from salvo.game.ai.strategy import StrikeStrategy
from salvo.game.core.board import STRIKE_UNKNOWN, Board
from salvo.game.core.models import BOARD_SIZE, Coord


class RandomStrikeAI(StrikeStrategy):
    """Picks any cell of the opponent's board that has not been struck yet."""

    def __init__(self, rng: random.Random, size: int = BOARD_SIZE) -> None:
        self._rng = rng
        self._size = size

    def choose_strike(self, board: Board) -> Coord:
        open_cells = np.argwhere(board.strike_grid(self._size) == STRIKE_UNKNOWN)
        if len(open_cells) == 0:
            raise RuntimeError("No untargeted cell left on the board.")
        y, x = open_cells[self._rng.randrange(len(open_cells))]
        return Coord(x=int(x), y=int(y))
