"""Computer striker interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from salvo.game.core.board import Board
from salvo.game.core.models import Coord
from salvo.game.core.strike import StrikeOutcome


class StrikeStrategy(ABC):
    """Chooses the next coordinate a computer player strikes."""

    @abstractmethod
    def choose_strike(self, board: Board) -> Coord:
        """Return a legal target on the opponent's ``board``."""

    def notify_result(self, coord: Coord, outcome: StrikeOutcome) -> None:
        """Update strategy state with a resolved strike; stateless by default."""
