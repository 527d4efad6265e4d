"""Strike outcome evaluation (miss/hit/sunk) and turn hand-over."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from salvo.game.core.errors import InvalidTargetError, StrikeError, TargetRejection
from salvo.game.core.geometry import in_bounds
from salvo.game.core.models import Coord, Game, Ship
from salvo.game.core.rules import attacking_side, with_turn


class StrikeOutcome(StrEnum):
    """Result of a single resolved strike."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"


@dataclass(frozen=True, slots=True)
class StrikeResult:
    """Outcome of a strike: the new game, or the prior game plus an error."""

    game: Game
    error: StrikeError | None = None
    outcome: StrikeOutcome | None = None
    ship: Ship | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def strike(game: Game, coord: Coord) -> StrikeResult:
    """Resolve the attacking player's strike against the opponent's board."""
    attacker = attacking_side(game)
    defender = attacker.opponent
    board = game.board(defender)

    if not in_bounds(coord):
        return StrikeResult(
            game=game, error=InvalidTargetError(coord=coord, reason=TargetRejection.OUT_OF_BOUNDS)
        )
    if board.was_struck(coord):
        return StrikeResult(game=game, error=InvalidTargetError(coord=coord))

    updated = board.with_strike(coord)
    index = updated.ship_index_at(coord)
    ship = updated.ships[index] if index is not None else None
    if ship is None:
        outcome = StrikeOutcome.MISS
    elif ship.alive:
        outcome = StrikeOutcome.HIT
    else:
        outcome = StrikeOutcome.SUNK

    next_game = replace(
        game.with_board(defender, updated), move_counter=game.move_counter + 1
    )
    return StrikeResult(game=with_turn(next_game, defender), outcome=outcome, ship=ship)
