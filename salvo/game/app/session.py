"""Presentation-side owner of the current game value."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from salvo.game.ai.strategy import StrikeStrategy
from salvo.game.core.factory import generate_game
from salvo.game.core.fleet import random_fleet
from salvo.game.core.models import Coord, Direction, Game, ShipTemplate, ShipType, Side
from salvo.game.core.placement import PlacementResult, place_ship
from salvo.game.core.rules import (
    GamePhase,
    attacking_side,
    phase,
    remaining_fleet,
    start_battle,
    winner,
)
from salvo.game.core.strike import StrikeOutcome, StrikeResult, strike

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class GameSession:
    """Holds the current game and swaps it for each accepted transition."""

    game: Game = field(default_factory=generate_game)
    last_message: str = "Place your ships."
    history: list[str] = field(default_factory=list)

    @property
    def phase(self) -> GamePhase:
        return phase(self.game)

    @property
    def winner(self) -> Side | None:
        return winner(self.game)

    def place(
        self, side: Side, ship_type: ShipType, origin: Coord, direction: Direction
    ) -> PlacementResult:
        """Place a ship for ``side``; the game is replaced only on success."""
        result = place_ship(self.game, side, ShipTemplate.for_type(ship_type), origin, direction)
        if result.error is not None:
            logger.info(
                "placement_rejected side=%s ship=%s origin=(%d,%d) direction=%s error=%s",
                side.value,
                ship_type.value,
                origin.x,
                origin.y,
                direction.value,
                type(result.error).__name__,
            )
            self._report(result.error.message)
            return result
        self.game = result.game
        logger.debug(
            "ship_placed side=%s ship=%s origin=(%d,%d) direction=%s",
            side.value,
            ship_type.value,
            origin.x,
            origin.y,
            direction.value,
        )
        self._report(f"{self.game.player(side).name} placed {ship_type.value}.")
        return result

    def place_random(self, side: Side, rng: random.Random) -> None:
        """Place every fleet ship ``side`` has not placed yet at random."""
        fleet = remaining_fleet(self.game.board(side))
        self.game = random_fleet(self.game, side, rng, fleet=fleet)
        logger.debug("random_fleet_placed side=%s ships=%d", side.value, len(self.game.board(side).ships))
        self._report(f"{self.game.player(side).name} deployed a random fleet.")

    def start(self, first: Side = Side.ONE) -> None:
        self.game = start_battle(self.game, first)
        logger.info("battle_started first=%s", first.value)
        self._report(f"Battle started. {self.game.player(first).name} to strike.")

    def fire(self, coord: Coord) -> StrikeResult:
        """Resolve a strike for whichever player holds the turn."""
        attacker = attacking_side(self.game)
        result = strike(self.game, coord)
        if result.error is not None:
            logger.info(
                "strike_rejected side=%s coord=(%d,%d) error=%s",
                attacker.value,
                coord.x,
                coord.y,
                result.error.message,
            )
            self._report(result.error.message)
            return result

        self.game = result.game
        name = self.game.player(attacker).name
        message = f"{name} struck ({coord.x}, {coord.y}): {_describe(result)}."
        logger.info(
            "strike_resolved side=%s coord=(%d,%d) outcome=%s move=%d",
            attacker.value,
            coord.x,
            coord.y,
            result.outcome,
            self.game.move_counter,
        )
        self._report(message)

        victor = self.winner
        if victor is not None:
            logger.info("game_won side=%s moves=%d", victor.value, self.game.move_counter)
            self._report(f"{self.game.player(victor).name} wins.")
        return result

    def computer_turn(self, striker: StrikeStrategy) -> StrikeResult:
        """Let ``striker`` choose a legal target for the attacking player and fire."""
        defender = attacking_side(self.game).opponent
        coord = striker.choose_strike(self.game.board(defender))
        result = self.fire(coord)
        if result.outcome is not None:
            striker.notify_result(coord, result.outcome)
        return result

    def _report(self, message: str) -> None:
        self.last_message = message
        self.history.append(message)


def _describe(result: StrikeResult) -> str:
    if result.outcome is StrikeOutcome.SUNK and result.ship is not None:
        return f"sunk {result.ship.type.value}"
    if result.outcome is StrikeOutcome.HIT:
        return "hit"
    return "miss"
