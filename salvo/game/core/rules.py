"""Turn ownership and derived game-state predicates."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum, auto

from salvo.game.core.board import Board
from salvo.game.core.models import DEFAULT_FLEET, Game, ShipType, Side


class GamePhase(Enum):
    """Lifecycle stage derived from a game value."""

    CREATED = auto()
    SETUP = auto()
    ACTIVE = auto()
    FINISHED = auto()


def active_side(game: Game) -> Side | None:
    """Return the side whose turn flag is set, if exactly one is."""
    one, two = game.player_one.turn, game.player_two.turn
    if one and not two:
        return Side.ONE
    if two and not one:
        return Side.TWO
    return None


def attacking_side(game: Game) -> Side:
    """Return the side that strikes next; player one opens when no flag is set."""
    return active_side(game) or Side.ONE


def with_turn(game: Game, side: Side) -> Game:
    """Hand the turn to ``side``, clearing the other flag."""
    side = Side(side)
    return replace(
        game,
        player_one=replace(game.player_one, turn=side is Side.ONE),
        player_two=replace(game.player_two, turn=side is Side.TWO),
    )


def start_battle(game: Game, first: Side = Side.ONE) -> Game:
    """Enter active play with ``first`` holding the turn."""
    return with_turn(game, first)


def has_lost(board: Board) -> bool:
    return board.all_ships_sunk()


def winner(game: Game) -> Side | None:
    """Return the side whose opponent has no ship left afloat."""
    for side in Side:
        if has_lost(game.board(side.opponent)):
            return side
    return None


def phase(game: Game) -> GamePhase:
    if winner(game) is not None:
        return GamePhase.FINISHED
    if game.player_one.turn or game.player_two.turn:
        return GamePhase.ACTIVE
    if game.board_one.ships or game.board_two.ships:
        return GamePhase.SETUP
    return GamePhase.CREATED


def remaining_fleet(board: Board, fleet: tuple[ShipType, ...] = DEFAULT_FLEET) -> tuple[ShipType, ...]:
    """Return fleet ship types not yet placed on ``board``, in fleet order."""
    placed = [ship.type for ship in board.ships]
    remaining: list[ShipType] = []
    for ship_type in fleet:
        if ship_type in placed:
            placed.remove(ship_type)
        else:
            remaining.append(ship_type)
    return tuple(remaining)


def fleet_complete(board: Board, fleet: tuple[ShipType, ...] = DEFAULT_FLEET) -> bool:
    return not remaining_fleet(board, fleet)
