"""Core domain models used by game logic."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from salvo.game.core.board import Board

BOARD_SIZE = 10


class Direction(StrEnum):
    """Axis a ship extends along from its origin."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Side(StrEnum):
    """Player/board pair selector."""

    ONE = "one"
    TWO = "two"

    @property
    def opponent(self) -> Side:
        return Side.TWO if self is Side.ONE else Side.ONE


class PlayerType(StrEnum):
    """Who controls a player."""

    HUMAN = "human"
    COMPUTER = "computer"


class ShipType(StrEnum):
    """Classic fleet ship types."""

    CARRIER = "carrier"
    BATTLESHIP = "battleship"
    CRUISER = "cruiser"
    SUBMARINE = "submarine"
    DESTROYER = "destroyer"

    @property
    def length(self) -> int:
        return SHIP_LENGTHS[self]


SHIP_LENGTHS: dict[ShipType, int] = {
    ShipType.CARRIER: 5,
    ShipType.BATTLESHIP: 4,
    ShipType.CRUISER: 3,
    ShipType.SUBMARINE: 3,
    ShipType.DESTROYER: 2,
}

DEFAULT_FLEET: tuple[ShipType, ...] = (
    ShipType.CARRIER,
    ShipType.BATTLESHIP,
    ShipType.CRUISER,
    ShipType.SUBMARINE,
    ShipType.DESTROYER,
)


@dataclass(frozen=True, slots=True)
class Coord:
    """Board coordinate, x is the column and y the row."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class ShipTemplate:
    """Ship proposed for placement."""

    type: ShipType
    length: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", ShipType(self.type))
        if self.length != self.type.length:
            raise ValueError(
                f"{self.type.value} must be {self.type.length} cells long, got {self.length}."
            )

    @classmethod
    def for_type(cls, ship_type: ShipType) -> ShipTemplate:
        return cls(type=ship_type, length=ship_type.length)


@dataclass(frozen=True, slots=True)
class Ship:
    """A placed ship and the damage it has taken."""

    type: ShipType
    length: int
    location: tuple[Coord, ...] = ()
    hits: tuple[Coord, ...] = ()
    alive: bool = True

    def occupies(self, coord: Coord) -> bool:
        return coord in self.location

    def with_hit(self, coord: Coord) -> Ship:
        """Return a copy with ``coord`` recorded as a hit and ``alive`` recomputed."""
        if coord not in self.location or coord in self.hits:
            return self
        hits = (*self.hits, coord)
        sunk = set(self.location).issubset(hits)
        return replace(self, hits=hits, alive=not sunk)


@dataclass(frozen=True, slots=True)
class Player:
    """A participant and their turn flag."""

    name: str
    type: PlayerType
    turn: bool = False


@dataclass(frozen=True, slots=True)
class Game:
    """Complete game state, replaced wholesale by every transition."""

    player_one: Player
    player_two: Player
    board_one: Board
    board_two: Board
    move_counter: int = 0

    def player(self, side: Side) -> Player:
        return self.player_one if Side(side) is Side.ONE else self.player_two

    def board(self, side: Side) -> Board:
        return self.board_one if Side(side) is Side.ONE else self.board_two

    def with_board(self, side: Side, board: Board) -> Game:
        if Side(side) is Side.ONE:
            return replace(self, board_one=board)
        return replace(self, board_two=board)
