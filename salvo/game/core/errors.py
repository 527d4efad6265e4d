"""Rule violations returned as values by placement and strike resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from salvo.game.core.models import Coord


@dataclass(frozen=True, slots=True)
class PlacementError:
    """Base for rejected placements."""

    cells: tuple[Coord, ...]

    @property
    def message(self) -> str:
        return "Invalid ship placement."


@dataclass(frozen=True, slots=True)
class OutOfBoundsError(PlacementError):
    """At least one placement cell lies outside the grid."""

    @property
    def message(self) -> str:
        return "Please place the ship entirely on the board"


@dataclass(frozen=True, slots=True)
class OverlapError(PlacementError):
    """At least one placement cell is already taken by another ship."""

    @property
    def message(self) -> str:
        return "Ships cannot overlap each other"


class TargetRejection(StrEnum):
    """Why a strike target was refused."""

    REPEAT = "REPEAT"
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"


@dataclass(frozen=True, slots=True)
class StrikeError:
    """Base for rejected strikes."""

    coord: Coord

    @property
    def message(self) -> str:
        return "Invalid strike."


@dataclass(frozen=True, slots=True)
class InvalidTargetError(StrikeError):
    """Strike at a coordinate that cannot be targeted."""

    reason: TargetRejection = TargetRejection.REPEAT

    @property
    def message(self) -> str:
        if self.reason is TargetRejection.OUT_OF_BOUNDS:
            return f"({self.coord.x}, {self.coord.y}) is not on the board"
        return f"({self.coord.x}, {self.coord.y}) has already been struck"
