"""Cell geometry for ship placements."""

from __future__ import annotations

from collections.abc import Iterable

from salvo.game.core.models import BOARD_SIZE, Coord, Direction


def cells_for_placement(origin: Coord, direction: Direction, length: int) -> tuple[Coord, ...]:
    """Compute occupied cells by stepping from ``origin`` along ``direction``."""
    if Direction(direction) is Direction.HORIZONTAL:
        return tuple(Coord(origin.x + i, origin.y) for i in range(length))
    return tuple(Coord(origin.x, origin.y + i) for i in range(length))


def in_bounds(coord: Coord, size: int = BOARD_SIZE) -> bool:
    """Return whether the coordinate is in board bounds."""
    return 0 <= coord.x < size and 0 <= coord.y < size


def out_of_bounds(cells: Iterable[Coord], size: int = BOARD_SIZE) -> tuple[Coord, ...]:
    return tuple(cell for cell in cells if not in_bounds(cell, size))
