"""Ship placement validation and application."""

from __future__ import annotations

from dataclasses import dataclass

from salvo.game.core.board import Board
from salvo.game.core.errors import OutOfBoundsError, OverlapError, PlacementError
from salvo.game.core.geometry import cells_for_placement, out_of_bounds
from salvo.game.core.models import Coord, Direction, Game, Ship, ShipTemplate, Side


@dataclass(frozen=True, slots=True)
class PlacementResult:
    """Outcome of a placement: the new game, or the prior game plus an error."""

    game: Game
    error: PlacementError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_placement(
    board: Board, template: ShipTemplate, origin: Coord, direction: Direction
) -> tuple[tuple[Coord, ...], PlacementError | None]:
    """Compute placement cells and the first rule they break, bounds before overlap."""
    cells = cells_for_placement(origin, direction, template.length)
    outside = out_of_bounds(cells)
    if outside:
        return cells, OutOfBoundsError(cells=outside)
    occupied = board.occupied_cells()
    shared = tuple(cell for cell in cells if cell in occupied)
    if shared:
        return cells, OverlapError(cells=shared)
    return cells, None


def place_ship(
    game: Game, side: Side, template: ShipTemplate, origin: Coord, direction: Direction
) -> PlacementResult:
    """Place a ship on ``side``'s board, leaving ``game`` untouched."""
    side = Side(side)
    direction = Direction(direction)
    board = game.board(side)
    cells, error = validate_placement(board, template, origin, direction)
    if error is not None:
        return PlacementResult(game=game, error=error)
    ship = Ship(type=template.type, length=template.length, location=cells)
    return PlacementResult(game=game.with_board(side, board.with_ship(ship)))
