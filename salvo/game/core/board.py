"""Board state representation and value-update helpers."""

from __future__ import annotations

from dataclasses import dataclass, replace

import numpy as np

from salvo.game.core.geometry import in_bounds
from salvo.game.core.models import BOARD_SIZE, Coord, Ship

WATER = 0
STRIKE_UNKNOWN = 0
STRIKE_MISS = 1
STRIKE_HIT = 2


@dataclass(frozen=True, slots=True)
class Board:
    """One player's grid: placed ships and the strikes received so far."""

    ships: tuple[Ship, ...] = ()
    received_strikes: tuple[Coord, ...] = ()

    def occupied_cells(self) -> frozenset[Coord]:
        """Return every cell covered by a ship."""
        return frozenset(cell for ship in self.ships for cell in ship.location)

    def ship_index_at(self, coord: Coord) -> int | None:
        """Return the index of the ship covering ``coord``, if any."""
        for index, ship in enumerate(self.ships):
            if ship.occupies(coord):
                return index
        return None

    def was_struck(self, coord: Coord) -> bool:
        """Return whether this cell was previously targeted."""
        return coord in self.received_strikes

    def with_ship(self, ship: Ship) -> Board:
        return replace(self, ships=(*self.ships, ship))

    def with_strike(self, coord: Coord) -> Board:
        """Record a strike and apply the hit to whichever ship covers it."""
        ships = self.ships
        index = self.ship_index_at(coord)
        if index is not None:
            ships = (*ships[:index], ships[index].with_hit(coord), *ships[index + 1 :])
        return Board(ships=ships, received_strikes=(*self.received_strikes, coord))

    def occupancy_grid(self, size: int = BOARD_SIZE) -> np.ndarray:
        """Project ships onto a ``[y, x]`` grid holding ship index + 1 (0 is water)."""
        grid = np.full((size, size), WATER, dtype=np.int16)
        for index, ship in enumerate(self.ships, start=1):
            for cell in ship.location:
                if in_bounds(cell, size):
                    grid[cell.y, cell.x] = index
        return grid

    def strike_grid(self, size: int = BOARD_SIZE) -> np.ndarray:
        """Project received strikes onto a ``[y, x]`` grid of miss/hit markers."""
        grid = np.full((size, size), STRIKE_UNKNOWN, dtype=np.int8)
        occupied = self.occupancy_grid(size)
        for cell in self.received_strikes:
            if not in_bounds(cell, size):
                continue
            grid[cell.y, cell.x] = STRIKE_HIT if occupied[cell.y, cell.x] != WATER else STRIKE_MISS
        return grid

    def all_ships_sunk(self) -> bool:
        """Return whether the board has ships and every one of them is sunk."""
        return bool(self.ships) and not any(ship.alive for ship in self.ships)
