from salvo.game.core.geometry import cells_for_placement, in_bounds, out_of_bounds
from salvo.game.core.models import Coord, Direction


def test_cells_for_placement_horizontal_and_vertical() -> None:
    assert cells_for_placement(Coord(1, 1), Direction.HORIZONTAL, 5) == (
        Coord(1, 1),
        Coord(2, 1),
        Coord(3, 1),
        Coord(4, 1),
        Coord(5, 1),
    )
    assert cells_for_placement(Coord(1, 0), Direction.VERTICAL, 3) == (
        Coord(1, 0),
        Coord(1, 1),
        Coord(1, 2),
    )


def test_edges_are_in_bounds() -> None:
    assert in_bounds(Coord(0, 0))
    assert in_bounds(Coord(9, 9))
    assert not in_bounds(Coord(10, 0))
    assert not in_bounds(Coord(0, -1))


def test_out_of_bounds_reports_only_offending_cells() -> None:
    cells = cells_for_placement(Coord(8, 1), Direction.HORIZONTAL, 5)
    assert out_of_bounds(cells) == (Coord(10, 1), Coord(11, 1), Coord(12, 1))
