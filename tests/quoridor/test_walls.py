"""Unit tests for /src/quoridor/walls.py"""

import pytest

from src.quoridor.position import BoardDimensions, Position
from src.quoridor.walls import Orientation, WallLayout

DIMS = BoardDimensions(9, 9)


def test_empty_layout_grid_shapes() -> None:
    layout = WallLayout.empty(BoardDimensions(4, 6))
    # horizontal segments sit between rows: rows-1 lines of cols segments
    assert len(layout.horizontal) == 3
    assert all(len(row) == 6 for row in layout.horizontal)
    # vertical segments sit between columns: rows lines of cols-1 segments
    assert len(layout.vertical) == 4
    assert all(len(row) == 5 for row in layout.vertical)
    assert layout.count() == 0


def test_horizontal_wall_sets_two_segments_side_by_side() -> None:
    layout = WallLayout.empty(DIMS).with_wall(Orientation.HORIZONTAL, Position(2, 3))
    assert layout.horizontal[2][3]
    assert layout.horizontal[2][4]
    set_segments = [
        (r, c) for r, row in enumerate(layout.horizontal) for c, value in enumerate(row) if value
    ]
    assert set_segments == [(2, 3), (2, 4)]
    assert not any(any(row) for row in layout.vertical)


def test_vertical_wall_sets_two_segments_on_top_of_each_other() -> None:
    layout = WallLayout.empty(DIMS).with_wall(Orientation.VERTICAL, Position(5, 0))
    assert layout.vertical[5][0]
    assert layout.vertical[6][0]
    set_segments = [
        (r, c) for r, row in enumerate(layout.vertical) for c, value in enumerate(row) if value
    ]
    assert set_segments == [(5, 0), (6, 0)]
    assert not any(any(row) for row in layout.horizontal)


def test_placing_wall_leaves_original_untouched() -> None:
    original = WallLayout.empty(DIMS)
    _ = original.with_wall(Orientation.HORIZONTAL, Position(0, 0))
    assert original == WallLayout.empty(DIMS)


@pytest.mark.parametrize(
    "anchor, valid",
    [
        (Position(0, 0), True),
        (Position(7, 7), True),
        (Position(8, 0), False),
        (Position(0, 8), False),
        (Position(-1, 3), False),
        (Position(3, -1), False),
    ],
)
def test_valid_anchor(anchor: Position, valid: bool) -> None:
    assert WallLayout.empty(DIMS).is_valid_anchor(anchor) == valid


def test_overlap_same_orientation() -> None:
    layout = WallLayout.empty(DIMS).with_wall(Orientation.HORIZONTAL, Position(4, 4))
    # exact same spot
    assert layout.overlaps(Orientation.HORIZONTAL, Position(4, 4))
    # shifted by one: shares a segment
    assert layout.overlaps(Orientation.HORIZONTAL, Position(4, 3))
    assert layout.overlaps(Orientation.HORIZONTAL, Position(4, 5))
    # shifted by two: touching, not overlapping
    assert not layout.overlaps(Orientation.HORIZONTAL, Position(4, 6))
    assert not layout.overlaps(Orientation.HORIZONTAL, Position(4, 2))


def test_crossing_walls_do_not_overlap() -> None:
    """A vertical wall through the middle of a horizontal one is allowed (only same orientation is checked)"""
    layout = WallLayout.empty(DIMS).with_wall(Orientation.HORIZONTAL, Position(4, 4))
    assert not layout.overlaps(Orientation.VERTICAL, Position(4, 4))


def test_blocks_edges() -> None:
    layout = WallLayout.from_anchors(DIMS, horizontal=[Position(2, 4)], vertical=[Position(0, 0)])
    # horizontal wall at (2,4) cuts (2,4)-(3,4) and (2,5)-(3,5)
    assert layout.blocks(Position(2, 4), Position(3, 4))
    assert layout.blocks(Position(3, 5), Position(2, 5))
    assert not layout.blocks(Position(2, 3), Position(3, 3))
    # vertical wall at (0,0) cuts (0,0)-(0,1) and (1,0)-(1,1)
    assert layout.blocks(Position(0, 0), Position(0, 1))
    assert layout.blocks(Position(1, 1), Position(1, 0))
    assert not layout.blocks(Position(2, 0), Position(2, 1))


def test_blocks_requires_adjacent_cells() -> None:
    with pytest.raises(ValueError):
        WallLayout.empty(DIMS).blocks(Position(0, 0), Position(1, 1))


def test_anchors_recovered_from_segments() -> None:
    horizontal = [Position(0, 0), Position(0, 2), Position(3, 5), Position(7, 7)]
    vertical = [Position(0, 0), Position(2, 0), Position(1, 4), Position(6, 7)]
    layout = WallLayout.from_anchors(DIMS, horizontal, vertical)

    assert layout.anchors(Orientation.HORIZONTAL) == horizontal
    assert layout.anchors(Orientation.VERTICAL) == sorted(vertical, key=lambda p: (p.row, p.col))
    assert layout.count() == 8
