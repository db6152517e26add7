"""
Wall layout: two independent grids of wall segments.

* horizontal[r][c] (r in [0, rows-2], c in [0, cols-1]): segment between row r and row r+1, under column c
* vertical[r][c]   (r in [0, rows-1], c in [0, cols-2]): segment between column c and column c+1, at row r

A wall is always placed whole: it covers two adjacent segments, identified by its anchor (r, c) with r in [0, rows-2], c in [0, cols-2].
* horizontal wall at (r, c) --> horizontal[r][c] and horizontal[r][c+1]
* vertical wall at (r, c)   --> vertical[r][c] and vertical[r+1][c]

The layout is immutable. Placing a wall gives back a new layout, so a hypothetical wall can be tested without touching the live board.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.shared_types import WallOrientation as Orientation
from src.quoridor.position import BoardDimensions, Position

Grid = tuple[tuple[bool, ...], ...]
Segment = tuple[int, int]


def _empty_grid(rows: int, cols: int) -> Grid:
    return tuple(tuple(False for _ in range(cols)) for _ in range(rows))


def _set_segments(grid: Grid, segments: tuple[Segment, Segment]) -> Grid:
    return tuple(
        tuple(value or (r, c) in segments for c, value in enumerate(row))
        for r, row in enumerate(grid)
    )


@dataclass(frozen=True)
class WallLayout:
    dims: BoardDimensions
    horizontal: Grid
    vertical: Grid

    @classmethod
    def empty(cls, dims: BoardDimensions) -> WallLayout:
        return cls(
            dims=dims,
            horizontal=_empty_grid(dims.rows - 1, dims.cols),
            vertical=_empty_grid(dims.rows, dims.cols - 1),
        )

    @classmethod
    def from_anchors(
        cls,
        dims: BoardDimensions,
        horizontal: list[Position],
        vertical: list[Position],
    ) -> WallLayout:
        """Convenience method: place a list of walls in one go (used for restoring a stored game and in tests)."""
        layout = cls.empty(dims)
        for anchor in horizontal:
            layout = layout.with_wall(Orientation.HORIZONTAL, anchor)
        for anchor in vertical:
            layout = layout.with_wall(Orientation.VERTICAL, anchor)
        return layout

    # --- WALL PLACEMENT ---
    def is_valid_anchor(self, anchor: Position) -> bool:
        return (0 <= anchor.row <= self.dims.rows - 2) and (
            0 <= anchor.col <= self.dims.cols - 2
        )

    @staticmethod
    def segments(
        orientation: Orientation, anchor: Position
    ) -> tuple[Segment, Segment]:
        """The two segments a wall placed at the anchor covers"""
        r, c = anchor.row, anchor.col
        if orientation == Orientation.HORIZONTAL:
            return (r, c), (r, c + 1)
        return (r, c), (r + 1, c)

    def grid(self, orientation: Orientation) -> Grid:
        return self.horizontal if orientation == Orientation.HORIZONTAL else self.vertical

    def overlaps(self, orientation: Orientation, anchor: Position) -> bool:
        """Is any of the two segments already taken by a wall of the same orientation?

        NOTE: a horizontal and a vertical wall crossing at the same anchor are not considered to overlap.
        """
        grid = self.grid(orientation)
        return any(grid[r][c] for r, c in self.segments(orientation, anchor))

    def with_wall(self, orientation: Orientation, anchor: Position) -> WallLayout:
        """New layout with both segments of the wall set. Anchor must be valid."""
        segments = self.segments(orientation, anchor)
        if orientation == Orientation.HORIZONTAL:
            return WallLayout(
                self.dims, _set_segments(self.horizontal, segments), self.vertical
            )
        return WallLayout(
            self.dims, self.horizontal, _set_segments(self.vertical, segments)
        )

    # --- QUERIES ---
    def blocks(self, a: Position, b: Position) -> bool:
        """True if a wall segment covers the edge between two orthogonally adjacent cells"""
        if a.col == b.col and abs(a.row - b.row) == 1:
            return self.horizontal[min(a.row, b.row)][a.col]
        if a.row == b.row and abs(a.col - b.col) == 1:
            return self.vertical[a.row][min(a.col, b.col)]
        raise ValueError(f"Cells {a} and {b} are not orthogonally adjacent")

    def anchors(self, orientation: Orientation) -> list[Position]:
        """
        Recover the anchors of the placed walls from the segment grid.
        ----

        Walls of the same orientation never overlap, so every run of set segments along a row (horizontal)
        or a column (vertical) splits into consecutive pairs, read from the left / top.
        """
        found: list[Position] = []
        if orientation == Orientation.HORIZONTAL:
            for r, row in enumerate(self.horizontal):
                c = 0
                while c < len(row):
                    if row[c]:
                        found.append(Position(r, c))
                        c += 2
                    else:
                        c += 1
        else:
            for c in range(self.dims.cols - 1):
                r = 0
                while r < self.dims.rows:
                    if self.vertical[r][c]:
                        found.append(Position(r, c))
                        r += 2
                    else:
                        r += 1
            found.sort(key=lambda anchor: (anchor.row, anchor.col))
        return found

    def count(self) -> int:
        """Number of walls on the board"""
        segments = sum(map(sum, self.horizontal)) + sum(map(sum, self.vertical))
        return segments // 2
