"""
A cell on the board and the dimensions of the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from src.core.exceptions import InvalidBoardError

Vector = tuple[int, int]

# up, down, left, right
ORTHOGONAL_DIRECTIONS: tuple[Vector, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

MIN_BOARD_SIDE = 2


@dataclass(frozen=True)
class BoardDimensions:
    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows < MIN_BOARD_SIDE or self.cols < MIN_BOARD_SIDE:
            raise InvalidBoardError(
                f"A board needs at least 2 rows and 2 columns, got {self.rows}x{self.cols}"
            )

    def cells(self) -> list[Position]:
        """All cells, row by row"""
        return [Position(row, col) for row in range(self.rows) for col in range(self.cols)]


@dataclass(frozen=True)
class Position:
    """(row, column) pair. Row 0 is the top row, column 0 the left-most column."""

    row: int
    col: int

    @classmethod
    def from_notation(cls, text: str) -> Position:
        """'3,4' gets converted to Position(3, 4)"""
        row, col = text.split(",")
        return cls(int(row), int(col))

    def to_notation(self) -> str:
        return f"{self.row},{self.col}"

    def offset(self, drow: int, dcol: int) -> Position:
        return Position(self.row + drow, self.col + dcol)

    def direction_to(self, other: Position) -> Vector:
        """Step vector pointing from this cell towards the other one"""
        return (other.row - self.row, other.col - self.col)

    def is_within_bounds(self, dims: BoardDimensions) -> bool:
        return (0 <= self.row < dims.rows) and (0 <= self.col < dims.cols)
