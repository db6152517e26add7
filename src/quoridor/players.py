"""The two players: where they start and which row they are racing to."""

from enum import Enum

from src.core.shared_types import Seat
from src.quoridor.position import BoardDimensions, Position


class Player(Enum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> "Player":
        return Player.TWO if self == Player.ONE else Player.ONE

    @property
    def label(self) -> str:
        return f"P{self.value}"

    @property
    def seat(self) -> Seat:
        return Seat.PLAYER_ONE if self == Player.ONE else Seat.PLAYER_TWO

    @classmethod
    def from_seat(cls, seat: Seat) -> "Player":
        return cls.ONE if seat == Seat.PLAYER_ONE else cls.TWO

    def goal_row(self, dims: BoardDimensions) -> int:
        """Player one starts at the top and races to the bottom row. Player two the other way around."""
        return dims.rows - 1 if self == Player.ONE else 0

    def start_position(self, dims: BoardDimensions) -> Position:
        row = 0 if self == Player.ONE else dims.rows - 1
        return Position(row, dims.cols // 2)
