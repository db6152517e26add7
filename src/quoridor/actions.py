"""
The three kinds of action a player can take on their turn.

Command notation (same three-verb shape the shell uses):
* "move r c"   : move your pawn to row r, column c
* "wall h r c" : place a horizontal wall anchored at (r, c)
* "wall v r c" : place a vertical wall anchored at (r, c)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import InvalidActionNotationError
from src.core.shared_types import WallOrientation as Orientation
from src.quoridor.position import Position


class ActionType(Enum):
    MOVE = auto()
    WALL_H = auto()
    WALL_V = auto()


WALL_ACTION_TYPES: dict[Orientation, ActionType] = {
    Orientation.HORIZONTAL: ActionType.WALL_H,
    Orientation.VERTICAL: ActionType.WALL_V,
}

NOTATION_HELP = "move r c | wall h r c | wall v r c"


@dataclass(frozen=True)
class Action:
    """A move carries a target cell, a wall carries its anchor (the orientation is part of the action type)."""

    type: ActionType
    target: Optional[Position] = None
    anchor: Optional[Position] = None

    @classmethod
    def move(cls, row: int, col: int) -> Self:
        return cls(ActionType.MOVE, target=Position(row, col))

    @classmethod
    def wall(cls, orientation: Orientation, row: int, col: int) -> Self:
        return cls(WALL_ACTION_TYPES[orientation], anchor=Position(row, col))

    @property
    def orientation(self) -> Optional[Orientation]:
        """Only walls have an orientation"""
        for orientation, action_type in WALL_ACTION_TYPES.items():
            if self.type == action_type:
                return orientation
        return None

    @classmethod
    def from_notation(cls, text: str) -> Self:
        """Parse a command like 'move 1 4' or 'wall h 7 3' (case-insensitive, any whitespace)"""
        tokens = text.strip().lower().split()
        if not tokens:
            raise InvalidActionNotationError(f"Empty command. Try: {NOTATION_HELP}")

        verb, arguments = tokens[0], tokens[1:]
        try:
            if verb == "move" and len(arguments) == 2:
                return cls.move(int(arguments[0]), int(arguments[1]))
            if verb == "wall" and len(arguments) == 3:
                orientation = Orientation(arguments[0])
                return cls.wall(orientation, int(arguments[1]), int(arguments[2]))
        except ValueError as err:
            raise InvalidActionNotationError(
                f"Cannot parse {text!r}. Try: {NOTATION_HELP}"
            ) from err
        raise InvalidActionNotationError(
            f"Unknown command {text!r}. Try: {NOTATION_HELP}"
        )

    def to_notation(self) -> str:
        if self.type == ActionType.MOVE:
            assert self.target is not None
            return f"move {self.target.row} {self.target.col}"
        assert self.anchor is not None and self.orientation is not None
        return f"wall {self.orientation.value} {self.anchor.row} {self.anchor.col}"
