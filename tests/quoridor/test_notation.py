"""Unit tests for src/quoridor/notation.py"""

import pytest

from src.quoridor.actions import Action
from src.quoridor.notation import (
    InvalidNotationError,
    is_valid_notation,
    state_from_notation,
    state_to_notation,
)
from src.quoridor.players import Player
from src.quoridor.position import Position
from src.quoridor.rules import apply
from src.quoridor.state import GameState
from src.quoridor.walls import Orientation

STARTING_NOTATION = "9x9 - - 0,4/8,4 10/10 1"


def test_starting_position(empty_state: GameState) -> None:
    assert state_to_notation(empty_state) == STARTING_NOTATION
    assert state_from_notation(STARTING_NOTATION) == empty_state


def test_notation_after_some_actions(empty_state: GameState) -> None:
    state = apply(empty_state, Action.move(1, 4))
    state = apply(state, Action.wall(Orientation.HORIZONTAL, 7, 3))
    state = apply(state, Action.wall(Orientation.VERTICAL, 2, 5))
    state = apply(state, Action.wall(Orientation.HORIZONTAL, 7, 5))

    notation = state_to_notation(state)
    assert notation == "9x9 7.3,7.5 2.5 1,4/8,4 9/8 1"

    restored = state_from_notation(notation)
    assert restored == state
    assert restored.turn == Player.ONE
    assert restored.walls_left(Player.ONE) == 9
    # the board graph is rebuilt from the walls
    assert Position(3, 6) not in restored.neighbors(Position(3, 5))


def test_rectangular_board() -> None:
    state = state_from_notation("5x7 0.0 - 0,3/4,3 2/3 2")
    assert state.rows == 5
    assert state.cols == 7
    assert state.horizontal[0][0] and state.horizontal[0][1]
    assert state.walls_remaining == (2, 3)


@pytest.mark.parametrize(
    "notation",
    [
        "",
        "9x9 - - 0,4/8,4 10/10",  # only 5 parts
        "9x9 - - 0,4/8,4 10/10 1 extra",  # 7 parts
        "9by9 - - 0,4/8,4 10/10 1",  # dimensions
        "1x9 - - 0,4/0,5 10/10 1",  # board too small
        "9x9 a.b - 0,4/8,4 10/10 1",  # wall anchor
        "9x9 - - 0,4 10/10 1",  # only one pawn
        "9x9 - - 0,4/8,4 ten/10 1",  # wall count
        "9x9 - - 0,4/8,4 10/10 3",  # no player 3
        "9x9 - - 0,4/9,4 10/10 1",  # pawn off the board
        "9x9 - - 0,4/0,4 10/10 1",  # pawns on the same cell
        "9x9 8.0 - 0,4/8,4 10/10 1",  # wall anchor off the board
        "9x9 3.3,3.4 - 0,4/8,4 10/10 1",  # overlapping walls
        "9x9 - - 0,4/8,4 -1/10 1",  # negative wall count
    ],
)
def test_invalid_notation(notation: str) -> None:
    assert not is_valid_notation(notation)
    with pytest.raises(InvalidNotationError):
        _ = state_from_notation(notation)


def test_valid_notation() -> None:
    assert is_valid_notation(STARTING_NOTATION)
    # crossing walls are allowed
    assert is_valid_notation("9x9 3.3 3.3 0,4/8,4 9/9 1")
