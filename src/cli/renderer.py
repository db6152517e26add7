"""
Text rendering of the board. Only reads the state.

    0   1   2
 0  ·   1 | ·
   ---+---
 1  ·   ·   ·
 ...

* cells: "·" when empty, "1" / "2" for the pawns
* "|" between two cells: vertical wall segment
* "---" under a cell: horizontal wall segment, "+" joins two neighbouring segments
"""

from src.quoridor.actions import NOTATION_HELP
from src.quoridor.players import Player
from src.quoridor.position import Position
from src.quoridor.state import GameState

EMPTY_CELL = "·"
ROW_LABEL_WIDTH = 4


def render(state: GameState) -> str:
    cell_width = max(3, len(str(state.cols - 1)) + 1)
    lines = [_header(state, cell_width)]
    for row in range(state.rows):
        lines.append(_cell_line(state, row, cell_width))
        if row < state.rows - 1:
            lines.append(_wall_line(state, row, cell_width))
    lines.append("")
    lines.append(_footer(state))
    lines.append(f"Commands: {NOTATION_HELP} | help | quit")
    return "\n".join(lines) + "\n"


def _header(state: GameState, cell_width: int) -> str:
    # every cell is followed by a gutter and a slot for a vertical wall
    labels = "  ".join(str(col).center(cell_width) for col in range(state.cols))
    return " " * ROW_LABEL_WIDTH + labels


def _cell_line(state: GameState, row: int, cell_width: int) -> str:
    parts = [f"{row:2d}  "]
    for col in range(state.cols):
        occupant = state.occupant(Position(row, col))
        symbol = str(occupant.value) if occupant else EMPTY_CELL
        parts.append(symbol.center(cell_width))
        if col < state.cols - 1:
            parts.append(" " + ("|" if state.vertical[row][col] else " "))
    return "".join(parts)


def _wall_line(state: GameState, row: int, cell_width: int) -> str:
    segments = state.horizontal[row]
    parts = [" " * ROW_LABEL_WIDTH]
    for col in range(state.cols):
        parts.append("-" * cell_width if segments[col] else " " * cell_width)
        if col < state.cols - 1:
            joined = segments[col] and segments[col + 1]
            parts.append(" " + ("+" if joined else " "))
    return "".join(parts).rstrip()


def _footer(state: GameState) -> str:
    walls = ", ".join(
        f"{player.label}={state.walls_left(player)}" for player in Player
    )
    return f"Turn: {state.turn.label}   Walls: {walls}"
