"""
State notation: a single line of text that encodes everything needed to restore a game state (comparable to FEN in chess).

<dimensions> <horizontal walls> <vertical walls> <pawns> <walls remaining> <turn>

* dimensions are written as rows x cols, ex. "9x9"
* walls are listed by anchor as "row.col", comma separated. A "-" is used when there are none
* pawns are "row,col" for player one, then player two, separated by a slash
* walls remaining: player one, then player two, separated by a slash
* turn is "1" or "2"

ex) The starting position on a 9x9 board with 10 walls each:
9x9 - - 0,4/8,4 10/10 1
"""

from src.core.exceptions import InvalidBoardError, InvalidNotationError
from src.core.shared_types import WallOrientation as Orientation
from src.quoridor.board import BoardGraph
from src.quoridor.players import Player
from src.quoridor.position import BoardDimensions, Position
from src.quoridor.state import GameState
from src.quoridor.walls import WallLayout

NUM_FIELDS = 6


def _anchors_to_notation(anchors: list[Position]) -> str:
    return ",".join(f"{anchor.row}.{anchor.col}" for anchor in anchors) or "-"


def _anchors_from_notation(text: str) -> list[Position]:
    if text == "-":
        return []
    anchors: list[Position] = []
    for item in text.split(","):
        row, col = item.split(".")
        anchors.append(Position(int(row), int(col)))
    return anchors


def state_to_notation(state: GameState) -> str:
    dims = f"{state.rows}x{state.cols}"
    horizontal = _anchors_to_notation(state.walls.anchors(Orientation.HORIZONTAL))
    vertical = _anchors_to_notation(state.walls.anchors(Orientation.VERTICAL))
    pawns = "/".join(state.pawn(player).to_notation() for player in Player)
    walls_remaining = "/".join(str(state.walls_left(player)) for player in Player)
    turn = str(state.turn.value)
    return f"{dims} {horizontal} {vertical} {pawns} {walls_remaining} {turn}"


def state_from_notation(notation: str) -> GameState:
    """Parse the notation into a GameState. Raises InvalidNotationError when the text cannot describe a valid state."""
    parts = notation.strip().split()
    if len(parts) != NUM_FIELDS:
        raise InvalidNotationError(
            f"State notation must contain {NUM_FIELDS} space-separated parts: {notation!r}"
        )
    dims_str, horizontal_str, vertical_str, pawns_str, walls_str, turn_str = parts

    try:
        rows, cols = dims_str.split("x")
        dims = BoardDimensions(int(rows), int(cols))
        horizontal = _anchors_from_notation(horizontal_str)
        vertical = _anchors_from_notation(vertical_str)
        pawn_one, pawn_two = (Position.from_notation(p) for p in pawns_str.split("/"))
        walls_one, walls_two = (int(count) for count in walls_str.split("/"))
        turn = Player(int(turn_str))
    except (ValueError, InvalidBoardError) as err:
        raise InvalidNotationError(f"Cannot parse state notation {notation!r}") from err

    _check_consistency(dims, horizontal, vertical, (pawn_one, pawn_two), notation)
    if walls_one < 0 or walls_two < 0:
        raise InvalidNotationError(f"Negative wall count in {notation!r}")

    walls = WallLayout.from_anchors(dims, horizontal, vertical)
    return GameState(
        dims=dims,
        walls=walls,
        graph=BoardGraph.from_walls(walls),
        pawns=(pawn_one, pawn_two),
        walls_remaining=(walls_one, walls_two),
        turn=turn,
    )


def _check_consistency(
    dims: BoardDimensions,
    horizontal: list[Position],
    vertical: list[Position],
    pawns: tuple[Position, Position],
    notation: str,
) -> None:
    """The parts parse fine, but do they describe a position that could occur in a game?"""
    if not all(pawn.is_within_bounds(dims) for pawn in pawns):
        raise InvalidNotationError(f"Pawn off the board in {notation!r}")
    if pawns[0] == pawns[1]:
        raise InvalidNotationError(f"Both pawns on the same cell in {notation!r}")

    layout = WallLayout.empty(dims)
    for orientation, anchors in (
        (Orientation.HORIZONTAL, horizontal),
        (Orientation.VERTICAL, vertical),
    ):
        for anchor in anchors:
            if not layout.is_valid_anchor(anchor):
                raise InvalidNotationError(
                    f"Wall anchor {anchor.row}.{anchor.col} off the board in {notation!r}"
                )
            if layout.overlaps(orientation, anchor):
                raise InvalidNotationError(f"Overlapping walls in {notation!r}")
            layout = layout.with_wall(orientation, anchor)


def is_valid_notation(notation: str) -> bool:
    try:
        state_from_notation(notation)
    except InvalidNotationError:
        return False
    return True
