"""
Rules of the game: move legality (incl. jumps), wall legality (incl. keeping a route open for both players),
the state transition and the end condition.

Validators return None when the action is legal, or a Rejection describing the first rule that was violated.
They never raise for a well-typed action and never modify the state they are given.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from src.core.shared_types import WallOrientation as Orientation
from src.quoridor.actions import Action, ActionType
from src.quoridor.board import BoardGraph
from src.quoridor.players import Player
from src.quoridor.position import Position
from src.quoridor.state import GameState

logger = logging.getLogger(__name__)


class RejectionReason(Enum):
    OUT_OF_BOUNDS = auto()
    OCCUPIED_TARGET = auto()
    ILLEGAL_ADJACENCY = auto()
    NO_WALLS_REMAINING = auto()
    WALL_OVERLAP = auto()
    PATH_BLOCKED = auto()


@dataclass(frozen=True)
class Rejection:
    reason: RejectionReason
    message: str


# --- MOVE VALIDATOR ---
def validate_move(
    state: GameState, mover: Player, target: Position
) -> Optional[Rejection]:
    """
    Rules, checked in order:
    ----

    1. the target must be on the board
    2. the target cannot be the opponent's cell (pawns never share a cell)
    3. the target must be reachable by a plain step or by a jump over the opponent (see `is_reachable_step`)
    """
    if not target.is_within_bounds(state.dims):
        return Rejection(RejectionReason.OUT_OF_BOUNDS, "Move out of bounds")

    opponent = state.pawn(mover.opponent)
    if target == opponent:
        return Rejection(RejectionReason.OCCUPIED_TARGET, "Cannot move onto opponent")

    if not is_reachable_step(state.graph, state.pawn(mover), opponent, target):
        return Rejection(
            RejectionReason.ILLEGAL_ADJACENCY,
            "Illegal move (blocked or not adjacent/jump)",
        )
    return None


def is_reachable_step(
    graph: BoardGraph, me: Position, opponent: Position, target: Position
) -> bool:
    """
    Can a pawn get from `me` to `target` in a single move?
    ----

    * Plain step: the target is a neighbour (no wall in between) and not occupied.
    * Straight jump: the opponent is a neighbour, and the cell right behind them (same direction) is a neighbour of the opponent.
    * Side-step jump: the opponent is a neighbour but the straight jump is unavailable (off the board or behind a wall).
        Then any other neighbour of the opponent's cell is fine, except the one you are standing on.

    NOTE the side-step is permissive: it is not restricted to the two cells perpendicular to the jump direction.
    """
    neighbours = graph.neighbors(me)
    if target in neighbours and target != opponent:
        return True

    if opponent not in neighbours:
        return False

    drow, dcol = me.direction_to(opponent)
    straight = opponent.offset(drow, dcol)
    opponent_neighbours = graph.neighbors(opponent)
    # off the board means it cannot be a neighbour either
    if straight in opponent_neighbours:
        return target == straight
    return target in opponent_neighbours and target != me


def legal_move_targets(state: GameState, mover: Player) -> list[Position]:
    """Every cell the mover's pawn could go to this turn. At most two steps away, so only that window is checked."""
    pawn = state.pawn(mover)
    candidates = [
        pawn.offset(drow, dcol)
        for drow in range(-2, 3)
        for dcol in range(-2, 3)
        if 0 < abs(drow) + abs(dcol) <= 2
    ]
    return sorted(
        (
            target
            for target in candidates
            if validate_move(state, mover, target) is None
        ),
        key=lambda target: (target.row, target.col),
    )


# --- WALL VALIDATOR ---
def validate_wall(
    state: GameState, placer: Player, orientation: Orientation, anchor: Position
) -> Optional[Rejection]:
    """
    Rules, checked in order:
    ----

    1. the placer must have a wall left
    2. the anchor must be in [0, rows-2] x [0, cols-2]
    3. none of the two segments may already be covered by a wall of the same orientation
    4. after placing it, both players must still be able to reach their goal row

    The connectivity check runs on a scratch copy of the layout: the given state is never touched.
    """
    if state.walls_left(placer) <= 0:
        return Rejection(
            RejectionReason.NO_WALLS_REMAINING, f"{placer.label} has no walls left"
        )

    if not state.walls.is_valid_anchor(anchor):
        return Rejection(RejectionReason.OUT_OF_BOUNDS, "Wall anchor out of bounds")

    if state.walls.overlaps(orientation, anchor):
        kind = "horizontal" if orientation == Orientation.HORIZONTAL else "vertical"
        return Rejection(
            RejectionReason.WALL_OVERLAP, f"Wall overlaps existing {kind} wall"
        )

    simulated = BoardGraph.from_walls(state.walls.with_wall(orientation, anchor))
    for player in Player:
        if not simulated.has_path_to_row(
            state.pawn(player), player.goal_row(state.dims)
        ):
            return Rejection(
                RejectionReason.PATH_BLOCKED, f"Wall blocks {player.label}'s path"
            )
    return None


# --- DISPATCH ---
def validate(state: GameState, action: Action) -> Optional[Rejection]:
    """Check an action for the player whose turn it is"""
    match action.type:
        case ActionType.MOVE:
            assert action.target is not None
            rejection = validate_move(state, state.turn, action.target)
        case ActionType.WALL_H | ActionType.WALL_V:
            assert action.anchor is not None and action.orientation is not None
            rejection = validate_wall(state, state.turn, action.orientation, action.anchor)
    if rejection is not None:
        logger.debug(
            "Rejected '%s' for %s: %s", action.to_notation(), state.turn.label, rejection.reason.name
        )
    return rejection


def apply(state: GameState, action: Action) -> GameState:
    """
    State transition. Produces the next state and passes the turn.
    ----

    NOTE: does not validate. The caller is responsible for calling `validate` first (or use `play`).
    Applying an illegal action results in an inconsistent state.
    """
    player = state.turn
    match action.type:
        case ActionType.MOVE:
            assert action.target is not None
            next_state = state.with_pawn(player, action.target)
        case ActionType.WALL_H | ActionType.WALL_V:
            assert action.anchor is not None and action.orientation is not None
            next_state = state.with_wall(player, action.orientation, action.anchor)
    return next_state.with_turn(player.opponent)


def play(state: GameState, action: Action) -> GameState | Rejection:
    """Validate, then apply. Gives back either the next state or the reason the action was refused."""
    rejection = validate(state, action)
    if rejection is not None:
        return rejection
    return apply(state, action)


# --- END OF GAME ---
def is_terminal(state: GameState) -> bool:
    return winner(state) is not None


def winner(state: GameState) -> Optional[Player]:
    """The player whose pawn reached its goal row (only the player who just moved can have done so)"""
    for player in Player:
        if state.pawn(player).row == player.goal_row(state.dims):
            return player
    return None
