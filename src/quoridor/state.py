"""
Immutable snapshot of a game: board, walls, both pawns, wall stock and whose turn it is.

Transitions never modify a state in place, they build a new one. Unchanged parts (the wall layout and board graph after a pawn move)
are shared between the old and the new state.
"""

from dataclasses import dataclass, replace
from typing import Optional, Self

from src.core.exceptions import InvalidBoardError
from src.core.shared_types import WallOrientation as Orientation
from src.quoridor.board import BoardGraph
from src.quoridor.players import Player
from src.quoridor.position import BoardDimensions, Position
from src.quoridor.walls import Grid, WallLayout

DEFAULT_ROWS = 9
DEFAULT_COLS = 9
DEFAULT_WALLS_PER_PLAYER = 10

PlayerPair = tuple[Position, Position]
WallCounts = tuple[int, int]


@dataclass(frozen=True)
class GameState:
    dims: BoardDimensions
    walls: WallLayout
    graph: BoardGraph
    pawns: PlayerPair  # indexed by player: (player one, player two)
    walls_remaining: WallCounts
    turn: Player

    @classmethod
    def initial(
        cls,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        walls_per_player: int = DEFAULT_WALLS_PER_PLAYER,
    ) -> Self:
        """Player one on the top-center cell, player two on the bottom-center cell. Player one starts."""
        if walls_per_player < 0:
            raise InvalidBoardError(f"Number of walls cannot be negative, got {walls_per_player}")
        dims = BoardDimensions(rows, cols)
        walls = WallLayout.empty(dims)
        return cls(
            dims=dims,
            walls=walls,
            graph=BoardGraph.from_walls(walls),
            pawns=(Player.ONE.start_position(dims), Player.TWO.start_position(dims)),
            walls_remaining=(walls_per_player, walls_per_player),
            turn=Player.ONE,
        )

    # --- QUERIES (read-only, enough to render the board) ---
    @property
    def rows(self) -> int:
        return self.dims.rows

    @property
    def cols(self) -> int:
        return self.dims.cols

    @property
    def horizontal(self) -> Grid:
        return self.walls.horizontal

    @property
    def vertical(self) -> Grid:
        return self.walls.vertical

    def pawn(self, player: Player) -> Position:
        return self.pawns[player.value - 1]

    def walls_left(self, player: Player) -> int:
        return self.walls_remaining[player.value - 1]

    @property
    def current_pawn(self) -> Position:
        return self.pawn(self.turn)

    @property
    def opponent_pawn(self) -> Position:
        return self.pawn(self.turn.opponent)

    def occupant(self, pos: Position) -> Optional[Player]:
        for player in Player:
            if self.pawn(player) == pos:
                return player
        return None

    def neighbors(self, pos: Position) -> frozenset[Position]:
        return self.graph.neighbors(pos)

    def distance_to_goal(self, player: Player) -> Optional[int]:
        return self.graph.shortest_distance_to_row(
            self.pawn(player), player.goal_row(self.dims)
        )

    # --- EVOLVE (used by the state transition) ---
    def with_pawn(self, player: Player, target: Position) -> Self:
        pawns = list(self.pawns)
        pawns[player.value - 1] = target
        return replace(self, pawns=(pawns[0], pawns[1]))

    def with_wall(
        self, player: Player, orientation: Orientation, anchor: Position
    ) -> Self:
        """Set both segments, rebuild the board graph and take one wall from the player's stock"""
        walls = self.walls.with_wall(orientation, anchor)
        counts = list(self.walls_remaining)
        counts[player.value - 1] -= 1
        return replace(
            self,
            walls=walls,
            graph=BoardGraph.from_walls(walls),
            walls_remaining=(counts[0], counts[1]),
        )

    def with_turn(self, player: Player) -> Self:
        return replace(self, turn=player)
