"""The board as a graph: cells are nodes, walls remove edges between orthogonal neighbours."""

from collections import deque
from dataclasses import dataclass
from typing import Optional, Self

from src.quoridor.position import ORTHOGONAL_DIRECTIONS, BoardDimensions, Position
from src.quoridor.walls import WallLayout


@dataclass(frozen=True)
class BoardGraph:
    dims: BoardDimensions
    adjacency: dict[Position, frozenset[Position]]

    @classmethod
    def from_walls(cls, walls: WallLayout) -> Self:
        """
        Rebuild every cell's neighbour set from scratch in a single pass over the board.
        ----

        A neighbour is any in-bounds orthogonal cell, unless the edge towards it is covered by a wall segment.
        The edge rule is symmetric, so the resulting adjacency is symmetric as well.
        """
        dims = walls.dims
        adjacency: dict[Position, frozenset[Position]] = {}
        for cell in dims.cells():
            neighbours = set()
            for drow, dcol in ORTHOGONAL_DIRECTIONS:
                other = cell.offset(drow, dcol)
                if other.is_within_bounds(dims) and not walls.blocks(cell, other):
                    neighbours.add(other)
            adjacency[cell] = frozenset(neighbours)
        return cls(dims, adjacency)

    def neighbors(self, pos: Position) -> frozenset[Position]:
        return self.adjacency[pos]

    def is_adjacent(self, a: Position, b: Position) -> bool:
        return b in self.adjacency.get(a, frozenset())

    def has_path_to_row(self, start: Position, goal_row: int) -> bool:
        """Reachability search: is there at least one route from start to any cell on the goal row?"""
        return self.shortest_distance_to_row(start, goal_row) is not None

    def shortest_distance_to_row(
        self, start: Position, goal_row: int
    ) -> Optional[int]:
        """
        Breadth-first search from start. Returns the number of steps to the closest cell on the goal row,
        or None when the goal row cannot be reached.

        Every cell is visited at most once.
        """
        visited = {start}
        queue: deque[tuple[Position, int]] = deque([(start, 0)])
        while queue:
            cell, distance = queue.popleft()
            if cell.row == goal_row:
                return distance
            for neighbour in self.adjacency[cell]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append((neighbour, distance + 1))
        return None
