"""
Depth-first and breadth-first path finding over a linked Grid.

Both searches mark a cell visited when it is discovered (pushed or
enqueued), record the discovering cell in a parent map, and rebuild the path
by walking parents back from the goal. Neighbors are examined from the last
listed to the first:

- DFS pushes them in that order, so the first-listed neighbor (up) is
  popped next.
- BFS enqueues them in that order (right, down, left, up).

Both orders are fixed so that results are reproducible.
"""

import logging
from collections import deque
from enum import Enum
from typing import Optional

from .cell import Cell
from .grid import Grid

logger = logging.getLogger(__name__)


class SearchAlgorithm(str, Enum):
    """Supported search algorithms."""
    DFS = "dfs"
    BFS = "bfs"


class PathFinder:
    """
    Runs searches on a grid.

    The grid must be linked before searching. Searches do not touch cell
    markers; call Grid.set_path on the result to annotate it.

    Example usage:
        finder = PathFinder(grid)
        path = finder.bfs(0, 0, 2, 2)
        if path:
            grid.set_path(path)
    """

    def __init__(self, grid: Grid):
        self.grid = grid

    def _endpoints(
        self, start_row: int, start_col: int, end_row: int, end_col: int
    ) -> tuple[Optional[Cell], Optional[Cell]]:
        start = self.grid.get_cell(start_row, start_col)
        goal = self.grid.get_cell(end_row, end_col)
        if start is None or goal is None:
            logger.info(
                "Start (%d, %d) or goal (%d, %d) node is absent. No path exists",
                start_row, start_col, end_row, end_col,
            )
        return start, goal

    def dfs(self, start_row: int, start_col: int, end_row: int, end_col: int) -> list[Cell]:
        """
        Find a path using depth-first search.

        Args:
            start_row: Start cell row.
            start_col: Start cell column.
            end_row: Goal cell row.
            end_col: Goal cell column.

        Returns:
            Cells from start to goal inclusive, or an empty list if either
            endpoint is a wall or the goal is unreachable.

        Raises:
            GridIndexError: If a coordinate is outside the grid.
        """
        start, goal = self._endpoints(start_row, start_col, end_row, end_col)
        if start is None or goal is None:
            return []

        parents: dict[Cell, Cell] = {}
        visited = {start}
        to_explore = [start]
        found = False

        while to_explore:
            current = to_explore.pop()
            if current is goal:
                found = True
                break
            for neighbor in reversed(current.get_neighbors()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    parents[neighbor] = current
                    to_explore.append(neighbor)

        logger.debug("DFS discovered %d cells", len(visited))
        if not found:
            logger.info("No path exists")
            return []

        return construct_path(start, goal, parents)

    def bfs(self, start_row: int, start_col: int, end_row: int, end_col: int) -> list[Cell]:
        """
        Find a shortest path using breadth-first search.

        Same arguments, return value and errors as dfs(). The returned path
        has the fewest possible edges.
        """
        start, goal = self._endpoints(start_row, start_col, end_row, end_col)
        if start is None or goal is None:
            return []

        parents: dict[Cell, Cell] = {}
        visited = {start}
        to_explore = deque([start])
        found = False

        while to_explore:
            current = to_explore.popleft()
            if current is goal:
                found = True
                break
            for neighbor in reversed(current.get_neighbors()):
                if neighbor not in visited:
                    visited.add(neighbor)
                    parents[neighbor] = current
                    to_explore.append(neighbor)

        logger.debug("BFS discovered %d cells", len(visited))
        if not found:
            logger.info("No path found")
            return []

        return construct_path(start, goal, parents)

    def find_path(
        self,
        algorithm: SearchAlgorithm | str,
        start_row: int,
        start_col: int,
        end_row: int,
        end_col: int,
    ) -> list[Cell]:
        """Run the named algorithm ("dfs" or "bfs")."""
        algorithm = SearchAlgorithm(algorithm)
        if algorithm == SearchAlgorithm.DFS:
            return self.dfs(start_row, start_col, end_row, end_col)
        return self.bfs(start_row, start_col, end_row, end_col)


def construct_path(start: Cell, goal: Cell, parents: dict[Cell, Cell]) -> list[Cell]:
    """Walk parent links from goal back to start and return start..goal."""
    path = []
    current = goal
    while current is not start:
        path.append(current)
        current = parents[current]
    path.append(start)
    path.reverse()
    return path
