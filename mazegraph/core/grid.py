"""
Maze grid.

A grid is a fixed height x width arrangement of optional cells. Absent
positions are walls: they are never linked and never part of a path.

Lifecycle:
    grid = Grid(width, height)
    grid.add_node(row, col)      # for every open position
    grid.link_edges()            # exactly once
    path = PathFinder(grid).bfs(0, 0, 2, 2)  # any number of queries
    grid.set_path(path)
    print(grid.get_maze_string())
"""

import sys
from typing import Iterator, Optional

from .cell import WALL_GLYPH, Cell, Marker
from .errors import GridConfigurationError, GridIndexError, GridStateError

DEFAULT_SIZE = 10

# Order in which neighbors are linked: up, left, down, right.
# Search tie-breaks depend on it.
LINK_OFFSETS = [(-1, 0), (0, -1), (1, 0), (0, 1)]


class Grid:
    """Rectangular maze of optional cells with 4-connected linking."""

    def __init__(self, width: int = DEFAULT_SIZE, height: int = DEFAULT_SIZE):
        self.width: int = 0
        self.height: int = 0
        self.cells: list[list[Optional[Cell]]] = []
        self._linked = False
        self.initialise(width, height)

    def initialise(self, width: int, height: int) -> None:
        """
        Allocate an empty width x height arrangement.

        Raises:
            GridConfigurationError: If either dimension is not a positive int.
        """
        for label, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise GridConfigurationError(
                    f"Grid {label} must be a positive integer, got {value!r}"
                )

        self.width = width
        self.height = height
        self.cells = [[None] * width for _ in range(height)]
        self._linked = False

    @property
    def is_linked(self) -> bool:
        return self._linked

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise GridIndexError(
                f"Position ({row}, {col}) is outside the "
                f"{self.height}x{self.width} grid"
            )

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get the cell at (row, col), or None if the position is a wall."""
        self._check_bounds(row, col)
        return self.cells[row][col]

    def add_node(self, row: int, col: int) -> Cell:
        """
        Create a new cell at (row, col), replacing whatever was there.

        Raises:
            GridIndexError: If the position is outside the grid.
            GridStateError: If the grid has already been linked.
        """
        if self._linked:
            raise GridStateError("Cannot add nodes after edges have been linked")
        self._check_bounds(row, col)
        cell = Cell(row, col)
        self.cells[row][col] = cell
        return cell

    def cells_iter(self) -> Iterator[Cell]:
        """Yield present cells in row-major order."""
        for row in self.cells:
            for cell in row:
                if cell is not None:
                    yield cell

    def link_edges(self) -> None:
        """
        Link every present cell to its present up, left, down and right
        neighbors, in that order.

        Raises:
            GridStateError: If called more than once.
        """
        if self._linked:
            raise GridStateError("Edges have already been linked")

        for cell in self.cells_iter():
            for dr, dc in LINK_OFFSETS:
                r, c = cell.row + dr, cell.col + dc
                if self.in_bounds(r, c) and self.cells[r][c] is not None:
                    cell.add_neighbor(self.cells[r][c])

        self._linked = True

    def set_path(self, path: list[Cell]) -> None:
        """Mark the first cell START, the last GOAL and the rest PATH."""
        last = len(path) - 1
        for index, cell in enumerate(path):
            # Index 0 wins, so a single-cell path is marked START.
            if index == 0:
                cell.set_display_char(Marker.START)
            elif index == last:
                cell.set_display_char(Marker.GOAL)
            else:
                cell.set_display_char(Marker.PATH)

    def clear_path(self) -> None:
        """Reset every present cell to EMPTY."""
        for cell in self.cells_iter():
            cell.set_display_char(Marker.EMPTY)

    def get_maze_string(self) -> str:
        """
        Render the maze as height lines of width characters.

        Walls render as '*', open cells as their marker glyph. Every line,
        including the last, ends with a newline.
        """
        lines = []
        for row in self.cells:
            line = ""
            for cell in row:
                line += WALL_GLYPH if cell is None else cell.get_display_char()
            lines.append(line + "\n")
        return "".join(lines)

    def print_maze(self, file=None) -> None:
        """Print the maze to stdout (or the given file)."""
        (file or sys.stdout).write(self.get_maze_string())

    def __str__(self) -> str:
        return self.get_maze_string()
