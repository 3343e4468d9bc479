"""Maze catalogue and solving service."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from mazegraph.config import get_settings
from mazegraph.core import (
    Cell,
    MazeValidationError,
    ParsedMaze,
    PathFinder,
    SearchAlgorithm,
    load_all_mazes,
)

logger = logging.getLogger(__name__)


class MazeTooLargeError(MazeValidationError):
    """Exception raised when a maze exceeds the configured cell limit."""

    pass


@dataclass
class SolveResult:
    """Outcome of a single search."""

    algorithm: SearchAlgorithm
    start: tuple[int, int]
    goal: tuple[int, int]
    path: list[Cell]
    rendered: str

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def length(self) -> int:
        """Number of moves along the path (0 when not found)."""
        return max(len(self.path) - 1, 0)


class MazeService:
    """Loads bundled mazes and runs searches on them."""

    def __init__(self, mazes_dir: Optional[Path] = None, max_grid_cells: Optional[int] = None):
        settings = get_settings()
        self.mazes_dir = Path(mazes_dir) if mazes_dir is not None else settings.mazes_dir
        self.max_grid_cells = (
            max_grid_cells if max_grid_cells is not None else settings.max_grid_cells
        )
        self._mazes: Optional[dict[str, ParsedMaze]] = None

    def _load(self) -> dict[str, ParsedMaze]:
        if self._mazes is None:
            if self.mazes_dir.is_dir():
                mazes = load_all_mazes(self.mazes_dir)
            else:
                logger.warning(f"Mazes directory not found: {self.mazes_dir}")
                mazes = []
            self._mazes = {maze.name: maze for maze in mazes}
            logger.info(f"Loaded {len(self._mazes)} mazes from {self.mazes_dir}")
        return self._mazes

    def list_mazes(self) -> list[ParsedMaze]:
        """All bundled mazes, sorted by name."""
        return sorted(self._load().values(), key=lambda maze: maze.name)

    def get_maze(self, name: str) -> Optional[ParsedMaze]:
        return self._load().get(name)

    def reload(self) -> None:
        """Forget cached mazes so the next call reads the directory again."""
        self._mazes = None

    def _check_cells(self, cells: int, what: str) -> None:
        if cells > self.max_grid_cells:
            raise MazeTooLargeError(
                f"{what}; at most {self.max_grid_cells} cells are allowed"
            )

    def check_text_size(self, maze_text: str) -> None:
        """
        Reject maze text that cannot fit the cell limit, before parsing it.

        Every non-newline character is one cell, so the text length is a
        lower bound on width x height.

        Raises:
            MazeTooLargeError: If the text holds more characters than allowed.
        """
        cells = len(maze_text) - maze_text.count("\n")
        self._check_cells(cells, f"Maze text has {cells} cells")

    def solve(
        self,
        maze: ParsedMaze,
        algorithm: SearchAlgorithm | str,
        start: Optional[tuple[int, int]] = None,
        goal: Optional[tuple[int, int]] = None,
        request_id: Optional[str] = None,
    ) -> SolveResult:
        """
        Search a maze and annotate the result.

        Args:
            maze: Parsed maze.
            algorithm: "bfs" or "dfs".
            start: (row, col) override; defaults to the maze's S mark.
            goal: (row, col) override; defaults to the maze's G mark.
            request_id: Correlation id of the HTTP request, for the log line.

        Returns:
            SolveResult. An empty path means no path exists.

        Raises:
            MazeTooLargeError: If the maze has more cells than allowed.
            MazeValidationError: If start or goal is neither given nor marked.
            GridIndexError: If start or goal lies outside the maze.
        """
        self._check_cells(maze.width * maze.height, f"Maze is {maze.width}x{maze.height}")

        start = start if start is not None else maze.start
        goal = goal if goal is not None else maze.goal
        if start is None:
            raise MazeValidationError("Maze has no start position (S) and none was given")
        if goal is None:
            raise MazeValidationError("Maze has no goal position (G) and none was given")

        algorithm = SearchAlgorithm(algorithm)
        grid = maze.build_grid()
        path = PathFinder(grid).find_path(algorithm, start[0], start[1], goal[0], goal[1])
        grid.set_path(path)

        logger.info(
            f"[{request_id or '-'}] {algorithm.value.upper()} on '{maze.name}' {start} -> {goal}: "
            f"{'found ' + str(len(path) - 1) + ' moves' if path else 'no path'}"
        )

        return SolveResult(
            algorithm=algorithm,
            start=start,
            goal=goal,
            path=path,
            rendered=grid.get_maze_string(),
        )


_maze_service: Optional[MazeService] = None


def get_maze_service() -> MazeService:
    """Get singleton maze service."""
    global _maze_service
    if _maze_service is None:
        _maze_service = MazeService()
    return _maze_service
