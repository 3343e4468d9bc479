"""
Maze Parser for MazeGraph.

Loads and validates maze text, and builds linked grids from it.

Maze Format (one line per row):
    S = Start position
    G = Goal (E is accepted as well)
    * = Wall (X and # are accepted as well)
    . = Open path (can also be space, or o for a rendered path)

Short lines are padded with walls up to the widest line. Positions are
(row, col) with (0, 0) at the top-left corner.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import MazeParseError, MazeValidationError
from .grid import Grid

logger = logging.getLogger(__name__)

START_CHARS = {"S"}
GOAL_CHARS = {"G", "E"}
OPEN_CHARS = {".", " ", "o"} | START_CHARS | GOAL_CHARS
WALL_CHARS = {"*", "X", "#"}
VALID_CHARS = OPEN_CHARS | WALL_CHARS


@dataclass
class ParsedMaze:
    """Parsed maze data ready to be turned into a grid."""

    name: str
    grid_data: str
    width: int
    height: int
    start: Optional[tuple[int, int]] = None
    goal: Optional[tuple[int, int]] = None

    @property
    def rows(self) -> list[str]:
        """Grid rows padded with walls to the full width."""
        return [line.ljust(self.width, "*") for line in self.grid_data.split("\n")]

    def build_grid(self) -> Grid:
        """
        Build a populated and linked Grid.

        Every open position becomes a node; edges are linked once at the end.
        """
        grid = Grid(self.width, self.height)
        for row, line in enumerate(self.rows):
            for col, char in enumerate(line):
                if char in OPEN_CHARS:
                    grid.add_node(row, col)
        grid.link_edges()
        return grid

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "grid_data": self.grid_data,
            "width": self.width,
            "height": self.height,
            "start": self.start,
            "goal": self.goal,
        }


def _normalize_lines(maze_text: str) -> list[str]:
    lines = [line.rstrip("\r") for line in maze_text.split("\n")]
    # Drop empty lines around the maze. A line of spaces is an open row.
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return lines


def parse_maze_text(maze_text: str, name: str = "Unnamed") -> ParsedMaze:
    """
    Parse maze text and extract metadata.

    Args:
        maze_text: Multi-line string representing the maze grid.
        name: Name of the maze.

    Returns:
        ParsedMaze with grid data and metadata.

    Raises:
        MazeParseError: If the maze cannot be parsed.
        MazeValidationError: If the maze is invalid.
    """
    if not maze_text or not maze_text.strip():
        raise MazeParseError("Maze text is empty")

    lines = _normalize_lines(maze_text)

    height = len(lines)
    width = max(len(line) for line in lines)

    # Find start and goal positions
    start_pos: Optional[tuple[int, int]] = None
    goal_pos: Optional[tuple[int, int]] = None

    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char not in VALID_CHARS:
                raise MazeValidationError(
                    f"Invalid character '{char}' at position ({row}, {col}). "
                    f"Valid characters: {', '.join(repr(c) for c in sorted(VALID_CHARS))}"
                )

            if char in START_CHARS:
                if start_pos is not None:
                    raise MazeValidationError(
                        f"Multiple start positions found: "
                        f"first at {start_pos}, second at ({row}, {col})"
                    )
                start_pos = (row, col)
            elif char in GOAL_CHARS:
                if goal_pos is not None:
                    raise MazeValidationError(
                        f"Multiple goal positions found: "
                        f"first at {goal_pos}, second at ({row}, {col})"
                    )
                goal_pos = (row, col)

    return ParsedMaze(
        name=name,
        grid_data="\n".join(lines),
        width=width,
        height=height,
        start=start_pos,
        goal=goal_pos,
    )


def load_grid(maze_text: str) -> Grid:
    """Parse maze text and return the linked Grid."""
    return parse_maze_text(maze_text).build_grid()


def load_maze_file(file_path: Path | str, name: Optional[str] = None) -> ParsedMaze:
    """
    Load and parse a maze file from the filesystem.

    Args:
        file_path: Path to the maze file.
        name: Optional name override. If not provided, uses filename.

    Returns:
        ParsedMaze with grid data and metadata.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeParseError: If the maze cannot be parsed.
        MazeValidationError: If the maze is invalid.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeParseError(f"Path is not a file: {file_path}")

    try:
        maze_text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MazeParseError(f"Failed to read maze file: {e}") from e

    if name is None:
        name = file_path.stem

    return parse_maze_text(maze_text, name=name)


def load_all_mazes(mazes_dir: Path | str) -> list[ParsedMaze]:
    """
    Load all maze files from a directory.

    Args:
        mazes_dir: Path to the directory containing maze files.

    Returns:
        List of ParsedMaze objects, sorted by file name.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise FileNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise MazeParseError(f"Path is not a directory: {mazes_dir}")

    mazes = []
    for maze_file in sorted(mazes_dir.glob("*.txt")):
        try:
            mazes.append(load_maze_file(maze_file))
        except (MazeParseError, MazeValidationError) as e:
            # Skip broken files but keep loading the rest
            logger.warning(f"Failed to load {maze_file}: {e}")

    return mazes


def validate_maze_text(maze_text: str) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text)
        return True, None
    except (MazeParseError, MazeValidationError) as e:
        return False, str(e)
