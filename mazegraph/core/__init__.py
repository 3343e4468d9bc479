# Core module
from .cell import Cell, Marker, WALL_GLYPH
from .errors import (
    MazeGraphError,
    GridConfigurationError,
    GridIndexError,
    GridStateError,
    MazeParseError,
    MazeValidationError,
)
from .grid import Grid
from .pathfinder import PathFinder, SearchAlgorithm, construct_path
from .maze_parser import (
    ParsedMaze,
    parse_maze_text,
    load_grid,
    load_maze_file,
    load_all_mazes,
    validate_maze_text,
)

__all__ = [
    "Cell",
    "Marker",
    "WALL_GLYPH",
    "MazeGraphError",
    "GridConfigurationError",
    "GridIndexError",
    "GridStateError",
    "MazeParseError",
    "MazeValidationError",
    "Grid",
    "PathFinder",
    "SearchAlgorithm",
    "construct_path",
    "ParsedMaze",
    "parse_maze_text",
    "load_grid",
    "load_maze_file",
    "load_all_mazes",
    "validate_maze_text",
]
