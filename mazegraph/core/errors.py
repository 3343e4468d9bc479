"""Exceptions raised by the maze graph core."""


class MazeGraphError(Exception):
    """Base class for all maze graph errors."""

    pass


class GridConfigurationError(MazeGraphError, ValueError):
    """Exception raised when a grid is created with invalid dimensions."""

    pass


class GridIndexError(MazeGraphError, IndexError):
    """Exception raised when a coordinate lies outside the grid."""

    pass


class GridStateError(MazeGraphError, RuntimeError):
    """Exception raised when a grid operation is called out of order."""

    pass


class MazeParseError(MazeGraphError):
    """Exception raised when maze parsing fails."""

    pass


class MazeValidationError(MazeGraphError):
    """Exception raised when maze validation fails."""

    pass
