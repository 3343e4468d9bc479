"""MazeGraph - grid maze path finding."""

__version__ = "1.0.0"
