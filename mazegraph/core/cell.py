"""Maze cells and their display markers."""

from dataclasses import dataclass, field
from enum import Enum


class Marker(Enum):
    """Display state of a cell."""
    EMPTY = " "
    START = "S"
    GOAL = "G"
    PATH = "o"

    @property
    def glyph(self) -> str:
        """Character used when rendering this marker."""
        return self.value


WALL_GLYPH = "*"


@dataclass(eq=False)
class Cell:
    """
    A single open position in the maze graph.

    Cells compare and hash by identity so they can key the visited set and
    parent map of a search regardless of their current marker.
    """
    row: int
    col: int
    neighbors: list["Cell"] = field(default_factory=list, repr=False)
    marker: Marker = Marker.EMPTY

    @property
    def position(self) -> tuple[int, int]:
        """(row, col) of this cell."""
        return (self.row, self.col)

    def add_neighbor(self, other: "Cell") -> None:
        """Append a neighbor. Duplicates are kept."""
        self.neighbors.append(other)

    def get_neighbors(self) -> list["Cell"]:
        return self.neighbors

    def set_display_char(self, marker: Marker) -> None:
        self.marker = marker

    def get_display_char(self) -> str:
        return self.marker.glyph

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"row": self.row, "col": self.col}
