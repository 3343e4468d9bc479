"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a position in the maze."""

    row: int
    col: int


class MazeBase(BaseModel):
    """Base maze schema with common fields."""

    name: str
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class MazeListItem(MazeBase):
    """Schema for maze list item (without grid data)."""

    has_start: bool
    has_goal: bool


class MazeDetail(MazeBase):
    """Schema for detailed maze response with grid data."""

    grid_data: str
    start: Optional[MazePosition] = None
    goal: Optional[MazePosition] = None


class MazeListResponse(BaseModel):
    """Schema for maze list response."""

    mazes: list[MazeListItem]
    total: int


class SolveRequest(BaseModel):
    """Schema for solving an ad-hoc maze.

    Start and goal default to the S and G marks in the grid data.
    """

    grid_data: str = Field(..., min_length=1)
    algorithm: Optional[str] = Field(None, pattern="^(bfs|dfs)$")
    start: Optional[MazePosition] = None
    goal: Optional[MazePosition] = None


class SolveResponse(BaseModel):
    """Schema for a solve result."""

    found: bool
    algorithm: str
    start: MazePosition
    goal: MazePosition
    path: list[MazePosition]
    length: int = Field(..., ge=0, description="Number of moves (edges) in the path")
    rendered: str
