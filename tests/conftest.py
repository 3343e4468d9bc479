"""Pytest configuration and fixtures."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from mazegraph.main import app
from mazegraph.config import BASE_DIR
from mazegraph.core import Grid
from mazegraph.services.maze_service import MazeService, get_maze_service

MAZES_DIR = BASE_DIR / "mazes"


def build_grid(rows: list[str]) -> Grid:
    """Build a linked grid from rows where '*' is a wall and anything else is open."""
    grid = Grid(len(rows[0]), len(rows))
    for r, line in enumerate(rows):
        for c, char in enumerate(line):
            if char != "*":
                grid.add_node(r, c)
    grid.link_edges()
    return grid


@pytest.fixture
def grid_factory():
    """Factory for linked grids built from row strings."""
    return build_grid


@pytest.fixture
def open_grid() -> Grid:
    """Fully open, linked 3x3 grid."""
    return build_grid(["...", "...", "..."])


@pytest.fixture
def maze_service() -> MazeService:
    """Maze service reading the bundled mazes directory."""
    return MazeService(mazes_dir=MAZES_DIR)


@pytest_asyncio.fixture(scope="function")
async def client(maze_service) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    app.dependency_overrides[get_maze_service] = lambda: maze_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def sample_maze_text() -> str:
    """Sample maze text for testing."""
    return """XXXXX
XS..X
X.X.X
X..GX
XXXXX"""
