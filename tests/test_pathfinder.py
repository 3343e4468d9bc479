"""Tests for depth-first and breadth-first path finding."""

import logging
import random
from collections import deque

import pytest

from mazegraph.core import GridIndexError, Marker, PathFinder, SearchAlgorithm, load_grid


def positions(path):
    return [cell.position for cell in path]


def shortest_distance(grid, start, goal):
    """Reference BFS over coordinates, independent of the linked graph."""
    queue = deque([(start, 0)])
    seen = {start}
    while queue:
        (r, c), dist = queue.popleft()
        if (r, c) == goal:
            return dist
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if grid.in_bounds(nr, nc) and grid.get_cell(nr, nc) and (nr, nc) not in seen:
                seen.add((nr, nc))
                queue.append(((nr, nc), dist + 1))
    return None


def random_rows(rng, width, height, wall_ratio=0.3):
    return [
        "".join("*" if rng.random() < wall_ratio else "." for _ in range(width))
        for _ in range(height)
    ]


def assert_valid_path(path, start, goal):
    assert path[0].position == start
    assert path[-1].position == goal
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert b in a.get_neighbors()
        assert a in b.get_neighbors()


class TestOpenGrid:
    """Searches on the fully open 3x3 grid."""

    def test_bfs_path(self, open_grid):
        """Test BFS returns the expected 4-move route."""
        path = PathFinder(open_grid).bfs(0, 0, 2, 2)
        assert positions(path) == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]

    def test_dfs_path(self, open_grid):
        """Test DFS follows the up/left/down/right priority."""
        path = PathFinder(open_grid).dfs(0, 0, 2, 2)
        assert positions(path) == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]

    def test_results_are_deterministic(self, open_grid):
        """Test repeated searches return the same path."""
        finder = PathFinder(open_grid)
        assert positions(finder.dfs(0, 0, 2, 2)) == positions(finder.dfs(0, 0, 2, 2))
        assert positions(finder.bfs(2, 2, 0, 0)) == positions(finder.bfs(2, 2, 0, 0))

    @pytest.mark.parametrize("algorithm", ["dfs", "bfs"])
    def test_start_equals_goal(self, open_grid, algorithm):
        """Test searching from a cell to itself returns just that cell."""
        path = PathFinder(open_grid).find_path(algorithm, 1, 1, 1, 1)
        assert path == [open_grid.get_cell(1, 1)]

    @pytest.mark.parametrize("algorithm", ["dfs", "bfs"])
    def test_search_leaves_markers_alone(self, open_grid, algorithm):
        """Test searches do not annotate the grid."""
        PathFinder(open_grid).find_path(algorithm, 0, 0, 2, 2)
        assert all(cell.marker == Marker.EMPTY for cell in open_grid.cells_iter())


class TestNoPath:
    """Searches that cannot succeed."""

    @pytest.mark.parametrize("algorithm", ["dfs", "bfs"])
    def test_absent_start(self, grid_factory, algorithm):
        """Test a wall at the start coordinates yields an empty path."""
        grid = grid_factory(["*..", "...", "..."])
        assert PathFinder(grid).find_path(algorithm, 0, 0, 2, 2) == []

    @pytest.mark.parametrize("algorithm", ["dfs", "bfs"])
    def test_absent_goal(self, grid_factory, algorithm):
        """Test a wall at the goal coordinates yields an empty path."""
        grid = grid_factory(["...", "...", "..*"])
        assert PathFinder(grid).find_path(algorithm, 0, 0, 2, 2) == []

    @pytest.mark.parametrize("algorithm", ["dfs", "bfs"])
    def test_isolated_goal(self, grid_factory, algorithm):
        """Test a goal walled off from the start yields an empty path."""
        grid = grid_factory([
            "...",
            "..*",
            ".*.",
        ])
        assert PathFinder(grid).find_path(algorithm, 0, 0, 2, 2) == []

    @pytest.mark.parametrize("algorithm", ["dfs", "bfs"])
    def test_out_of_bounds_raises(self, open_grid, algorithm):
        """Test coordinates outside the grid are a caller error."""
        with pytest.raises(GridIndexError):
            PathFinder(open_grid).find_path(algorithm, 0, 0, 3, 3)

    def test_absent_endpoint_is_logged(self, grid_factory, caplog):
        """Test the no-path diagnostic goes through logging."""
        grid = grid_factory(["*.", ".."])
        with caplog.at_level(logging.INFO, logger="mazegraph.core.pathfinder"):
            PathFinder(grid).bfs(0, 0, 1, 1)
        assert "No path exists" in caplog.text


class TestOrdering:
    """DFS and BFS pick different routes on the same grid."""

    def test_dfs_takes_long_way(self, grid_factory):
        """Test DFS explores downward first and reaches the goal from below."""
        grid = grid_factory(["...", "..."])
        path = PathFinder(grid).dfs(0, 0, 0, 2)
        assert positions(path) == [(0, 0), (1, 0), (1, 1), (1, 2), (0, 2)]

    def test_bfs_takes_short_way(self, grid_factory):
        """Test BFS returns the direct route on the same grid."""
        grid = grid_factory(["...", "..."])
        path = PathFinder(grid).bfs(0, 0, 0, 2)
        assert positions(path) == [(0, 0), (0, 1), (0, 2)]


class TestProperties:
    """Path validity and BFS optimality over many grids."""

    @pytest.mark.parametrize("seed", range(20))
    def test_paths_valid_and_bfs_minimal(self, grid_factory, seed):
        """Test both searches agree on reachability and BFS is shortest."""
        rng = random.Random(seed)
        rows = random_rows(rng, rng.randint(2, 9), rng.randint(2, 9))
        grid = grid_factory(rows)
        open_cells = [cell.position for cell in grid.cells_iter()]
        if len(open_cells) < 2:
            pytest.skip("not enough open cells")

        start, goal = rng.sample(open_cells, 2)
        finder = PathFinder(grid)
        expected = shortest_distance(grid, start, goal)
        bfs_path = finder.bfs(*start, *goal)
        dfs_path = finder.dfs(*start, *goal)

        if expected is None:
            assert bfs_path == []
            assert dfs_path == []
            return

        assert_valid_path(bfs_path, start, goal)
        assert_valid_path(dfs_path, start, goal)
        assert len(bfs_path) - 1 == expected
        assert len(dfs_path) >= len(bfs_path)


class TestFindPath:
    """Tests for algorithm dispatch and the load/search/render flow."""

    def test_dispatch_accepts_enum_and_string(self, open_grid):
        """Test find_path accepts enum members and their values."""
        finder = PathFinder(open_grid)
        assert finder.find_path(SearchAlgorithm.BFS, 0, 0, 2, 2) == finder.bfs(0, 0, 2, 2)
        assert finder.find_path("dfs", 0, 0, 2, 2) == finder.dfs(0, 0, 2, 2)

    def test_unknown_algorithm_raises(self, open_grid):
        """Test an unknown algorithm name is rejected."""
        with pytest.raises(ValueError):
            PathFinder(open_grid).find_path("astar", 0, 0, 2, 2)

    def test_searches_live_on_pathfinder(self, open_grid):
        """Test the grid exposes no search methods of its own."""
        assert not hasattr(open_grid, "bfs")
        assert not hasattr(open_grid, "dfs")
        assert PathFinder(open_grid).grid is open_grid

    def test_solve_and_render(self):
        """Test the full load, search, annotate and render flow."""
        grid = load_grid("S.*\n*..\n*.G")
        path = PathFinder(grid).bfs(0, 0, 2, 2)
        grid.set_path(path)
        assert grid.get_maze_string() == "So*\n*oo\n* G\n"
        grid.clear_path()
        assert grid.get_maze_string() == "  *\n*  \n*  \n"
