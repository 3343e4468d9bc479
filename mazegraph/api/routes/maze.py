"""Maze routes for listing, retrieving and solving mazes."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from mazegraph.api.deps import MazeServiceDep, SettingsDep
from mazegraph.config import get_settings
from mazegraph.core import (
    GridIndexError,
    MazeParseError,
    MazeValidationError,
    ParsedMaze,
    parse_maze_text,
)
from mazegraph.schemas.maze import (
    MazeDetail,
    MazeListItem,
    MazeListResponse,
    MazePosition,
    SolveRequest,
    SolveResponse,
)
from mazegraph.services.maze_service import MazeService, MazeTooLargeError

settings = get_settings()
limiter = Limiter(key_func=get_remote_address)

router = APIRouter(prefix="/maze", tags=["Mazes"])


def _position(pos: Optional[tuple[int, int]]) -> Optional[MazePosition]:
    if pos is None:
        return None
    return MazePosition(row=pos[0], col=pos[1])


def _run_solve(
    service: MazeService,
    maze: ParsedMaze,
    algorithm: str,
    start: Optional[MazePosition] = None,
    goal: Optional[MazePosition] = None,
    request_id: Optional[str] = None,
) -> SolveResponse:
    """Solve and translate core errors into HTTP errors."""
    try:
        result = service.solve(
            maze,
            algorithm,
            start=(start.row, start.col) if start else None,
            goal=(goal.row, goal.col) if goal else None,
            request_id=request_id,
        )
    except MazeTooLargeError as e:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=str(e),
        )
    except MazeValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    except GridIndexError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )

    return SolveResponse(
        found=result.found,
        algorithm=result.algorithm.value,
        start=_position(result.start),
        goal=_position(result.goal),
        path=[MazePosition(**cell.to_dict()) for cell in result.path],
        length=result.length,
        rendered=result.rendered,
    )


@router.get(
    "",
    response_model=MazeListResponse,
)
async def list_mazes(service: MazeServiceDep) -> MazeListResponse:
    """List all bundled mazes.

    Grid data is not included - use GET /v1/maze/{name} for full details.
    """
    maze_items = [
        MazeListItem(
            name=maze.name,
            width=maze.width,
            height=maze.height,
            has_start=maze.start is not None,
            has_goal=maze.goal is not None,
        )
        for maze in service.list_mazes()
    ]

    return MazeListResponse(
        mazes=maze_items,
        total=len(maze_items),
    )


@router.post(
    "/solve",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def solve_maze(
    request: Request,
    solve_data: SolveRequest,
    service: MazeServiceDep,
    app_settings: SettingsDep,
) -> SolveResponse:
    """Solve an ad-hoc maze.

    A response with found=false means no path exists between start and goal.
    """
    try:
        service.check_text_size(solve_data.grid_data)
    except MazeTooLargeError as e:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=str(e),
        )

    try:
        maze = parse_maze_text(solve_data.grid_data, name="request")
    except (MazeParseError, MazeValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    algorithm = solve_data.algorithm or app_settings.default_algorithm
    return _run_solve(
        service,
        maze,
        algorithm,
        solve_data.start,
        solve_data.goal,
        request_id=getattr(request.state, "request_id", None),
    )


@router.get(
    "/{name}",
    response_model=MazeDetail,
)
async def get_maze(name: str, service: MazeServiceDep) -> MazeDetail:
    """Get detailed information about a bundled maze, including grid data."""
    maze = service.get_maze(name)

    if not maze:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {name}",
        )

    return MazeDetail(
        name=maze.name,
        width=maze.width,
        height=maze.height,
        grid_data=maze.grid_data,
        start=_position(maze.start),
        goal=_position(maze.goal),
    )


@router.get(
    "/{name}/solve",
    response_model=SolveResponse,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def solve_bundled_maze(
    request: Request,
    name: str,
    service: MazeServiceDep,
    app_settings: SettingsDep,
    algorithm: Optional[str] = Query(
        None,
        description="Search algorithm (bfs or dfs)",
        pattern="^(bfs|dfs)$",
    ),
) -> SolveResponse:
    """Solve a bundled maze between its own start and goal marks."""
    maze = service.get_maze(name)

    if not maze:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {name}",
        )

    return _run_solve(
        service,
        maze,
        algorithm or app_settings.default_algorithm,
        request_id=getattr(request.state, "request_id", None),
    )
