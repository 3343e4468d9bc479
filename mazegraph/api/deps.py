"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from mazegraph.config import Settings, get_settings
from mazegraph.services.maze_service import MazeService, get_maze_service

# Type aliases for cleaner route signatures
SettingsDep = Annotated[Settings, Depends(get_settings)]
MazeServiceDep = Annotated[MazeService, Depends(get_maze_service)]
