"""
Wayfinder - spatial reasoning core for turn-based narrative simulations.

Turns a map description (rooms, doors, buildings, furniture) into a grid
walkability model and answers the questions a narrative engine asks each
turn: can the actor move there, how do they get somewhere, what is nearby.

Fully synchronous. No file I/O required. No global cache.
The application owns its GridSystemRegistry.
"""

__version__ = "0.1.0"

from .config import Config
from .grid_system import GridSystem
from .registry import GridSystemRegistry
from .map_loader import MapLoader, load_map

from .environment import (
    CoordinateConverter,
    ObstacleModel,
    InteriorMap,
    ExteriorMap,
    MapDescription,
    MapBounds,
    RoomSpec,
    DoorSpec,
    BuildingSpec,
    FurnitureSpec,
    WallSpec,
    parse_map,
    build_obstacle_model,
)

from .schemas import (
    Position,
    MoveValidation,
    PathResult,
    NearbyLocation,
    RoomInfo,
    MovementOption,
)

__all__ = [
    # Main classes
    "GridSystem",
    "GridSystemRegistry",
    "Config",
    # Loading
    "MapLoader",
    "load_map",
    "parse_map",
    # Map schemas
    "InteriorMap",
    "ExteriorMap",
    "MapDescription",
    "MapBounds",
    "RoomSpec",
    "DoorSpec",
    "BuildingSpec",
    "FurnitureSpec",
    "WallSpec",
    # Grid internals
    "CoordinateConverter",
    "ObstacleModel",
    "build_obstacle_model",
    # Result schemas
    "Position",
    "MoveValidation",
    "PathResult",
    "NearbyLocation",
    "RoomInfo",
    "MovementOption",
]
