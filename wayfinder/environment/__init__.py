"""Map geometry, obstacle models and spatial helpers for Wayfinder."""

from .coordinates import CoordinateConverter, cell_key
from .geometry import (
    line_cells,
    point_in_polygon,
    polygon_cells,
    polygon_centroid,
    rect_cells,
    span_cells,
)
from .schemas import (
    BuildingSpec,
    DoorSpec,
    ExteriorMap,
    FurnitureSpec,
    InteriorMap,
    MapBounds,
    MapDescription,
    RoomSpec,
    WallSpec,
    declared_bounds,
    parse_map,
)
from .obstacles import ObstacleModel, build_obstacle_model, door_cells
from .movement import movement_options, normalize_direction, validate_move
from .pathfinding import astar, find_path, manhattan
from .queries import current_room, direction_label, nearby_locations
from .rendering import format_spatial_context, render_ascii_window

__all__ = [
    "CoordinateConverter",
    "cell_key",
    "line_cells",
    "point_in_polygon",
    "polygon_cells",
    "polygon_centroid",
    "rect_cells",
    "span_cells",
    "BuildingSpec",
    "DoorSpec",
    "ExteriorMap",
    "FurnitureSpec",
    "InteriorMap",
    "MapBounds",
    "MapDescription",
    "RoomSpec",
    "WallSpec",
    "declared_bounds",
    "parse_map",
    "ObstacleModel",
    "build_obstacle_model",
    "door_cells",
    "movement_options",
    "normalize_direction",
    "validate_move",
    "astar",
    "find_path",
    "manhattan",
    "current_room",
    "direction_label",
    "nearby_locations",
    "format_spatial_context",
    "render_ascii_window",
]
