"""
Grid movement system for a single map.

GridSystem is the "physics" the narrative layer consults each turn. It never
decides what the actor does; it only answers whether a requested move is
possible, how to get somewhere, and what is nearby.

Lifecycle:
- Constructed once per map payload (usually through GridSystemRegistry)
- Parses the map, builds the obstacle model, then is read-only
- Safe to share between callers because no method mutates it

Usage:
    system = GridSystem(map_data)
    here = system.position_at(190, 210)
    verdict = system.validate_move(here, "north")
    if verdict.valid:
        here = verdict.new_position
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from .config import Config
from .environment import (
    CoordinateConverter,
    ExteriorMap,
    InteriorMap,
    ObstacleModel,
    build_obstacle_model,
    current_room,
    find_path,
    format_spatial_context,
    movement_options,
    nearby_locations,
    parse_map,
    render_ascii_window,
    validate_move,
)
from .schemas import (
    MoveValidation,
    MovementOption,
    NearbyLocation,
    PathResult,
    Position,
    RoomInfo,
)

MapInput = Union[InteriorMap, ExteriorMap, Mapping[str, Any]]


class GridSystem:
    """Walkability model plus movement, pathfinding and proximity queries for one map."""

    def __init__(
        self,
        map_data: MapInput,
        cell_size: Optional[float] = None,
        *,
        time_per_cell: Optional[float] = None,
        door_labels: Optional[Mapping[str, str]] = None,
    ):
        """Build the obstacle model for ``map_data``.

        Args:
            map_data: Raw map payload or a parsed InteriorMap/ExteriorMap
            cell_size: Pixels per grid cell. Defaults to Config.CELL_SIZE
            time_per_cell: Time units per step for path estimates.
                Defaults to Config.TIME_PER_CELL
            door_labels: Door tag → display name. Defaults to Config.DOOR_LABELS
        """
        self.map = parse_map(map_data)
        self.cell_size = cell_size if cell_size and cell_size > 0 else Config.CELL_SIZE
        self.time_per_cell = Config.TIME_PER_CELL if time_per_cell is None else time_per_cell
        self.door_labels: Dict[str, str] = dict(
            Config.DOOR_LABELS if door_labels is None else door_labels
        )
        self.converter = CoordinateConverter(self.cell_size)
        self.obstacles: ObstacleModel = build_obstacle_model(
            self.map, self.converter, door_labels=self.door_labels,
        )

    def __repr__(self) -> str:
        return (
            f"GridSystem(id={self.map.id!r}, type={self.map.type!r}, "
            f"grid={self.obstacles.columns}x{self.obstacles.rows}, "
            f"blocked={len(self.obstacles.blocked)})"
        )

    # ------------------------------------------------------------------
    # Coordinates
    # ------------------------------------------------------------------

    def pixel_to_grid(self, x: float, y: float) -> Position:
        """Cell containing the pixel point, expressed at the cell centre."""
        return self.converter.pixel_to_grid(x, y)

    def position_at(self, x: float, y: float) -> Position:
        """Position for an actor standing at exact pixel ``(x, y)``."""
        gx, gy = self.converter.to_cell(x, y)
        return Position(x=x, y=y, grid_x=gx, grid_y=gy)

    def is_walkable(self, grid_x: int, grid_y: int) -> bool:
        return self.obstacles.is_walkable(grid_x, grid_y)

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def validate_move(
        self, position: Position, direction: str, distance: Optional[float] = None,
    ) -> MoveValidation:
        """Check a directional move of ``distance`` pixels (one cell by default)."""
        return validate_move(self.obstacles, self.converter, position, direction, distance)

    def get_movement_options(self, position: Position) -> Dict[str, MovementOption]:
        """Single-cell verdicts for north, south, east and west."""
        return movement_options(self.obstacles, self.converter, position)

    def find_path(self, from_position: Position, to_position: Position) -> PathResult:
        return find_path(
            self.obstacles,
            self.converter,
            from_position,
            to_position,
            time_per_cell=self.time_per_cell,
        )

    # ------------------------------------------------------------------
    # Spatial queries
    # ------------------------------------------------------------------

    def get_nearby_locations(
        self, position: Position, radius: Optional[int] = None,
    ) -> List[NearbyLocation]:
        if radius is None:
            radius = Config.NEARBY_RADIUS
        return nearby_locations(self.map, self.converter, position, radius, self.door_labels)

    def get_current_room(self, position: Position) -> Optional[RoomInfo]:
        return current_room(self.map, position)

    def describe_surroundings(self, position: Position, radius: Optional[int] = None) -> str:
        """Nearby locations and movement options as a plain-text block."""
        return format_spatial_context(
            position,
            self.get_nearby_locations(position, radius),
            self.get_movement_options(position),
        )

    def render_window(self, position: Position, radius: int = 3) -> str:
        """ASCII view of the obstacle grid around ``position`` (debugging aid)."""
        return render_ascii_window(self.obstacles, position.cell, radius=radius)
