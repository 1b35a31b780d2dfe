"""Obstacle model construction.

Interior maps are described by their rooms, so they are built by inversion:
every cell starts blocked, rooms and unlocked doorways are carved out. Exterior
maps start open and their buildings are stamped in. Explicit wall segments and
furniture block on both kinds.

Besides the blocked set the model keeps which feature claimed each cell, so a
rejected move can name its obstacle without re-rasterizing the map.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import singledispatch
from typing import Dict, FrozenSet, Mapping, Set, Tuple, Union

from .coordinates import CoordinateConverter
from .geometry import line_cells, polygon_cells, rect_cells, span_cells
from .schemas import DoorSpec, ExteriorMap, InteriorMap

Cell = Tuple[int, int]

DEFAULT_BLOCK_REASON = "an obstacle blocks the path"
BOUNDARY_REASON = "the map boundary blocks the path"
WALL_REASON = "a wall blocks the path"


@dataclass(frozen=True)
class ObstacleModel:
    """Immutable walkability model for one map.

    A cell is walkable iff ``0 <= x < columns``, ``0 <= y < rows`` and it is
    not in ``blocked``.
    """

    columns: int
    rows: int
    blocked: FrozenSet[Cell]
    interior: bool = False
    room_cells: FrozenSet[Cell] = frozenset()
    building_cells: Mapping[Cell, str] = field(default_factory=dict)
    furniture_cells: Mapping[Cell, str] = field(default_factory=dict)
    wall_cells: FrozenSet[Cell] = frozenset()
    locked_door_cells: Mapping[Cell, str] = field(default_factory=dict)

    def in_bounds(self, grid_x: int, grid_y: int) -> bool:
        return 0 <= grid_x < self.columns and 0 <= grid_y < self.rows

    def is_walkable(self, grid_x: int, grid_y: int) -> bool:
        return self.in_bounds(grid_x, grid_y) and (grid_x, grid_y) not in self.blocked

    def describe(self, grid_x: int, grid_y: int) -> str:
        """Narrative reason for a blocked cell.

        Preference order: building, furniture, wall, locked door, map boundary.
        """

        cell = (grid_x, grid_y)
        if cell in self.building_cells:
            return f"{self.building_cells[cell]} blocks the path"
        if cell in self.furniture_cells:
            return f"the {self.furniture_cells[cell]} blocks the path"
        if cell in self.wall_cells:
            return WALL_REASON
        if cell in self.locked_door_cells:
            return f"the door to {self.locked_door_cells[cell]} is locked"
        if not self.in_bounds(grid_x, grid_y):
            return BOUNDARY_REASON
        return DEFAULT_BLOCK_REASON


@dataclass
class _Draft:
    """Mutable working state while a model is being assembled."""

    cell_size: float
    columns: int
    rows: int
    blocked: Set[Cell] = field(default_factory=set)
    room_cells: Set[Cell] = field(default_factory=set)
    building_cells: Dict[Cell, str] = field(default_factory=dict)
    furniture_cells: Dict[Cell, str] = field(default_factory=dict)
    wall_cells: Set[Cell] = field(default_factory=set)
    locked_door_cells: Dict[Cell, str] = field(default_factory=dict)

    def all_cells(self) -> Set[Cell]:
        return {(gx, gy) for gx in range(self.columns) for gy in range(self.rows)}


def door_cells(door: DoorSpec, cell_size: float) -> Set[Cell]:
    """Cells of a door opening: door width by one cell, centred on the door."""

    center = door.center()
    if center is None:
        return set()
    cx, cy = center
    width = door.width if door.width and door.width > 0 else cell_size
    if door.is_vertical:
        return span_cells(cx - cell_size / 2, cy - width / 2, cell_size, width, cell_size)
    return span_cells(cx - width / 2, cy - cell_size / 2, width, cell_size, cell_size)


def _stamp_walls(map_data: Union[InteriorMap, ExteriorMap], draft: _Draft) -> None:
    for wall in map_data.walls:
        cells = line_cells(wall.x1, wall.y1, wall.x2, wall.y2, draft.cell_size)
        draft.blocked.update(cells)
        draft.wall_cells.update(cells)


@singledispatch
def _apply_layout(map_data, draft: _Draft, door_labels: Mapping[str, str]) -> None:
    raise TypeError(f"Unsupported map description: {type(map_data).__name__}")


@_apply_layout.register
def _(map_data: InteriorMap, draft: _Draft, door_labels: Mapping[str, str]) -> None:
    # Everything is wall until a room or doorway says otherwise.
    everything = draft.all_cells()
    draft.blocked = set(everything)

    for room in map_data.rooms:
        draft.room_cells |= polygon_cells(room.polygon, draft.cell_size)
    draft.blocked -= draft.room_cells

    _stamp_walls(map_data, draft)

    opened: Set[Cell] = set()
    for door in map_data.doors:
        cells = door_cells(door, draft.cell_size)
        if door.is_locked:
            label = door_labels.get(door.tag, door.tag)
            for cell in cells:
                draft.locked_door_cells.setdefault(cell, label)
            continue
        opened |= cells
    draft.blocked -= opened
    draft.wall_cells -= opened

    # Inverted cells read as wall unless a locked door accounts for them.
    implicit_walls = everything - draft.room_cells - opened - set(draft.locked_door_cells)
    draft.wall_cells |= implicit_walls


@_apply_layout.register
def _(map_data: ExteriorMap, draft: _Draft, door_labels: Mapping[str, str]) -> None:
    for building in map_data.buildings:
        if len(building.polygon) >= 3:
            cells = polygon_cells(building.polygon, draft.cell_size)
        elif building.has_rect:
            cells = rect_cells(
                building.x, building.y, building.width, building.height, draft.cell_size,
            )
        else:
            continue
        draft.blocked |= cells
        for cell in cells:
            draft.building_cells.setdefault(cell, building.label)

    _stamp_walls(map_data, draft)

    for door in map_data.doors:
        if not door.is_locked:
            continue
        label = door_labels.get(door.tag, door.tag)
        for cell in door_cells(door, draft.cell_size):
            draft.locked_door_cells.setdefault(cell, label)


def build_obstacle_model(
    map_data: Union[InteriorMap, ExteriorMap],
    converter: CoordinateConverter,
    *,
    door_labels: Mapping[str, str] | None = None,
) -> ObstacleModel:
    """Derive the obstacle model for a parsed map description."""

    cell_size = converter.cell_size
    draft = _Draft(
        cell_size=cell_size,
        columns=max(0, math.ceil(map_data.bounds.width / cell_size)),
        rows=max(0, math.ceil(map_data.bounds.height / cell_size)),
    )
    _apply_layout(map_data, draft, door_labels or {})

    for item in map_data.furniture:
        x, y, width, height = item.as_rect()
        cells = rect_cells(x, y, width, height, cell_size)
        draft.blocked |= cells
        for cell in cells:
            draft.furniture_cells.setdefault(cell, item.label)

    return ObstacleModel(
        columns=draft.columns,
        rows=draft.rows,
        blocked=frozenset(draft.blocked),
        interior=isinstance(map_data, InteriorMap),
        room_cells=frozenset(draft.room_cells),
        building_cells=dict(draft.building_cells),
        furniture_cells=dict(draft.furniture_cells),
        wall_cells=frozenset(draft.wall_cells),
        locked_door_cells=dict(draft.locked_door_cells),
    )
