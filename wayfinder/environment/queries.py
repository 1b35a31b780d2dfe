"""Proximity and containment queries for narrative context."""

from __future__ import annotations

from typing import List, Mapping, Optional, Tuple, Union

from wayfinder.schemas import NearbyLocation, Position, RoomInfo

from .coordinates import CoordinateConverter
from .geometry import point_in_polygon, polygon_centroid
from .schemas import BuildingSpec, ExteriorMap, InteriorMap


def direction_label(from_x: int, from_y: int, to_x: int, to_y: int) -> str:
    """Cardinal direction from one cell to another along the dominant axis.

    Ties (including the same cell) resolve to north/south.
    """

    dx = to_x - from_x
    dy = to_y - from_y
    if abs(dx) > abs(dy):
        return "east" if dx > 0 else "west"
    return "south" if dy > 0 else "north"


def current_room(
    map_data: Union[InteriorMap, ExteriorMap], position: Position,
) -> Optional[RoomInfo]:
    """Room whose polygon contains the position's pixel point (interior maps only)."""

    if not isinstance(map_data, InteriorMap):
        return None
    for room in map_data.rooms:
        if point_in_polygon(position.x, position.y, room.polygon):
            return RoomInfo(id=room.id, name=room.name, type=room.type)
    return None


def _building_anchor(building: BuildingSpec) -> Optional[Tuple[float, float]]:
    if building.has_rect:
        return building.x + building.width / 2, building.y + building.height / 2
    return polygon_centroid(building.polygon)


def nearby_locations(
    map_data: Union[InteriorMap, ExteriorMap],
    converter: CoordinateConverter,
    position: Position,
    radius: int,
    door_labels: Mapping[str, str],
) -> List[NearbyLocation]:
    """Buildings, rooms and doors within ``radius`` grid cells (Manhattan).

    Each entity is represented by one anchor point: a rectangle's centre, a
    polygon's centroid, or a door's position. Results are sorted by distance;
    entities at equal distance keep map order (buildings, rooms, doors).
    """

    gx, gy = position.grid_x, position.grid_y
    candidates: List[Tuple[Tuple[float, float], dict]] = []

    for building in getattr(map_data, "buildings", []):
        anchor = _building_anchor(building)
        if anchor is not None:
            candidates.append((anchor, {"name": building.label, "type": building.type}))

    for room in getattr(map_data, "rooms", []):
        anchor = polygon_centroid(room.polygon)
        if anchor is not None:
            candidates.append((anchor, {"name": room.label, "type": "room"}))

    for door in map_data.doors:
        anchor = door.center()
        if anchor is None:
            continue
        candidates.append((
            anchor,
            {
                "name": door_labels.get(door.tag, door.tag),
                "type": "door",
                "locked": door.is_locked,
            },
        ))

    nearby: List[NearbyLocation] = []
    for (ax, ay), fields in candidates:
        tx, ty = converter.to_cell(ax, ay)
        distance = abs(gx - tx) + abs(gy - ty)
        if distance <= radius:
            nearby.append(
                NearbyLocation(
                    distance=distance,
                    direction=direction_label(gx, gy, tx, ty),
                    **fields,
                )
            )

    nearby.sort(key=lambda entry: entry.distance)
    return nearby
