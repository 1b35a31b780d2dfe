"""Directional move validation against an obstacle model."""

from __future__ import annotations

import math
from typing import Dict, Optional, Tuple

from wayfinder.schemas import MoveValidation, MovementOption, Position

from .coordinates import CoordinateConverter
from .obstacles import ObstacleModel

# Unit vectors in grid space; y grows southwards like pixel space.
DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    "north": (0, -1),
    "south": (0, 1),
    "east": (1, 0),
    "west": (-1, 0),
}

DIRECTION_ALIASES: Dict[str, str] = {
    "n": "north",
    "s": "south",
    "e": "east",
    "w": "west",
}

CLEAR_REASON = "path is clear"


def normalize_direction(direction: str) -> Optional[str]:
    """Return the canonical direction name, or None when unrecognised."""

    if not isinstance(direction, str):
        return None
    key = direction.strip().lower()
    key = DIRECTION_ALIASES.get(key, key)
    return key if key in DIRECTION_VECTORS else None


def validate_move(
    model: ObstacleModel,
    converter: CoordinateConverter,
    position: Position,
    direction: str,
    pixel_distance: Optional[float] = None,
) -> MoveValidation:
    """Validate moving ``pixel_distance`` pixels in ``direction`` from ``position``.

    Every intermediate cell is checked, so a long step cannot hop over an
    obstacle. The first blocked cell rejects the whole move and its reason is
    reported; the position is left unchanged.

    Args:
        model: Obstacle model of the map the position belongs to
        converter: Converter built with the model's cell size
        position: Current position; its grid coordinates are authoritative
        direction: north/south/east/west or n/s/e/w, case-insensitive
        pixel_distance: Distance in pixels, defaults to one cell

    Returns:
        MoveValidation with ``new_position`` on success or ``current_position``
        on rejection
    """

    heading = normalize_direction(direction)
    if heading is None:
        return MoveValidation(
            valid=False,
            reason=f"invalid direction: {direction}",
            current_position=position,
        )

    if pixel_distance is None:
        pixel_distance = converter.cell_size
    if not math.isfinite(pixel_distance):
        return MoveValidation(
            valid=False,
            reason=f"invalid distance: {pixel_distance}",
            current_position=position,
        )
    # Zero or negative distances take no steps and leave the actor where it is.
    cells_to_move = max(0, math.ceil(pixel_distance / converter.cell_size))

    dx, dy = DIRECTION_VECTORS[heading]
    # Stepping from grid coordinates, not pixels, keeps repeated moves drift-free.
    gx, gy = position.grid_x, position.grid_y
    for step in range(1, cells_to_move + 1):
        cx, cy = gx + dx * step, gy + dy * step
        if not model.is_walkable(cx, cy):
            return MoveValidation(
                valid=False,
                reason=model.describe(cx, cy),
                current_position=position,
            )

    return MoveValidation(
        valid=True,
        reason=CLEAR_REASON,
        new_position=converter.cell_center(gx + dx * cells_to_move, gy + dy * cells_to_move),
    )


def movement_options(
    model: ObstacleModel,
    converter: CoordinateConverter,
    position: Position,
) -> Dict[str, MovementOption]:
    """Single-cell verdict for each cardinal direction."""

    options: Dict[str, MovementOption] = {}
    for heading in DIRECTION_VECTORS:
        verdict = validate_move(model, converter, position, heading)
        options[heading] = MovementOption(valid=verdict.valid, reason=verdict.reason)
    return options
