"""Plain-text views of the grid for prompts and debugging."""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from wayfinder.schemas import MovementOption, NearbyLocation, Position

from .obstacles import ObstacleModel

_DEFAULT_CELL_SYMBOLS: Dict[str, str] = {
    "actor": "@ ",
    "blocked": "██",
    "open": "· ",
    "outside": "  ",
}


def render_ascii_window(
    model: ObstacleModel,
    center: Tuple[int, int],
    *,
    radius: int,
    symbols: Optional[Dict[str, str]] = None,
) -> str:
    """Render the cells within ``radius`` of ``center``, north at the top.

    Cells beyond the map edge are left blank so the boundary is visible.
    """

    radius = max(int(radius), 0)
    mapping = {**_DEFAULT_CELL_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    cx, cy = center
    lines: List[str] = []
    for y in range(cy - radius, cy + radius + 1):
        row: List[str] = []
        for x in range(cx - radius, cx + radius + 1):
            if (x, y) == (cx, cy):
                row.append(mapping["actor"])
            elif not model.in_bounds(x, y):
                row.append(mapping["outside"])
            elif (x, y) in model.blocked:
                row.append(mapping["blocked"])
            else:
                row.append(mapping["open"])
        lines.append("".join(row).rstrip())
    return "\n".join(lines)


def format_spatial_context(
    position: Position,
    nearby: Iterable[NearbyLocation],
    options: Mapping[str, MovementOption],
) -> str:
    """Summarise where the actor stands for the narrative layer.

    Lists the grid position, nearby locations with step counts and the
    verdict for each cardinal move. Grid coordinates are included for the
    model's bookkeeping; wording of the prose is left to the caller.
    """

    lines = [f"Player Position: Grid ({position.grid_x}, {position.grid_y})"]

    entries = list(nearby)
    if entries:
        lines.append("")
        lines.append("Nearby Locations:")
        for entry in entries:
            suffix = f" [{entry.type}]" if entry.type else ""
            if entry.locked:
                suffix += " (locked)"
            lines.append(f"- {entry.name} ({entry.distance} steps to the {entry.direction}){suffix}")

    lines.append("")
    lines.append("Movement Options:")
    for direction, option in options.items():
        status = "✓ CLEAR" if option.valid else f"✗ BLOCKED ({option.reason})"
        lines.append(f"- {direction.upper()}: {status}")

    return "\n".join(lines)
