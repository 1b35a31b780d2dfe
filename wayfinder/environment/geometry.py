"""Shared rasterization helpers for map geometry.

Rooms, buildings, furniture, doors and walls all reach the grid through the
functions in this module so containment semantics stay identical everywhere.
Polygons are sequences of ``(x, y)`` pixel vertices, implicitly closed.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Set, Tuple

Point = Tuple[float, float]
Cell = Tuple[int, int]


def point_in_polygon(x: float, y: float, polygon: Sequence[Sequence[float]]) -> bool:
    """Horizontal ray-casting parity test.

    Casts a ray from ``(x, y)`` towards +x and counts edge crossings; an odd
    count means the point is inside. Polygons with fewer than three vertices
    contain nothing.
    """

    if len(polygon) < 3:
        return False

    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i][0], polygon[i][1]
        xj, yj = polygon[j][0], polygon[j][1]
        # Edge straddles the ray's y; the half-open comparison counts shared
        # vertices exactly once.
        if (yi > y) != (yj > y):
            x_cross = (xj - xi) * (y - yi) / (yj - yi) + xi
            if x < x_cross:
                inside = not inside
        j = i
    return inside


def polygon_cells(polygon: Sequence[Sequence[float]], cell_size: float) -> Set[Cell]:
    """Return cells whose centre lies inside ``polygon``."""

    if len(polygon) < 3:
        return set()

    xs = [p[0] for p in polygon]
    ys = [p[1] for p in polygon]
    min_gx = math.floor(min(xs) / cell_size)
    max_gx = math.floor(max(xs) / cell_size)
    min_gy = math.floor(min(ys) / cell_size)
    max_gy = math.floor(max(ys) / cell_size)

    half = cell_size / 2
    cells: Set[Cell] = set()
    for gx in range(min_gx, max_gx + 1):
        for gy in range(min_gy, max_gy + 1):
            if point_in_polygon(gx * cell_size + half, gy * cell_size + half, polygon):
                cells.add((gx, gy))
    return cells


def rect_cells(x: float, y: float, width: float, height: float, cell_size: float) -> Set[Cell]:
    """Return cells touched by a rectangle, far edges inclusive.

    A 100px building starting on a grid line therefore covers six columns at
    20px per cell; obstacles err on the side of blocking.
    """

    start_x = math.floor(x / cell_size)
    start_y = math.floor(y / cell_size)
    end_x = math.floor((x + width) / cell_size)
    end_y = math.floor((y + height) / cell_size)
    return {
        (gx, gy)
        for gx in range(start_x, end_x + 1)
        for gy in range(start_y, end_y + 1)
    }


def span_cells(x: float, y: float, width: float, height: float, cell_size: float) -> Set[Cell]:
    """Return cells overlapped by the half-open rectangle ``[x, x+w) x [y, y+h)``.

    Used for openings, where a 40px door on a 20px grid must free exactly two
    columns rather than three.
    """

    start_x = math.floor(x / cell_size)
    start_y = math.floor(y / cell_size)
    end_x = max(start_x, math.ceil((x + width) / cell_size) - 1)
    end_y = max(start_y, math.ceil((y + height) / cell_size) - 1)
    return {
        (gx, gy)
        for gx in range(start_x, end_x + 1)
        for gy in range(start_y, end_y + 1)
    }


def line_cells(x1: float, y1: float, x2: float, y2: float, cell_size: float) -> List[Cell]:
    """Cells along a segment using Bresenham's line algorithm."""

    cx = math.floor(x1 / cell_size)
    cy = math.floor(y1 / cell_size)
    end_x = math.floor(x2 / cell_size)
    end_y = math.floor(y2 / cell_size)

    dx = abs(end_x - cx)
    dy = abs(end_y - cy)
    sx = 1 if cx < end_x else -1
    sy = 1 if cy < end_y else -1
    err = dx - dy

    cells: List[Cell] = []
    while True:
        cells.append((cx, cy))
        if cx == end_x and cy == end_y:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            cx += sx
        if e2 < dx:
            err += dx
            cy += sy
    return cells


def polygon_centroid(polygon: Sequence[Sequence[float]]) -> Optional[Point]:
    """Area centroid of a simple polygon.

    Falls back to the vertex mean for degenerate (zero-area) input and returns
    None for an empty polygon.
    """

    if not polygon:
        return None

    n = len(polygon)
    area2 = 0.0
    cx = 0.0
    cy = 0.0
    for i in range(n):
        x0, y0 = polygon[i][0], polygon[i][1]
        x1, y1 = polygon[(i + 1) % n][0], polygon[(i + 1) % n][1]
        cross = x0 * y1 - x1 * y0
        area2 += cross
        cx += (x0 + x1) * cross
        cy += (y0 + y1) * cross

    if abs(area2) < 1e-9:
        return (
            sum(p[0] for p in polygon) / n,
            sum(p[1] for p in polygon) / n,
        )
    return cx / (3 * area2), cy / (3 * area2)
