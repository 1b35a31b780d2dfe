"""Four-directional A* search over an obstacle model."""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Dict, List, Optional, Tuple

from wayfinder.schemas import PathResult, Position

from .coordinates import CoordinateConverter
from .obstacles import ObstacleModel

Cell = Tuple[int, int]

# Expansion order doubles as the tie-break among equal (f, h) entries.
NEIGHBOR_OFFSETS: Tuple[Cell, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

NO_PATH_REASON = "no path found"


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def astar(model: ObstacleModel, start: Cell, goal: Cell) -> Optional[List[Cell]]:
    """Return the cells of a shortest path from start to goal, inclusive.

    Manhattan distance is admissible and consistent for unit-cost 4-way
    movement, so the first time the goal is popped its path is optimal.
    Heap entries are ordered by ``(f, h, insertion)``: among equal estimates
    the node closer to the goal wins, then the earlier-discovered one.
    Returns None if either endpoint is blocked or no route exists.
    """

    if not model.is_walkable(*start) or not model.is_walkable(*goal):
        return None
    if start == goal:
        return [start]

    counter = itertools.count()
    h0 = manhattan(start, goal)
    open_heap: List[Tuple[int, int, int, Cell]] = [(h0, h0, next(counter), start)]
    came_from: Dict[Cell, Cell] = {}
    g_score: Dict[Cell, int] = {start: 0}
    closed = set()

    while open_heap:
        _, _, _, current = heapq.heappop(open_heap)
        if current in closed:
            # Stale entry superseded by a cheaper push
            continue
        if current == goal:
            return _reconstruct(came_from, current)
        closed.add(current)

        base = g_score[current]
        for ox, oy in NEIGHBOR_OFFSETS:
            neighbor = (current[0] + ox, current[1] + oy)
            if neighbor in closed or not model.is_walkable(*neighbor):
                continue
            tentative = base + 1
            if tentative < g_score.get(neighbor, math.inf):
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                h = manhattan(neighbor, goal)
                heapq.heappush(open_heap, (tentative + h, h, next(counter), neighbor))

    return None


def _reconstruct(came_from: Dict[Cell, Cell], current: Cell) -> List[Cell]:
    path = [current]
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    return path


def find_path(
    model: ObstacleModel,
    converter: CoordinateConverter,
    from_position: Position,
    to_position: Position,
    *,
    time_per_cell: float,
) -> PathResult:
    """Shortest walkable route between two positions.

    Endpoints are resolved from pixel coordinates. Unreachable, blocked or
    out-of-bounds endpoints produce an invalid result with an empty path.
    """

    start = converter.to_cell(from_position.x, from_position.y)
    goal = converter.to_cell(to_position.x, to_position.y)

    cells = astar(model, start, goal)
    if not cells:
        return PathResult(valid=False, reason=NO_PATH_REASON)

    distance = len(cells) - 1
    return PathResult(
        valid=True,
        path=[converter.cell_center(gx, gy) for gx, gy in cells],
        distance=distance,
        estimated_time=math.ceil(distance * time_per_cell),
    )
