"""Tests for A* pathfinding."""

import math

from wayfinder import GridSystem
from wayfinder.environment import astar


def _cells(result):
    return [(p.grid_x, p.grid_y) for p in result.path]


def test_open_room_path_length_equals_manhattan_distance(open_hall):
    system = GridSystem(open_hall)
    start = system.pixel_to_grid(30, 30)     # (1, 1)
    goal = system.pixel_to_grid(170, 110)    # (8, 5)

    result = system.find_path(start, goal)
    assert result.valid is True
    assert result.distance == 7 + 4
    assert len(result.path) == result.distance + 1
    assert _cells(result)[0] == (1, 1)
    assert _cells(result)[-1] == (8, 5)
    assert result.estimated_time == math.ceil(11 * 0.5)

    # Every step moves exactly one cell along one axis
    for (ax, ay), (bx, by) in zip(_cells(result), _cells(result)[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1


def test_path_detours_around_wall():
    # 10x10 grid, wall down column 5 from row 0 to row 8; only row 9 is open
    system = GridSystem({
        "type": "exterior",
        "bounds": {"width": 200, "height": 200},
        "walls": [{"x1": 100, "y1": 0, "x2": 100, "y2": 160}],
    })
    result = system.find_path(system.pixel_to_grid(50, 50), system.pixel_to_grid(170, 50))

    assert result.valid is True
    assert result.distance == 20
    assert (5, 9) in _cells(result)
    assert not any(cell in system.obstacles.blocked for cell in _cells(result))


def test_unreachable_goal_returns_empty_path():
    system = GridSystem({
        "type": "exterior",
        "bounds": {"width": 200, "height": 200},
        "walls": [{"x1": 100, "y1": 0, "x2": 100, "y2": 199}],
    })
    result = system.find_path(system.pixel_to_grid(50, 50), system.pixel_to_grid(170, 50))
    assert result.valid is False
    assert result.path == []
    assert result.reason == "no path found"


def test_blocked_or_out_of_bounds_endpoints_fail_gracefully(town_square):
    system = GridSystem(town_square)
    start = system.position_at(190, 210)

    inside_building = system.position_at(250, 250)
    assert system.find_path(start, inside_building).valid is False
    assert system.find_path(inside_building, inside_building).valid is False

    off_map = system.position_at(1005, 100)
    assert system.find_path(start, off_map).valid is False
    assert system.find_path(off_map, start).path == []


def test_same_cell_is_a_zero_length_path(town_square):
    system = GridSystem(town_square)
    here = system.position_at(190, 210)
    result = system.find_path(here, here)
    assert result.valid is True
    assert result.distance == 0
    assert result.estimated_time == 0
    assert _cells(result) == [(9, 10)]


def test_estimated_time_uses_configured_rate(open_hall):
    system = GridSystem(open_hall, time_per_cell=2)
    result = system.find_path(system.pixel_to_grid(10, 10), system.pixel_to_grid(70, 10))
    assert result.distance == 3
    assert result.estimated_time == 6


def test_tie_break_prefers_east_first():
    system = GridSystem({"type": "exterior", "bounds": {"width": 200, "height": 200}})
    path = astar(system.obstacles, (0, 0), (2, 2))
    assert path == [(0, 0), (1, 0), (2, 0), (2, 1), (2, 2)]
    # Deterministic across calls
    assert astar(system.obstacles, (0, 0), (2, 2)) == path


def test_interior_path_uses_door(shop_interior):
    # Second room north of the first, connected only through the door
    shop_interior["bounds"] = {"width": 400, "height": 400}
    shop_interior["rooms"].append(
        {"id": "laboratory", "name": "Laboratory",
         "polygon": [[100, 0], [300, 0], [300, 80], [100, 80]]},
    )
    system = GridSystem(shop_interior)
    result = system.find_path(system.pixel_to_grid(110, 290), system.pixel_to_grid(110, 10))

    assert result.valid is True
    cells = _cells(result)
    assert (9, 4) in cells or (10, 4) in cells
