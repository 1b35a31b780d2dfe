"""Tests for directional move validation."""

import math

from wayfinder import GridSystem


def test_exterior_scenario_blocked_east_clear_north(town_square):
    system = GridSystem(town_square)
    actor = system.position_at(190, 210)
    assert (actor.grid_x, actor.grid_y) == (9, 10)

    east = system.validate_move(actor, "east", 20)
    assert east.valid is False
    assert "Town Hall" in east.reason
    assert east.new_position is None
    assert east.current_position == actor

    north = system.validate_move(actor, "north", 20)
    assert north.valid is True
    assert north.reason == "path is clear"
    assert (north.new_position.grid_x, north.new_position.grid_y) == (9, 9)
    assert (north.new_position.x, north.new_position.y) == (190, 190)


def test_long_move_cannot_jump_an_obstacle():
    system = GridSystem({
        "type": "exterior",
        "bounds": {"width": 400, "height": 400},
        "furniture": [{"type": "crate", "x": 140, "y": 100, "width": 10, "height": 10}],
    })
    actor = system.position_at(110, 110)  # grid (5, 5); crate sits on (7, 5)

    verdict = system.validate_move(actor, "east", 60)
    assert verdict.valid is False
    assert verdict.reason == "the crate blocks the path"
    assert verdict.current_position == actor
    assert verdict.new_position is None

    # One cell is fine, two cells reaches the crate
    assert system.validate_move(actor, "east", 20).valid is True
    assert system.validate_move(actor, "east", 40).valid is False


def test_partial_cells_round_up():
    system = GridSystem({"type": "exterior", "bounds": {"width": 400, "height": 400}})
    actor = system.position_at(110, 110)
    verdict = system.validate_move(actor, "south", 50)
    assert verdict.valid is True
    assert verdict.new_position.grid_y == 5 + math.ceil(50 / 20)


def test_default_distance_moves_one_cell():
    system = GridSystem({"type": "exterior", "bounds": {"width": 400, "height": 400}})
    actor = system.position_at(110, 110)
    assert system.validate_move(actor, "west").new_position.grid_x == 4


def test_zero_or_negative_distance_stays_put():
    system = GridSystem({
        "type": "exterior",
        "bounds": {"width": 400, "height": 400},
        "furniture": [{"type": "crate", "x": 80, "y": 100, "width": 10, "height": 10}],
    })
    actor = system.position_at(110, 110)  # grid (5, 5); crate on (4, 5)
    assert system.validate_move(actor, "west").valid is False

    for distance in (0, -15, -100):
        verdict = system.validate_move(actor, "west", distance)
        assert verdict.valid is True
        assert verdict.reason == "path is clear"
        assert (verdict.new_position.grid_x, verdict.new_position.grid_y) == (5, 5)
        assert (verdict.new_position.x, verdict.new_position.y) == (110, 110)


def test_non_finite_distance_is_rejected():
    system = GridSystem({"type": "exterior", "bounds": {"width": 400, "height": 400}})
    actor = system.position_at(110, 110)
    verdict = system.validate_move(actor, "west", float("inf"))
    assert verdict.valid is False
    assert verdict.reason.startswith("invalid distance")


def test_direction_aliases_and_invalid_direction(town_square):
    system = GridSystem(town_square)
    actor = system.position_at(190, 210)

    assert system.validate_move(actor, "N").valid is True
    assert system.validate_move(actor, " West ").valid is True
    assert system.validate_move(actor, "s").new_position.grid_y == 11

    bad = system.validate_move(actor, "up")
    assert bad.valid is False
    assert bad.reason == "invalid direction: up"
    assert bad.current_position == actor


def test_moving_off_the_map_reports_boundary(town_square):
    system = GridSystem(town_square)
    corner = system.position_at(5, 5)
    verdict = system.validate_move(corner, "west")
    assert verdict.valid is False
    assert verdict.reason == "the map boundary blocks the path"


def test_moves_step_from_grid_coordinates():
    system = GridSystem({"type": "exterior", "bounds": {"width": 400, "height": 400}})
    # Pixel point near the far edge of cell (5, 5); the move still lands on cell centres
    actor = system.position_at(119.9, 119.9)
    verdict = system.validate_move(actor, "east", 20)
    assert verdict.new_position.grid_x == 6
    assert verdict.new_position.x == 130


def test_interior_door_lets_actor_leave_the_room(shop_interior):
    system = GridSystem(shop_interior)
    actor = system.position_at(210, 110)  # top row of the room, under the door

    through = system.validate_move(actor, "north")
    assert through.valid is True
    assert (through.new_position.grid_x, through.new_position.grid_y) == (10, 4)

    # Beyond the one-cell opening is wall again
    beyond = system.validate_move(through.new_position, "north")
    assert beyond.valid is False
    assert beyond.reason == "a wall blocks the path"

    # Without the door the same step hits the wall
    sealed = GridSystem({**shop_interior, "doors": []})
    assert sealed.validate_move(actor, "north").valid is False


def test_movement_options_cover_all_directions(town_square):
    system = GridSystem(town_square)
    options = system.get_movement_options(system.position_at(190, 210))

    assert list(options) == ["north", "south", "east", "west"]
    assert options["east"].valid is False
    assert options["east"].reason == "Town Hall blocks the path"
    assert all(options[d].valid for d in ("north", "south", "west"))
