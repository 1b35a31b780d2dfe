"""Tests for text renderings of the grid."""

from wayfinder import GridSystem


def test_render_window_marks_actor_and_obstacles(town_square):
    system = GridSystem(town_square)
    window = system.render_window(system.position_at(190, 210), radius=1)
    lines = window.split("\n")

    assert len(lines) == 3
    assert lines[0] == "· · ·"
    assert lines[1] == "· @ ██"
    assert lines[2] == "· · ██"


def test_render_window_leaves_off_map_cells_blank(town_square):
    system = GridSystem(town_square)
    window = system.render_window(system.position_at(5, 5), radius=1)
    lines = window.split("\n")
    assert lines[0] == ""
    assert lines[1] == "  @ ·"


def test_describe_surroundings_lists_nearby_and_options(town_square):
    system = GridSystem(town_square)
    text = system.describe_surroundings(system.position_at(190, 210), radius=5)

    assert "Player Position: Grid (9, 10)" in text
    assert "- Town Hall (5 steps to the east) [government]" in text
    assert "- EAST: ✗ BLOCKED (Town Hall blocks the path)" in text
    assert "- NORTH: ✓ CLEAR" in text


def test_describe_surroundings_without_neighbours(town_square):
    system = GridSystem(town_square)
    text = system.describe_surroundings(system.position_at(810, 610))
    assert "Nearby Locations" not in text
    assert "Movement Options:" in text
