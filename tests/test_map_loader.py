"""Tests for loading map descriptions from JSON files."""

import json

import pytest

from wayfinder import Config, GridSystemRegistry, MapLoader, load_map


def test_load_from_custom_directory(tmp_path):
    (tmp_path / "yard.json").write_text(json.dumps({
        "id": "stable-yard",
        "type": "exterior",
        "bounds": {"width": 200, "height": 200},
        "buildings": [{"name": "Stable", "x": 0, "y": 0, "width": 40, "height": 40}],
    }))

    loader = MapLoader(tmp_path)
    map_id, parsed = loader.load("yard")
    assert map_id == "stable-yard"
    assert parsed.type == "exterior"
    assert loader.available() == ["yard"]


def test_map_id_falls_back_to_file_stem(tmp_path):
    path = tmp_path / "cellar.json"
    path.write_text(json.dumps({"type": "interior", "rooms": []}))
    map_id, parsed = load_map(path)
    assert map_id == "cellar"
    assert parsed.type == "interior"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        MapLoader(tmp_path).load("nope")


def test_non_object_payload_raises(tmp_path):
    (tmp_path / "list.json").write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        MapLoader(tmp_path).load("list")


def test_bundled_maps_build_grid_systems():
    loader = MapLoader(Config.PROJECT_ROOT / "maps")
    registry = GridSystemRegistry()

    map_id, botica = loader.load("botica_interior")
    system = registry.get_system(map_id, botica)
    assert map_id == "botica-interior"

    # Shop floor to laboratory goes through the lab door
    shop = system.position_at(700, 500)
    lab = system.position_at(700, 200)
    assert system.get_current_room(shop).name == "Shop Floor"
    assert system.get_current_room(lab).name == "Laboratory"
    assert system.find_path(shop, lab).valid is True

    # The counter sits two rows north of the actor
    customer = system.position_at(500, 560)
    assert system.validate_move(customer, "north").valid is True
    leaning = system.validate_move(customer, "north", 60)
    assert leaning.valid is False
    assert leaning.reason == "the counter blocks the path"

    map_id, plaza = loader.load("plaza_exterior")
    system = registry.get_system(map_id, plaza)
    blocked = system.validate_move(system.position_at(650, 330), "north")
    assert blocked.valid is False
    assert blocked.reason == "Botica de la Amargura blocks the path"
