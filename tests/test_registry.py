"""Tests for GridSystemRegistry caching."""

import contextlib
import io

from wayfinder import GridSystemRegistry


def test_same_key_returns_cached_instance(town_square):
    registry = GridSystemRegistry()

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        first = registry.get_system("town-square", town_square)
        second = registry.get_system("town-square", town_square)
    out = buf.getvalue()

    assert first is second
    assert len(registry) == 1
    assert ("town-square", 1000.0, 800.0) in registry
    # Built once, logged once
    assert out.count("[•] [Grid] Built obstacle model for 'town-square'") == 1


def test_same_id_different_dimensions_builds_new_system(town_square, shop_interior):
    registry = GridSystemRegistry()
    outside = registry.get_system("botica", town_square)
    inside = registry.get_system("botica", shop_interior)

    assert outside is not inside
    assert outside.map.type == "exterior"
    assert inside.map.type == "interior"
    assert sorted(registry.keys()) == [("botica", 400.0, 400.0), ("botica", 1000.0, 800.0)]


def test_clear_drops_every_entry(town_square):
    registry = GridSystemRegistry()
    before = registry.get_system("town-square", town_square)

    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        registry.clear_all()
    assert "[i] [Grid] Cleared 1 cached grid system(s)" in buf.getvalue()

    assert len(registry) == 0
    after = registry.get_system("town-square", town_square)
    assert after is not before


def test_registries_are_independent(town_square):
    a = GridSystemRegistry()
    b = GridSystemRegistry()
    assert a.get_system("town-square", town_square) is not b.get_system("town-square", town_square)
    a.clear()
    assert len(b) == 1


def test_registry_cell_size_is_passed_to_systems(town_square):
    registry = GridSystemRegistry(cell_size=10)
    system = registry.get_system("town-square", town_square)
    assert system.cell_size == 10
    assert (system.obstacles.columns, system.obstacles.rows) == (100, 80)


def test_missing_bounds_key_uses_defaults():
    registry = GridSystemRegistry()
    registry.get_system("blank", {"type": "exterior"})
    assert ("blank", 1000.0, 800.0) in registry


def test_unusable_dimensions_key_on_the_built_bounds():
    registry = GridSystemRegistry()
    for width in (0, -50, True, "wide", float("nan")):
        payload = {"type": "exterior", "bounds": {"width": width, "height": 800}}
        system = registry.get_system("odd", payload)
        assert (system.map.bounds.width, system.map.bounds.height) == (1000, 800)

    # Every variant resolves to the default width, so only one system is cached
    assert registry.keys() == [("odd", 1000.0, 800.0)]


def test_top_level_dimensions_back_up_bad_bounds():
    registry = GridSystemRegistry()
    system = registry.get_system("fallback", {"bounds": {"width": -1}, "width": 300, "height": 200})
    assert ("fallback", 300.0, 200.0) in registry
    assert (system.obstacles.columns, system.obstacles.rows) == (15, 10)
