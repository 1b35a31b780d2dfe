"""Shared map payloads for the Wayfinder test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch):
    # Keep captured log lines free of ANSI codes.
    monkeypatch.setenv("WAYFINDER_NO_COLOR", "1")


@pytest.fixture
def town_square() -> dict:
    """Exterior 1000x800 map with one 100x100 building at (200, 200)."""
    return {
        "id": "town-square",
        "type": "exterior",
        "bounds": {"width": 1000, "height": 800},
        "buildings": [
            {"id": "town-hall", "name": "Town Hall", "type": "government",
             "x": 200, "y": 200, "width": 100, "height": 100},
        ],
    }


@pytest.fixture
def shop_interior() -> dict:
    """Interior 400x400 map: one 200x200 room at (100, 100), door on its top wall."""
    return {
        "id": "shop",
        "type": "interior",
        "bounds": {"width": 400, "height": 400},
        "rooms": [
            {"id": "shop-floor", "name": "Shop Floor", "type": "shop-floor",
             "polygon": [[100, 100], [300, 100], [300, 300], [100, 300]]},
        ],
        "doors": [
            {"id": "lab-door", "to": "laboratory", "position": [200, 100], "width": 40},
        ],
    }


@pytest.fixture
def open_hall() -> dict:
    """Interior 400x400 map whose single room covers every cell."""
    return {
        "id": "hall",
        "type": "interior",
        "bounds": {"width": 400, "height": 400},
        "rooms": [
            {"id": "hall", "name": "Great Hall",
             "polygon": [[0, 0], [400, 0], [400, 400], [0, 400]]},
        ],
    }
