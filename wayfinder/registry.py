"""Cache of grid systems keyed by map identity and dimensions."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from .config import Config
from .environment import ExteriorMap, InteriorMap, declared_bounds
from .grid_system import GridSystem, MapInput
from .logging_utils import log_deterministic, log_info

RegistryKey = Tuple[str, float, float]


def _declared_size(map_data: MapInput) -> Tuple[float, float]:
    """Width and height the built system will have, without a full parse."""

    if isinstance(map_data, (InteriorMap, ExteriorMap)):
        return map_data.bounds.width, map_data.bounds.height
    width, height = declared_bounds(map_data)
    return width or Config.DEFAULT_MAP_WIDTH, height or Config.DEFAULT_MAP_HEIGHT


class GridSystemRegistry:
    """Builds each map's GridSystem once and hands out the shared instance.

    The key includes the map's declared width and height, so two payloads that
    reuse an id (an exterior view and the interior behind the same door, say)
    never share an obstacle model. Entries are write-once: an existing entry is
    never rebuilt in place, only dropped wholesale by ``clear()``.

    The registry is an ordinary object owned by the application; clear it only
    between turns, never while a query is running.
    """

    def __init__(self, *, cell_size: Optional[float] = None):
        self.cell_size = cell_size
        self._systems: Dict[RegistryKey, GridSystem] = {}

    @staticmethod
    def make_key(map_id: str, map_data: MapInput) -> RegistryKey:
        width, height = _declared_size(map_data)
        return str(map_id), float(width), float(height)

    def get_system(self, map_id: str, map_data: MapInput) -> GridSystem:
        """Return the cached GridSystem for this map, building it on first use."""

        key = self.make_key(map_id, map_data)
        system = self._systems.get(key)
        if system is None:
            system = GridSystem(map_data, cell_size=self.cell_size)
            self._systems[key] = system
            log_deterministic(
                f"[Grid] Built obstacle model for '{map_id}' "
                f"({system.map.type}, {system.obstacles.columns}x{system.obstacles.rows} cells, "
                f"{len(system.obstacles.blocked)} blocked)"
            )
        return system

    def clear(self) -> None:
        """Drop every cached system so the next request rebuilds from fresh data."""
        count = len(self._systems)
        self._systems.clear()
        log_info(f"[Grid] Cleared {count} cached grid system(s)")

    clear_all = clear

    def keys(self) -> List[RegistryKey]:
        return list(self._systems)

    def __len__(self) -> int:
        return len(self._systems)

    def __contains__(self, key: object) -> bool:
        return key in self._systems
