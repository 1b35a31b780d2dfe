"""
Map loading for JSON-defined map descriptions.

Scenario content ships maps as JSON files, one map per file. MapLoader reads
them and hands back parsed InteriorMap/ExteriorMap models ready for
GridSystemRegistry.get_system().

Map file structure:
```json
{
  "id": "botica-interior",
  "type": "interior",
  "bounds": {"width": 1000, "height": 800},
  "rooms": [{"id": "shop-floor", "name": "Shop Floor", "polygon": [[100, 400], ...]}],
  "doors": [{"id": "lab-door", "to": "laboratory", "position": [700, 400], "width": 60}],
  "furniture": [{"type": "counter", "position": [500, 550], "size": [200, 40]}]
}
```

Usage:
    loader = MapLoader()
    map_id, map_data = loader.load("botica_interior")
    system = registry.get_system(map_id, map_data)
"""

import json
from pathlib import Path
from typing import Optional, Tuple, Union

from .config import Config
from .environment import ExteriorMap, InteriorMap, parse_map
from .logging_utils import log_error, log_success

ParsedMap = Union[InteriorMap, ExteriorMap]


class MapLoader:
    """Load map descriptions from a directory of JSON files.

    Directory structure:
    - Default: Config.MAPS_DIR ({PROJECT_ROOT}/maps unless WAYFINDER_MAPS_DIR is set)
    - Override via constructor: MapLoader(Path("/custom/maps"))
    - Map files: {map_name}.json

    Geometry problems are repaired by parse_map (missing bounds, stray
    vertices); only an unreadable file or a payload that is not a JSON object
    raises.
    """

    def __init__(self, maps_dir: Optional[Path] = None):
        self.maps_dir = Path(maps_dir) if maps_dir is not None else Config.MAPS_DIR

    def load(self, map_name: str) -> Tuple[str, ParsedMap]:
        """Load ``{map_name}.json`` and return ``(map_id, parsed_map)``.

        The map id is the payload's ``id`` field, falling back to the file stem.

        Raises:
            FileNotFoundError: If the map file doesn't exist
            ValueError: If the file does not contain a JSON object
        """
        path = self.maps_dir / f"{map_name}.json"
        if not path.exists():
            raise FileNotFoundError(f"Map not found: {path}")
        return load_map(path)

    def available(self) -> list[str]:
        """Names of the map files in the maps directory."""
        if not self.maps_dir.is_dir():
            return []
        return sorted(p.stem for p in self.maps_dir.glob("*.json"))


def load_map(path: Union[str, Path]) -> Tuple[str, ParsedMap]:
    """Read a single map file; see MapLoader.load for the return value."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as fh:
        payload = json.load(fh)

    if not isinstance(payload, dict):
        log_error(f"[Map] {path.name}: expected a JSON object, got {type(payload).__name__}")
        raise ValueError(f"Map file {path} must contain a JSON object, got {type(payload).__name__}")

    parsed = parse_map(payload)
    map_id = str(payload.get("id") or path.stem)
    log_success(f"[Map] Loaded '{map_id}' from {path.name} ({parsed.type})")
    return map_id, parsed
