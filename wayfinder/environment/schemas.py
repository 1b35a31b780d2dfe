"""Pydantic schemas for map descriptions.

Map payloads arrive as static scenario content (JSON or Python dicts). These
models give them a typed, serializable shape and apply the tolerance rules the
engine relies on: missing bounds fall back to configured defaults, malformed
vertices are dropped, and the map kind is inferred when absent.

Interior and exterior maps are separate models joined by a discriminated union
on ``type`` so obstacle construction can dispatch on the variant instead of
re-checking a string field.
"""

from __future__ import annotations

import math
from typing import Annotated, Any, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from wayfinder.config import Config
from wayfinder.logging_utils import log_repair

Vertex = Tuple[float, float]


def _clean_vertices(value: Any) -> List[Vertex]:
    """Keep only well-formed numeric ``[x, y]`` pairs."""

    if not isinstance(value, (list, tuple)):
        return []
    vertices: List[Vertex] = []
    for item in value:
        if not isinstance(item, (list, tuple)) or len(item) < 2:
            continue
        x, y = item[0], item[1]
        if isinstance(x, bool) or isinstance(y, bool):
            continue
        if not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            continue
        if not (math.isfinite(x) and math.isfinite(y)):
            continue
        vertices.append((float(x), float(y)))
    return vertices


def _number(value: Any) -> Optional[float]:
    """A finite real number, or None for anything else (strings, bools, NaN)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value) if math.isfinite(value) else None


def _text(value: Any) -> Optional[str]:
    """Identifiers and labels: strings pass, numbers are stringified, the rest is dropped."""

    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


_TRUE_STRINGS = frozenset({"true", "yes", "1", "locked"})


class _Spec(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class MapBounds(_Spec):
    """Pixel extent of the map. The grid covers ``[0, width) x [0, height)``."""

    width: float = Field(default_factory=lambda: Config.DEFAULT_MAP_WIDTH)
    height: float = Field(default_factory=lambda: Config.DEFAULT_MAP_HEIGHT)


class RoomSpec(_Spec):
    """A named walkable area on an interior map."""

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    polygon: List[Vertex] = Field(default_factory=list)

    @field_validator("id", "name", "type", mode="before")
    @classmethod
    def clean_text(cls, value: Any) -> Optional[str]:
        return _text(value)

    @field_validator("polygon", mode="before")
    @classmethod
    def clean_polygon(cls, value: Any) -> List[Vertex]:
        return _clean_vertices(value)

    @property
    def label(self) -> str:
        return self.name or self.id or "room"


class DoorSpec(_Spec):
    """A doorway. Either a ``position`` point or an ``x1,y1``-``x2,y2`` segment."""

    id: Optional[str] = None
    position: Optional[Vertex] = None
    x1: Optional[float] = None
    y1: Optional[float] = None
    x2: Optional[float] = None
    y2: Optional[float] = None
    width: Optional[float] = None
    rotation: float = 0
    is_locked: bool = Field(
        False, validation_alias=AliasChoices("is_locked", "isLocked", "locked"),
    )
    to: Optional[str] = None
    from_: Optional[str] = Field(None, validation_alias=AliasChoices("from_", "from"))

    @field_validator("id", "to", "from_", mode="before")
    @classmethod
    def clean_text(cls, value: Any) -> Optional[str]:
        return _text(value)

    @field_validator("x1", "y1", "x2", "y2", mode="before")
    @classmethod
    def clean_coordinate(cls, value: Any) -> Optional[float]:
        return _number(value)

    @field_validator("width", mode="before")
    @classmethod
    def clean_width(cls, value: Any) -> Optional[float]:
        width = _number(value)
        return width if width is not None and width > 0 else None

    @field_validator("rotation", mode="before")
    @classmethod
    def clean_rotation(cls, value: Any) -> float:
        rotation = _number(value)
        return rotation if rotation is not None else 0.0

    @field_validator("position", mode="before")
    @classmethod
    def clean_position(cls, value: Any) -> Optional[Vertex]:
        if value is None:
            return None
        cleaned = _clean_vertices([value])
        return cleaned[0] if cleaned else None

    @field_validator("is_locked", mode="before")
    @classmethod
    def coerce_locked(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in _TRUE_STRINGS
        if isinstance(value, (bool, int, float)):
            return bool(value)
        return False

    def center(self) -> Optional[Vertex]:
        """Representative point, or None when the door carries no geometry."""
        if self.position is not None:
            return self.position
        if None not in (self.x1, self.y1, self.x2, self.y2):
            return (self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2
        return None

    @property
    def is_vertical(self) -> bool:
        """Doors rotated a quarter turn open along the y axis."""
        return round(self.rotation) % 180 == 90

    @property
    def tag(self) -> str:
        return self.to or self.id or "door"


class BuildingSpec(_Spec):
    """Blocking footprint on an exterior map: rectangle or polygon."""

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    polygon: List[Vertex] = Field(default_factory=list)

    @field_validator("id", "name", "type", mode="before")
    @classmethod
    def clean_text(cls, value: Any) -> Optional[str]:
        return _text(value)

    @field_validator("x", "y", "width", "height", mode="before")
    @classmethod
    def clean_number(cls, value: Any) -> Optional[float]:
        return _number(value)

    @field_validator("polygon", mode="before")
    @classmethod
    def clean_polygon(cls, value: Any) -> List[Vertex]:
        return _clean_vertices(value)

    @property
    def has_rect(self) -> bool:
        return None not in (self.x, self.y, self.width, self.height)

    @property
    def label(self) -> str:
        return self.name or self.id or "a building"


class FurnitureSpec(_Spec):
    """Blocking furniture, corner form ``x,y,width,height`` or centre form ``position,size``."""

    id: Optional[str] = None
    type: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    position: Optional[Vertex] = None
    size: Optional[Vertex] = None

    @field_validator("id", "type", mode="before")
    @classmethod
    def clean_text(cls, value: Any) -> Optional[str]:
        return _text(value)

    @field_validator("x", "y", "width", "height", mode="before")
    @classmethod
    def clean_number(cls, value: Any) -> Optional[float]:
        return _number(value)

    @field_validator("position", "size", mode="before")
    @classmethod
    def clean_pair(cls, value: Any) -> Optional[Vertex]:
        if value is None:
            return None
        cleaned = _clean_vertices([value])
        return cleaned[0] if cleaned else None

    def as_rect(self) -> Tuple[float, float, float, float]:
        """Return ``(x, y, width, height)`` with the top-left corner as origin."""

        default = Config.DEFAULT_FURNITURE_SIZE
        if self.size is not None:
            width, height = self.size
        else:
            width = self.width if self.width is not None else default
            height = self.height if self.height is not None else default

        if self.x is not None and self.y is not None:
            return self.x, self.y, width, height
        if self.position is not None:
            cx, cy = self.position
            return cx - width / 2, cy - height / 2, width, height
        return 0.0, 0.0, width, height

    @property
    def label(self) -> str:
        return self.type or "furniture"


class WallSpec(_Spec):
    """An explicit wall segment."""

    x1: float
    y1: float
    x2: float
    y2: float


class _MapBase(_Spec):
    id: Optional[str] = None
    name: Optional[str] = None
    bounds: MapBounds = Field(default_factory=MapBounds)
    doors: List[DoorSpec] = Field(default_factory=list)
    furniture: List[FurnitureSpec] = Field(default_factory=list)
    walls: List[WallSpec] = Field(default_factory=list)

    @field_validator("id", "name", mode="before")
    @classmethod
    def clean_text(cls, value: Any) -> Optional[str]:
        return _text(value)


class InteriorMap(_MapBase):
    """Map defined by its rooms: everything outside a room is wall."""

    type: Literal["interior"] = "interior"
    rooms: List[RoomSpec] = Field(default_factory=list)


class ExteriorMap(_MapBase):
    """Open map where buildings are the obstacles."""

    type: Literal["exterior"] = "exterior"
    buildings: List[BuildingSpec] = Field(default_factory=list)


MapDescription = Annotated[Union[InteriorMap, ExteriorMap], Field(discriminator="type")]

_MAP_ADAPTER: TypeAdapter = TypeAdapter(MapDescription)

_LIST_FIELDS = ("rooms", "doors", "buildings", "furniture", "walls")


def _positive(value: Any) -> Optional[float]:
    number = _number(value)
    return number if number is not None and number > 0 else None


def _is_entry(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_segment(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        _number(value.get(k)) is not None for k in ("x1", "y1", "x2", "y2")
    )


def declared_bounds(data: Mapping[str, Any]) -> Tuple[Optional[float], Optional[float]]:
    """Usable width and height of a raw payload, None where a default applies.

    ``bounds.width``/``bounds.height`` win; top-level ``width``/``height`` are
    the fallback. Zero, negative, non-finite and non-numeric values don't count.
    """

    bounds = data.get("bounds")
    if not isinstance(bounds, Mapping):
        bounds = {}
    width = _positive(bounds.get("width")) or _positive(data.get("width"))
    height = _positive(bounds.get("height")) or _positive(data.get("height"))
    return width, height


def parse_map(data: Union[InteriorMap, ExteriorMap, Mapping[str, Any]]) -> Union[InteriorMap, ExteriorMap]:
    """Build a map model from a raw payload, repairing what can be repaired.

    - ``bounds`` may be missing; top-level ``width``/``height`` are accepted,
      otherwise ``Config.DEFAULT_MAP_WIDTH``/``DEFAULT_MAP_HEIGHT`` apply.
    - ``type`` outside ``interior``/``exterior`` is inferred: maps with rooms
      are interior, everything else exterior.
    - ``None`` in place of a geometry list is treated as empty; list entries
      that are not objects, and walls without four numeric coordinates, are
      dropped.
    - Scalar fields that can't be used fall back to their defaults (see the
      field validators above), so a bad value never rejects the whole map.
    """

    if isinstance(data, (InteriorMap, ExteriorMap)):
        return data

    payload = dict(data)
    label = _text(payload.get("id")) or _text(payload.get("name")) or "<unnamed>"

    for key in _LIST_FIELDS:
        if payload.get(key) is None:
            payload.pop(key, None)
            continue
        if not isinstance(payload[key], list):
            log_repair(f"[Map] '{label}': ignoring non-list '{key}'")
            payload.pop(key)
            continue
        keep = _is_segment if key == "walls" else _is_entry
        items = [item for item in payload[key] if keep(item)]
        if len(items) != len(payload[key]):
            log_repair(f"[Map] '{label}': dropped {len(payload[key]) - len(items)} malformed item(s) from '{key}'")
        payload[key] = items

    width, height = declared_bounds(payload)
    if width is None or height is None:
        width = width or Config.DEFAULT_MAP_WIDTH
        height = height or Config.DEFAULT_MAP_HEIGHT
        log_repair(f"[Map] '{label}': missing bounds, using {width:g}x{height:g}")
    payload["bounds"] = {"width": width, "height": height}

    kind = str(payload.get("type") or "").strip().lower()
    if kind not in ("interior", "exterior"):
        kind = "interior" if payload.get("rooms") else "exterior"
    payload["type"] = kind

    return _MAP_ADAPTER.validate_python(payload)
