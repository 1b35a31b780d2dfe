"""
Pydantic schemas for Wayfinder query results.

Everything the engine hands back to the narrative layer is defined here.

Design Philosophy:
- Results are plain data: a verdict plus a human-readable reason, never an exception
- Reasons are written to be quoted verbatim in prose ("a counter blocks the path")
- Positions always carry both pixel and grid coordinates for one specific map
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Position(BaseModel):
    """A point on one map in pixel and grid coordinates.

    ``grid_x``/``grid_y`` are ``floor(pixel / cell_size)`` for the cell size of
    the grid system that produced the position. Movement is computed from the
    grid coordinates, so a Position from one map is meaningless on another.
    """

    x: float = Field(..., description="Pixel x coordinate")
    y: float = Field(..., description="Pixel y coordinate")
    grid_x: int = Field(..., description="Grid column")
    grid_y: int = Field(..., description="Grid row")

    @property
    def cell(self) -> tuple[int, int]:
        return self.grid_x, self.grid_y


class MoveValidation(BaseModel):
    """Verdict for a directional move request."""

    valid: bool
    reason: str = Field(..., description="Narrative-ready cause, e.g. 'path is clear'")
    new_position: Optional[Position] = Field(
        None, description="Destination cell centre when the move is valid",
    )
    current_position: Optional[Position] = Field(
        None, description="Unchanged position echoed back when the move is rejected",
    )


class PathResult(BaseModel):
    """Outcome of a pathfinding request."""

    valid: bool
    reason: Optional[str] = None
    path: List[Position] = Field(default_factory=list, description="Start to goal, inclusive")
    distance: int = Field(0, description="Number of single-cell steps along the path")
    estimated_time: int = Field(0, description="ceil(distance * time per cell)")


class NearbyLocation(BaseModel):
    """A building, room or door within the query radius."""

    name: str
    type: Optional[str] = None
    distance: int = Field(..., description="Manhattan distance in grid cells")
    direction: str = Field(..., description="Cardinal direction: north/south/east/west")
    locked: Optional[bool] = Field(None, description="Lock state, doors only")


class RoomInfo(BaseModel):
    """The room containing a position."""

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None


class MovementOption(BaseModel):
    valid: bool
    reason: str


MovementOptions = Dict[str, MovementOption]
