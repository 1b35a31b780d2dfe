"""
Wayfinder Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Spatial engine configuration loaded from environment variables."""

    # Grid geometry. Every map shares this cell size unless a GridSystem is
    # constructed with an explicit override.
    CELL_SIZE: int = int(os.getenv("WAYFINDER_CELL_SIZE", "20"))

    # Gameplay conventions
    # Time units charged per traversed cell when estimating travel time.
    TIME_PER_CELL: float = float(os.getenv("WAYFINDER_TIME_PER_CELL", "0.5"))
    # Search radius (grid cells) for nearby-location queries.
    NEARBY_RADIUS: int = int(os.getenv("WAYFINDER_NEARBY_RADIUS", "3"))

    # Fallbacks for malformed map payloads
    DEFAULT_MAP_WIDTH: float = float(os.getenv("WAYFINDER_DEFAULT_WIDTH", "1000"))
    DEFAULT_MAP_HEIGHT: float = float(os.getenv("WAYFINDER_DEFAULT_HEIGHT", "800"))
    DEFAULT_FURNITURE_SIZE: float = float(os.getenv("WAYFINDER_FURNITURE_SIZE", "40"))

    # Human-readable labels for door destination tags. Unknown tags pass through.
    DOOR_LABELS: Dict[str, str] = {
        "shop-floor": "Shop Floor",
        "laboratory": "Laboratory",
        "lab-door": "Laboratory",
        "bedroom": "Bedroom",
        "street": "Street",
    }

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    MAPS_DIR: Path = Path(os.getenv("WAYFINDER_MAPS_DIR", str(PROJECT_ROOT / "maps")))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.CELL_SIZE <= 0:
            raise ValueError(
                "WAYFINDER_CELL_SIZE must be a positive number of pixels per grid cell"
            )

        if cls.TIME_PER_CELL < 0:
            raise ValueError("WAYFINDER_TIME_PER_CELL cannot be negative")

        if cls.NEARBY_RADIUS < 0:
            raise ValueError("WAYFINDER_NEARBY_RADIUS cannot be negative")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Wayfinder Configuration:",
            f"  Cell Size: {cls.CELL_SIZE}px",
            f"  Time Per Cell: {cls.TIME_PER_CELL}",
            f"  Nearby Radius: {cls.NEARBY_RADIUS} cells",
            f"  Default Bounds: {cls.DEFAULT_MAP_WIDTH:g}x{cls.DEFAULT_MAP_HEIGHT:g}",
            f"  Maps Directory: {cls.MAPS_DIR}",
        ]
        return "\n".join(lines)
