"""Logging utilities for Wayfinder.

Each log category gets its own colour and a text marker, so grid builds, map
repairs, map loads and cache housekeeping stay distinguishable when the engine
is embedded in a simulation loop (and readable without colour).
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


# Markers for log categories (color-blind accessible)
EMOJI_DETERMINISTIC = "[•]"  # Obstacle model built
EMOJI_REPAIR = "[~]"         # Map payload repaired on parse
EMOJI_ERROR = "[!]"          # Unusable input
EMOJI_SUCCESS = "[✓]"        # Map file loaded
EMOJI_INFO = "[i]"           # Cache housekeeping

_CATEGORY_COLORS = {
    EMOJI_DETERMINISTIC: Color.BLUE,
    EMOJI_REPAIR: Color.YELLOW,
    EMOJI_ERROR: Color.RED,
    EMOJI_SUCCESS: Color.GREEN,
    EMOJI_INFO: Color.CYAN,
}


def colors_enabled() -> bool:
    """False when WAYFINDER_NO_COLOR or the common NO_COLOR switch is set."""
    return not (os.getenv("WAYFINDER_NO_COLOR") or os.getenv("NO_COLOR"))


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI codes, or return it untouched when colours are off."""
    if not colors_enabled():
        return text
    style = (Color.BOLD.value if bold else "") + color.value
    return f"{style}{text}{Color.RESET.value}"


def _emit(marker: str, message: str) -> None:
    print(colored(f"{marker} {message}", _CATEGORY_COLORS[marker]))


def log_deterministic(message: str) -> None:
    """Log an obstacle model build (blue)."""
    _emit(EMOJI_DETERMINISTIC, message)


def log_repair(message: str) -> None:
    """Log a repair applied to a malformed map payload (yellow)."""
    _emit(EMOJI_REPAIR, message)


def log_error(message: str) -> None:
    """Log input that could not be used at all (red)."""
    _emit(EMOJI_ERROR, message)


def log_success(message: str) -> None:
    """Log a loaded map file (green)."""
    _emit(EMOJI_SUCCESS, message)


def log_info(message: str) -> None:
    """Log cache housekeeping (cyan)."""
    _emit(EMOJI_INFO, message)
