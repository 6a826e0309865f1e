"""
Coordinate model: grid coordinates and WGS84 positions.
"""

from .types import (
    TAIWAN_BOUNDS,
    TAIWAN_CENTER,
    GeographicCoordinate,
    GridCoordinate,
    normalize_grid_text,
)

__all__ = [
    "GridCoordinate",
    "GeographicCoordinate",
    "TAIWAN_BOUNDS",
    "TAIWAN_CENTER",
    "normalize_grid_text",
]
