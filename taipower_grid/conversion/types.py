"""
Type definitions for grid coordinate conversion.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from ..model import GeographicCoordinate, GridCoordinate
from ..regions import Region


class GridConversionError(Exception):
    """Base exception for grid conversion errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnknownSectorError(GridConversionError):
    """Sector letter has no planar baseline."""

    def __init__(self, sector: str):
        self.sector = sector
        super().__init__(f"Unknown sector: {sector}")


class OutOfBoundsError(GridConversionError):
    """Planar point lies outside every grid sector."""

    def __init__(self, message: str, x: float, y: float, region: Optional[Region] = None):
        self.x = x
        self.y = y
        self.region = region
        super().__init__(message)


@dataclass(frozen=True)
class ConversionResult:
    """A grid coordinate together with its planar and WGS84 positions."""

    grid: GridCoordinate
    xy: Tuple[float, float]
    geographic: GeographicCoordinate
    region: Region

    # Result falls inside the expected box for its region
    is_plausible: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "grid": self.grid.to_dict(),
            "x": self.xy[0],
            "y": self.xy[1],
            "geographic": self.geographic.to_dict(),
            "region": self.region.value,
            "is_plausible": self.is_plausible,
        }
