"""
Value types for Taiwan Power Company grid coordinates and WGS84 positions.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


SECTOR_PATTERN = re.compile(r"[A-HJ-Z]")
ZONE_PATTERN = re.compile(r"[0-9]{4}")
BLOCK_PATTERN = re.compile(r"[A-Z]{2}")
PRECISION_PATTERN = re.compile(r"[0-9]{2}|[0-9]{4}")

# Normalized lengths: 2-digit precision (9) and 4-digit precision (11)
VALID_LENGTHS = (9, 11)

EARTH_RADIUS_M = 6371000.0


def normalize_grid_text(text: str) -> str:
    """Strip spaces and uppercase a grid coordinate string."""
    return text.replace(" ", "").upper()


def _fields_are_valid(sector: str, zone: str, block: str, precision: str) -> bool:
    """Check every field of a grid coordinate against its format rule."""
    if len(sector) + len(zone) + len(block) + len(precision) not in VALID_LENGTHS:
        return False
    return bool(
        SECTOR_PATTERN.fullmatch(sector)
        and ZONE_PATTERN.fullmatch(zone)
        and BLOCK_PATTERN.fullmatch(block)
        and PRECISION_PATTERN.fullmatch(precision)
    )


@dataclass(frozen=True)
class GridCoordinate:
    """
    Taiwan Power Company grid coordinate.

    Format examples:
    - G8152 FC56 (2-digit precision)
    - G8152 FC5678 (4-digit precision)
    - E9863DE60 (no space)

    Structure:
    - sector: one letter (A-Z except I), an 80 x 50 km area
    - zone: 4 digits locating the zone origin inside the sector
    - block: 2 letters naming a 100 m block
    - precision: 2 or 4 digits, 10 m or 1 m offset inside the block

    Use ``parse`` or ``create``; they return ``None`` for invalid input.
    Direct construction with invalid fields raises ``ValueError``.
    """

    # Text as received; not part of the coordinate's value
    raw_text: str = field(compare=False)
    sector: str
    zone: str
    block: str
    precision: str

    def __post_init__(self):
        if not _fields_are_valid(self.sector, self.zone, self.block, self.precision):
            raise ValueError(f"Invalid grid coordinate: {self.raw_text!r}")

    @property
    def normalized(self) -> str:
        """Raw text without spaces, uppercased."""
        return normalize_grid_text(self.raw_text)

    @property
    def formatted(self) -> str:
        """Canonical display form with a space between zone and block."""
        return f"{self.sector}{self.zone} {self.block}{self.precision}"

    @property
    def zone_coordinates(self) -> Tuple[int, int]:
        """Zone as (X, Y): first two and last two digits."""
        return int(self.zone[:2]), int(self.zone[2:])

    @property
    def block_coordinates(self) -> Tuple[int, int]:
        """Block letters as (X, Y) alphabet indexes, A=0 .. Z=25."""
        return ord(self.block[0]) - ord("A"), ord(self.block[1]) - ord("A")

    @property
    def precision_coordinates(self) -> Tuple[int, int]:
        """Primary precision digits as (X, Y)."""
        if len(self.precision) == 4:
            return int(self.precision[0]), int(self.precision[2])
        return int(self.precision[0]), int(self.precision[1])

    @property
    def sub_precision_coordinates(self) -> Tuple[int, int]:
        """Sub-precision digits as (X, Y); (0, 0) for 2-digit precision."""
        if len(self.precision) == 4:
            return int(self.precision[1]), int(self.precision[3])
        return 0, 0

    @property
    def has_sub_precision(self) -> bool:
        return len(self.precision) == 4

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "raw_text": self.raw_text,
            "sector": self.sector,
            "zone": self.zone,
            "block": self.block,
            "precision": self.precision,
            "formatted": self.formatted,
        }

    def __str__(self) -> str:
        return self.formatted

    @classmethod
    def parse(cls, text: str) -> Optional["GridCoordinate"]:
        """
        Parse a coordinate string.

        Args:
            text: Coordinate text, with or without the separating space

        Returns:
            GridCoordinate, or None when the text is not a valid coordinate
        """
        # Non-ASCII letters such as "ſ" uppercase to ASCII ones
        if not isinstance(text, str) or not text.isascii():
            return None

        normalized = normalize_grid_text(text)
        if len(normalized) not in VALID_LENGTHS:
            return None

        sector = normalized[0]
        zone = normalized[1:5]
        block = normalized[5:7]
        precision = normalized[7:]

        if not _fields_are_valid(sector, zone, block, precision):
            return None

        return cls(
            raw_text=text,
            sector=sector,
            zone=zone,
            block=block,
            precision=precision,
        )

    @classmethod
    def create(
        cls, sector: str, zone: str, block: str, precision: str
    ) -> Optional["GridCoordinate"]:
        """Create a coordinate from individual components."""
        return cls.parse(f"{sector}{zone} {block}{precision}")


@dataclass(frozen=True)
class GeographicCoordinate:
    """WGS84 position produced by the geodetic projector."""

    latitude: float
    longitude: float
    accuracy_meters: float = 0.0

    @property
    def is_valid(self) -> bool:
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0

    @property
    def is_in_taiwan(self) -> bool:
        """Inside the Taiwan bounding box, outlying islands included."""
        return (
            self.is_valid
            and TAIWAN_BOUNDS["south"] <= self.latitude <= TAIWAN_BOUNDS["north"]
            and TAIWAN_BOUNDS["west"] <= self.longitude <= TAIWAN_BOUNDS["east"]
        )

    def formatted_latitude(self, precision: int = 6) -> str:
        return f"{self.latitude:.{precision}f}"

    def formatted_longitude(self, precision: int = 6) -> str:
        return f"{self.longitude:.{precision}f}"

    def formatted(self, precision: int = 6) -> str:
        """Latitude and longitude as ``"lat, lon"``."""
        return f"{self.formatted_latitude(precision)}, {self.formatted_longitude(precision)}"

    def distance_to(self, other: "GeographicCoordinate") -> float:
        """
        Great-circle distance to another coordinate.

        Args:
            other: Target coordinate

        Returns:
            Haversine distance in meters
        """
        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        delta_lat = math.radians(other.latitude - self.latitude)
        delta_lon = math.radians(other.longitude - self.longitude)

        a = (
            math.sin(delta_lat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return EARTH_RADIUS_M * c

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "accuracy_meters": self.accuracy_meters,
            "is_in_taiwan": self.is_in_taiwan,
        }

    @classmethod
    def parse(cls, text: str) -> Optional["GeographicCoordinate"]:
        """Parse ``"lat, lon[, accuracy]"``; None when malformed or out of range."""
        parts = [part.strip() for part in text.split(",")]
        if len(parts) < 2:
            return None

        try:
            latitude = float(parts[0])
            longitude = float(parts[1])
            accuracy = float(parts[2]) if len(parts) > 2 else 0.0
        except ValueError:
            return None

        coordinate = cls(latitude, longitude, accuracy)
        return coordinate if coordinate.is_valid else None


TAIWAN_BOUNDS = {
    "north": 25.5,
    "south": 21.5,
    "east": 122.5,
    "west": 119.0,
}

TAIWAN_CENTER = GeographicCoordinate(23.6978, 120.9605)
