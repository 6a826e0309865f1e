"""
Conversion between Taipower grid coordinates and planar meters.

Follows Dan Jacobson's reference algorithm (http://jidanni.org/geo/taipower/):
each zone unit is 800 m east-west and 500 m north-south, each block letter
100 m, each precision digit 10 m and each sub-precision digit 1 m.
"""

import math
from typing import Optional, Tuple

import structlog

from ..model import GridCoordinate
from ..regions import Region, RegionBaselineRegistry, get_baseline_registry, mainland_sector_at
from ..regions.baselines import (
    D_EW,
    D_NS,
    JINMEN_BOTTOM,
    JINMEN_LEFT,
    JINMEN_RIGHT,
    JINMEN_TOP,
    MAZU_BOTTOM,
    MAZU_LEFT,
    MAZU_TOP,
    PENGHU_BOTTOM,
    PENGHU_LEFT,
    TAIWAN_BOTTOM,
    TAIWAN_LEFT,
    TAIWAN_TOP,
)
from .types import OutOfBoundsError, UnknownSectorError


logger = structlog.get_logger(__name__)

ZONE_STEP_X = 800
ZONE_STEP_Y = 500
BLOCK_STEP = 100
PRECISION_STEP = 10

JINMEN_SECTOR = "Z"


def fold_jinmen_zone(zone_x: int) -> int:
    """Map Jinmen zone X numbers onto the shared baseline's local frame."""
    return 50 + (zone_x + 50) % 100


class PlanarConverter:
    """Converts grid coordinates to and from absolute planar meters."""

    def __init__(self, registry: Optional[RegionBaselineRegistry] = None):
        """
        Initialize planar converter.

        Args:
            registry: Sector baselines; defaults to the shared registry
        """
        self.registry = registry if registry is not None else get_baseline_registry()
        self.logger = logger.bind(component="PlanarConverter")

    def convert_to_xy(self, coordinate: GridCoordinate) -> Tuple[float, float]:
        """
        Convert a grid coordinate to planar meters.

        Args:
            coordinate: Valid grid coordinate

        Returns:
            (x, y) in meters

        Raises:
            UnknownSectorError: The sector has no baseline
        """
        sector = coordinate.sector
        baseline = self.registry.get(sector)
        if baseline is None:
            self.logger.debug("No baseline for sector", sector=sector)
            raise UnknownSectorError(sector)

        zone_x, zone_y = coordinate.zone_coordinates
        if sector == JINMEN_SECTOR:
            zone_x = fold_jinmen_zone(zone_x)

        block_x, block_y = coordinate.block_coordinates
        precision_x, precision_y = coordinate.precision_coordinates
        sub_x, sub_y = coordinate.sub_precision_coordinates

        local_x = (ZONE_STEP_X * zone_x + BLOCK_STEP * block_x
                   + PRECISION_STEP * precision_x + sub_x)
        local_y = (ZONE_STEP_Y * zone_y + BLOCK_STEP * block_y
                   + PRECISION_STEP * precision_y + sub_y)

        return float(local_x + baseline.origin_x), float(local_y + baseline.origin_y)

    def convert_from_xy(
        self,
        x: float,
        y: float,
        is_penghu: bool = False,
        precision_digits: int = 4,
    ) -> GridCoordinate:
        """
        Convert planar meters to a grid coordinate.

        Args:
            x: Easting in meters
            y: Northing in meters
            is_penghu: Interpret the point in the Penghu sectors
            precision_digits: Width of the precision field, 2 or 4

        Returns:
            Grid coordinate of the 1 m (or 10 m) cell containing the point

        Raises:
            OutOfBoundsError: The point lies in no sector, in an unused cell or
                in a sector the registry has no baseline for
        """
        if precision_digits not in (2, 4):
            raise ValueError(f"precision_digits must be 2 or 4, got {precision_digits}")

        if not (math.isfinite(x) and math.isfinite(y)):
            raise OutOfBoundsError("Coordinates must be finite", x, y)

        sector = self.determine_sector(x, y, is_penghu)
        baseline = self.registry.get(sector)
        if baseline is None:
            self.logger.debug("No baseline for sector", sector=sector)
            raise OutOfBoundsError(f"No baseline for sector {sector}", x, y)

        local_x = x - baseline.origin_x
        local_y = y - baseline.origin_y

        # Both Jinmen sub-areas share one baseline; fold the eastern one back
        if sector == JINMEN_SECTOR:
            local_x = local_x % D_EW

        zone_x = int(local_x // ZONE_STEP_X)
        zone_y = int(local_y // ZONE_STEP_Y)
        block_x = int((local_x % ZONE_STEP_X) // BLOCK_STEP)
        block_y = int((local_y % ZONE_STEP_Y) // BLOCK_STEP)
        precision_x = int((local_x % BLOCK_STEP) // PRECISION_STEP)
        precision_y = int((local_y % BLOCK_STEP) // PRECISION_STEP)
        sub_x = int(local_x % PRECISION_STEP)
        sub_y = int(local_y % PRECISION_STEP)

        zone = f"{zone_x:02d}{zone_y:02d}"
        block = chr(ord("A") + block_x) + chr(ord("A") + block_y)
        if precision_digits == 4:
            precision = f"{precision_x}{sub_x}{precision_y}{sub_y}"
        else:
            precision = f"{precision_x}{precision_y}"

        coordinate = GridCoordinate.create(sector, zone, block, precision)
        if coordinate is None:
            raise OutOfBoundsError(
                f"Failed to create coordinate from X={x}, Y={y}", x, y
            )
        return coordinate

    def determine_sector(self, x: float, y: float, is_penghu: bool = False) -> str:
        """
        Find the sector letter containing a planar point.

        Checks Penghu (only when requested), then Mazu, then Jinmen, then the
        mainland layout.

        Raises:
            OutOfBoundsError: The point lies in no sector
        """
        if is_penghu:
            return self._penghu_sector(x, y)

        if MAZU_BOTTOM <= y < MAZU_TOP:
            if not MAZU_LEFT <= x < MAZU_LEFT + D_EW:
                raise OutOfBoundsError("X coordinate outside Mazu", x, y, Region.MAZU)
            return "S"

        if JINMEN_LEFT <= x < JINMEN_RIGHT and JINMEN_BOTTOM <= y < JINMEN_TOP:
            return JINMEN_SECTOR

        return self._mainland_sector(x, y)

    @staticmethod
    def _penghu_sector(x: float, y: float) -> str:
        if not PENGHU_LEFT <= x < PENGHU_LEFT + D_EW:
            raise OutOfBoundsError("X coordinate outside Penghu", x, y, Region.PENGHU)
        if y < PENGHU_BOTTOM:
            raise OutOfBoundsError("Y coordinate too small for Penghu", x, y, Region.PENGHU)
        if y < PENGHU_BOTTOM + D_NS:
            return "Y"
        if y < PENGHU_BOTTOM + 2 * D_NS:
            return "X"
        raise OutOfBoundsError("Y coordinate too large for Penghu", x, y, Region.PENGHU)

    @staticmethod
    def _mainland_sector(x: float, y: float) -> str:
        if y >= TAIWAN_TOP:
            raise OutOfBoundsError("Y coordinate too large for Taiwan", x, y, Region.TAIWAN)
        if y < TAIWAN_BOTTOM:
            raise OutOfBoundsError("Y coordinate too small for Taiwan", x, y, Region.TAIWAN)

        # Row r covers [TOP - (r + 1) * D_NS, TOP - r * D_NS)
        row = math.ceil((TAIWAN_TOP - y) / D_NS) - 1
        column = math.floor((x - TAIWAN_LEFT) / D_EW)

        sector = mainland_sector_at(row, column)
        if sector is None:
            raise OutOfBoundsError("Position in unused grid cell", x, y, Region.TAIWAN)
        return sector
