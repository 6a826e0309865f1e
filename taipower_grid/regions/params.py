"""
Transverse Mercator parameters for each physical region of the grid.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Region(Enum):
    """Physical regions with distinct projection parameters."""
    TAIWAN = "taiwan"
    PENGHU = "penghu"
    JINMEN = "jinmen"
    MAZU = "mazu"


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid given by semi-major axis and flattening."""
    name: str
    semi_major_axis: float
    flattening: float

    @property
    def eccentricity_squared(self) -> float:
        f = self.flattening
        return 2 * f - f * f


WGS84 = Ellipsoid("WGS84", 6378137.0, 1.0 / 298.257223563)
INTERNATIONAL_1924 = Ellipsoid("International 1924", 6378388.0, 1.0 / 297.0)


@dataclass(frozen=True)
class DatumShift:
    """Three-parameter geocentric translation to WGS84, in meters."""
    dx: float
    dy: float
    dz: float


@dataclass(frozen=True)
class RegionProjectionParams:
    """Transverse Mercator definition for one region."""
    region: Region
    central_meridian: float  # degrees
    false_easting: float
    false_northing: float
    scale_factor: float
    ellipsoid: Ellipsoid = WGS84
    datum_shift: Optional[DatumShift] = None


# Local datum of the Fujian-side islands (EPSG 3829 family)
FUJIAN_ISLANDS_SHIFT = DatumShift(-637.0, -549.0, -203.0)

REGION_PARAMS: Mapping[Region, RegionProjectionParams] = MappingProxyType({
    # +proj=tmerc +lon_0=121 +k=0.9999 +x_0=249172 +y_0=207
    Region.TAIWAN: RegionProjectionParams(
        region=Region.TAIWAN,
        central_meridian=121.0,
        false_easting=250000.0 - 828.0,
        false_northing=207.0,
        scale_factor=0.9999,
    ),
    # Same as the mainland, but 119E sits at x=250000
    Region.PENGHU: RegionProjectionParams(
        region=Region.PENGHU,
        central_meridian=119.0,
        false_easting=250000.0 - 828.0,
        false_northing=207.0,
        scale_factor=0.9999,
    ),
    # +proj=tmerc +lon_0=117 +ellps=intl +x_0=-42160 +y_0=-205 +k=0.9996
    Region.JINMEN: RegionProjectionParams(
        region=Region.JINMEN,
        central_meridian=117.0,
        false_easting=-42160.0,
        false_northing=-205.0,
        scale_factor=0.9996,
        ellipsoid=INTERNATIONAL_1924,
        datum_shift=FUJIAN_ISLANDS_SHIFT,
    ),
    # +proj=tmerc +lon_0=117 +ellps=intl +x_0=-279825 +y_0=20830 +k=0.9996
    Region.MAZU: RegionProjectionParams(
        region=Region.MAZU,
        central_meridian=117.0,
        false_easting=-279825.0,
        false_northing=20830.0,
        scale_factor=0.9996,
        ellipsoid=INTERNATIONAL_1924,
        datum_shift=FUJIAN_ISLANDS_SHIFT,
    ),
})

SECTOR_REGIONS: Mapping[str, Region] = MappingProxyType({
    "X": Region.PENGHU,
    "Y": Region.PENGHU,
    "Z": Region.JINMEN,
    "S": Region.MAZU,
})


def region_for_sector(sector: str) -> Region:
    """Region of a sector letter; every other letter is mainland Taiwan."""
    return SECTOR_REGIONS.get(sector, Region.TAIWAN)


def params_for_sector(sector: str) -> RegionProjectionParams:
    return REGION_PARAMS[region_for_sector(sector)]
