"""
Region parameter table: sector baselines and per-region projection parameters.
"""

from .baselines import (
    D_EW,
    D_NS,
    TAIWAN_ROWS,
    Baseline,
    RegionBaselineRegistry,
    get_baseline_registry,
    mainland_sector_at,
)
from .params import (
    INTERNATIONAL_1924,
    REGION_PARAMS,
    WGS84,
    DatumShift,
    Ellipsoid,
    Region,
    RegionProjectionParams,
    params_for_sector,
    region_for_sector,
)

__all__ = [
    # Baselines
    "Baseline",
    "RegionBaselineRegistry",
    "get_baseline_registry",
    "mainland_sector_at",
    "TAIWAN_ROWS",
    "D_EW",
    "D_NS",
    # Projection parameters
    "Region",
    "RegionProjectionParams",
    "Ellipsoid",
    "DatumShift",
    "WGS84",
    "INTERNATIONAL_1924",
    "REGION_PARAMS",
    "region_for_sector",
    "params_for_sector",
]
