"""
Grid coordinate conversion: planar meters and WGS84 projection.
"""

from .dispatcher import (
    VALIDATION_BOUNDS,
    RegionDispatcher,
    convert_text,
    convert_to_wgs84,
    get_accuracy_estimate,
    get_default_dispatcher,
    validate_conversion,
)
from .planar import PlanarConverter, fold_jinmen_zone
from .projection import GeodeticProjector, ecef_to_geodetic, geodetic_to_ecef
from .types import (
    ConversionResult,
    GridConversionError,
    OutOfBoundsError,
    UnknownSectorError,
)

__all__ = [
    # Core classes
    "PlanarConverter",
    "GeodeticProjector",
    "RegionDispatcher",
    # Entry points
    "convert_to_wgs84",
    "convert_text",
    "get_default_dispatcher",
    "get_accuracy_estimate",
    "validate_conversion",
    "VALIDATION_BOUNDS",
    # Helpers
    "fold_jinmen_zone",
    "geodetic_to_ecef",
    "ecef_to_geodetic",
    # Data types
    "ConversionResult",
    # Exceptions
    "GridConversionError",
    "UnknownSectorError",
    "OutOfBoundsError",
]
