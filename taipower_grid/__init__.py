"""
Taiwan Power Company grid coordinates from OCR text to WGS84.

Pipeline: raw text -> grid coordinate candidates -> planar meters ->
latitude/longitude, with per-region baselines and projections for the
Taiwan mainland, Penghu, Jinmen and Mazu.
"""

from .conversion import (
    ConversionResult,
    GeodeticProjector,
    GridConversionError,
    OutOfBoundsError,
    PlanarConverter,
    RegionDispatcher,
    UnknownSectorError,
    convert_text,
    convert_to_wgs84,
    get_accuracy_estimate,
    validate_conversion,
)
from .model import GeographicCoordinate, GridCoordinate
from .parsing import CoordinateParser, ParserConfig, ParseResult, parse_text
from .regions import Region, RegionProjectionParams, get_baseline_registry

__version__ = "1.0.0"

__all__ = [
    # Model
    "GridCoordinate",
    "GeographicCoordinate",
    # Parsing
    "CoordinateParser",
    "ParserConfig",
    "ParseResult",
    "parse_text",
    # Regions
    "Region",
    "RegionProjectionParams",
    "get_baseline_registry",
    # Conversion
    "PlanarConverter",
    "GeodeticProjector",
    "RegionDispatcher",
    "ConversionResult",
    "convert_to_wgs84",
    "convert_text",
    "get_accuracy_estimate",
    "validate_conversion",
    # Exceptions
    "GridConversionError",
    "UnknownSectorError",
    "OutOfBoundsError",
]
