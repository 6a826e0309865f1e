"""
Region dispatcher: text or grid coordinate in, WGS84 position out.
"""

from functools import lru_cache
from typing import Dict, Iterable, List, Optional, Tuple

import structlog

from ..model import GeographicCoordinate, GridCoordinate
from ..parsing import CoordinateParser
from ..regions import Region, params_for_sector, region_for_sector
from .planar import PlanarConverter
from .projection import GeodeticProjector
from .types import ConversionResult, GridConversionError


logger = structlog.get_logger(__name__)

# Sanity boxes per region: (lat_min, lat_max, lon_min, lon_max)
VALIDATION_BOUNDS: Dict[Region, Tuple[float, float, float, float]] = {
    Region.PENGHU: (23.0, 24.0, 119.0, 120.0),
    Region.JINMEN: (24.3, 24.6, 118.2, 118.5),
    Region.MAZU: (26.1, 26.4, 119.9, 120.5),
    Region.TAIWAN: (21.0, 26.0, 120.0, 122.0),
}


def get_accuracy_estimate(coordinate: GridCoordinate) -> float:
    """Expected position error in meters, from the precision field width."""
    digits = len(coordinate.precision)
    if digits == 4:
        return 1.0
    if digits == 2:
        return 10.0
    return 100.0


def validate_conversion(coordinate: GridCoordinate, result: GeographicCoordinate) -> bool:
    """Check that a converted position falls in the box of its region."""
    if not result.is_valid:
        return False

    lat_min, lat_max, lon_min, lon_max = VALIDATION_BOUNDS[region_for_sector(coordinate.sector)]
    return lat_min <= result.latitude <= lat_max and lon_min <= result.longitude <= lon_max


class RegionDispatcher:
    """
    Top-level entry point composing parsing, planar conversion and projection.

    Picks the projection parameters from the sector letter: X/Y are Penghu,
    Z is Jinmen, S is Mazu and every other sector is the Taiwan mainland.
    """

    def __init__(
        self,
        parser: Optional[CoordinateParser] = None,
        converter: Optional[PlanarConverter] = None,
        projector: Optional[GeodeticProjector] = None,
    ):
        self.parser = parser or CoordinateParser()
        self.converter = converter or PlanarConverter()
        self.projector = projector or GeodeticProjector()
        self.logger = logger.bind(component="RegionDispatcher")

    def convert_to_wgs84(self, coordinate: GridCoordinate) -> GeographicCoordinate:
        """
        Convert a grid coordinate to WGS84.

        Raises:
            UnknownSectorError: The sector has no baseline
        """
        return self.convert(coordinate).geographic

    def convert(self, coordinate: GridCoordinate) -> ConversionResult:
        """Convert a grid coordinate and keep every intermediate value."""
        xy = self.converter.convert_to_xy(coordinate)
        params = params_for_sector(coordinate.sector)
        latitude, longitude = self.projector.project(xy[0], xy[1], params)
        geographic = GeographicCoordinate(latitude, longitude, get_accuracy_estimate(coordinate))

        return ConversionResult(
            grid=coordinate,
            xy=xy,
            geographic=geographic,
            region=params.region,
            is_plausible=validate_conversion(coordinate, geographic),
        )

    def convert_text(self, text: str) -> List[ConversionResult]:
        """
        Parse OCR text and convert every coordinate found.

        Coordinates that fail to convert are logged and skipped.

        Args:
            text: Raw OCR text

        Returns:
            Conversion results in discovery order; may be empty
        """
        return self.convert_coordinates(self.parser.parse_text(text))

    def convert_coordinates(self, coordinates: Iterable[GridCoordinate]) -> List[ConversionResult]:
        """Convert already parsed coordinates, logging and skipping failures."""
        results = []
        for coordinate in coordinates:
            try:
                results.append(self.convert(coordinate))
            except GridConversionError as e:
                self.logger.warning("Conversion failed",
                                    coordinate=coordinate.formatted, error=str(e))

        return results

    def text_to_wgs84(self, text: str) -> Optional[GeographicCoordinate]:
        """Best-guess WGS84 position for OCR text, or None."""
        results = self.convert_text(text)
        return results[0].geographic if results else None

    def get_accuracy_estimate(self, coordinate: GridCoordinate) -> float:
        return get_accuracy_estimate(coordinate)

    def validate_conversion(
        self, coordinate: GridCoordinate, result: GeographicCoordinate
    ) -> bool:
        return validate_conversion(coordinate, result)


@lru_cache(maxsize=1)
def get_default_dispatcher() -> RegionDispatcher:
    """Shared dispatcher with default components."""
    return RegionDispatcher()


def convert_to_wgs84(coordinate: GridCoordinate) -> GeographicCoordinate:
    return get_default_dispatcher().convert_to_wgs84(coordinate)


def convert_text(text: str) -> List[ConversionResult]:
    return get_default_dispatcher().convert_text(text)
