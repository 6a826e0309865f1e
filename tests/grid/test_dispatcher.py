"""
Tests for the region dispatcher and its module-level entry points.
"""

import pytest

from taipower_grid import convert_text, convert_to_wgs84
from taipower_grid.conversion import (
    ConversionResult,
    PlanarConverter,
    RegionDispatcher,
    get_accuracy_estimate,
    validate_conversion,
)
from taipower_grid.model import GeographicCoordinate, GridCoordinate
from taipower_grid.regions import Region, RegionBaselineRegistry
from taipower_grid.schemas import ConversionResponse, ScanResponse


class TestRegionDispatcher:
    """Test grid coordinate and text conversion to WGS84."""

    def test_convert_keeps_intermediate_values(self, dispatcher):
        result = dispatcher.convert(GridCoordinate.parse("H4292 BD23"))

        assert isinstance(result, ConversionResult)
        assert result.grid.formatted == "H4292 BD23"
        assert result.xy == (283720.0, 2696330.0)
        assert result.region is Region.TAIWAN
        assert result.geographic.latitude == pytest.approx(24.3707230, abs=0.001)
        assert result.geographic.longitude == pytest.approx(121.3405475, abs=0.001)
        assert result.geographic.accuracy_meters == 10.0
        assert result.is_plausible

    def test_convert_to_wgs84(self, dispatcher):
        geographic = dispatcher.convert_to_wgs84(GridCoordinate.parse("G7825 FB24"))

        assert geographic.latitude == pytest.approx(24.0668243, abs=0.001)
        assert geographic.longitude == pytest.approx(120.8401795, abs=0.001)

    @pytest.mark.parametrize("text,region", [
        ("Y4187 GC00", Region.PENGHU),
        ("Z0054 EC0222", Region.JINMEN),
        ("S2556 CA70", Region.MAZU),
        ("G7353 DD67", Region.TAIWAN),
    ])
    def test_region_selection_and_plausibility(self, dispatcher, text, region):
        result = dispatcher.convert(GridCoordinate.parse(text))

        assert result.region is region
        assert result.is_plausible

    def test_convert_text(self, dispatcher):
        results = dispatcher.convert_text("Pole tag\nG7825 F824\n")

        assert len(results) == 1
        assert results[0].grid.formatted == "G7825 FB24"

    def test_convert_text_without_coordinate(self, dispatcher):
        assert dispatcher.convert_text("no coordinate here") == []
        assert dispatcher.text_to_wgs84("no coordinate here") is None

    def test_convert_text_skips_failed_conversions(self):
        converter = PlanarConverter(RegionBaselineRegistry({"H": (250000.0, 2650000.0)}))
        dispatcher = RegionDispatcher(converter=converter)

        results = dispatcher.convert_text("G7825 FB24\nH4292 BD23")

        assert [result.grid.formatted for result in results] == ["H4292 BD23"]

    def test_convert_coordinates(self):
        converter = PlanarConverter(RegionBaselineRegistry({"H": (250000.0, 2650000.0)}))
        dispatcher = RegionDispatcher(converter=converter)
        coordinates = [GridCoordinate.parse("G7825 FB24"), GridCoordinate.parse("H4292 BD23")]

        results = dispatcher.convert_coordinates(coordinates)

        assert [result.grid.formatted for result in results] == ["H4292 BD23"]
        assert results[0].xy == (283720.0, 2696330.0)
        assert dispatcher.convert_coordinates([]) == []

    def test_text_to_wgs84_uses_best_guess(self, dispatcher):
        geographic = dispatcher.text_to_wgs84("H4292 BD23 G7825 FB24")
        assert geographic.latitude == pytest.approx(24.3707230, abs=0.001)

    def test_result_to_dict(self, dispatcher):
        data = dispatcher.convert(GridCoordinate.parse("G7825 FB2436")).to_dict()

        assert data["grid"]["formatted"] == "G7825 FB2436"
        assert (data["x"], data["y"]) == (232924.0, 2662636.0)
        assert data["region"] == "taiwan"
        assert data["geographic"]["accuracy_meters"] == 1.0
        assert data["is_plausible"] is True

    def test_module_level_entry_points(self):
        geographic = convert_to_wgs84(GridCoordinate.parse("G7353 DD67"))

        assert geographic.latitude == pytest.approx(24.1952640, abs=0.001)
        assert [result.grid.formatted for result in convert_text("G7353 DD67")] == ["G7353 DD67"]


class TestAccuracyAndValidation:
    """Test accuracy estimates and per-region sanity boxes."""

    @pytest.mark.parametrize("text,expected", [
        ("G7825 FB24", 10.0),
        ("G7825 FB2436", 1.0),
    ])
    def test_accuracy_estimate(self, dispatcher, text, expected):
        coordinate = GridCoordinate.parse(text)

        assert get_accuracy_estimate(coordinate) == expected
        assert dispatcher.get_accuracy_estimate(coordinate) == expected

    @pytest.mark.parametrize("text,latitude,longitude,expected", [
        ("H4292 BD23", 24.37, 121.34, True),
        ("H4292 BD23", 35.68, 139.69, False),
        ("H4292 BD23", 95.0, 121.0, False),
        ("Y4187 GC00", 23.57, 119.58, True),
        ("Y4187 GC00", 24.37, 121.34, False),
        ("Z0054 EC0222", 24.43, 118.31, True),
        ("Z0054 EC0222", 24.43, 118.6, False),
        ("S2556 CA70", 26.2, 120.1, True),
        ("S2556 CA70", 25.0, 120.1, False),
    ])
    def test_validate_conversion(self, dispatcher, text, latitude, longitude, expected):
        coordinate = GridCoordinate.parse(text)
        geographic = GeographicCoordinate(latitude, longitude)

        assert validate_conversion(coordinate, geographic) is expected
        assert dispatcher.validate_conversion(coordinate, geographic) is expected


class TestSchemas:
    """Test serialization of conversion results."""

    def test_conversion_response(self, dispatcher):
        result = dispatcher.convert(GridCoordinate.parse("H4292 BD23"))
        response = ConversionResponse.from_result(result)

        assert response.grid.formatted == "H4292 BD23"
        assert response.grid.sector == "H"
        assert (response.x, response.y) == (283720.0, 2696330.0)
        assert response.region == "taiwan"
        assert response.geographic.is_in_taiwan
        assert response.is_plausible

    def test_scan_response_json(self, dispatcher):
        results = dispatcher.convert_text("G7825 FB24")
        response = ScanResponse(
            results=[ConversionResponse.from_result(result) for result in results],
            strategy="spaced_strict",
        )

        data = response.model_dump()
        assert data["strategy"] == "spaced_strict"
        assert data["results"][0]["grid"]["formatted"] == "G7825 FB24"
        assert '"region":"taiwan"' in response.model_dump_json()
