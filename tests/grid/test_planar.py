"""
Tests for conversion between grid coordinates and planar meters.
"""

import math

import pytest

from taipower_grid.conversion import (
    OutOfBoundsError,
    PlanarConverter,
    UnknownSectorError,
    fold_jinmen_zone,
)
from taipower_grid.model import GridCoordinate
from taipower_grid.regions import Region, RegionBaselineRegistry

PLANAR_VECTORS = [
    ("H4292 BD23", (283720.0, 2696330.0)),
    ("G7825 FB24", (232920.0, 2662640.0)),
    ("G7353 DD67", (228760.0, 2676870.0)),
    ("G7825 FB2436", (232924.0, 2662636.0)),
    ("Z0054 EC0222", (90402.0, 2703022.0)),
    ("A0000 AA00", (170000.0, 2750000.0)),
]

ROUND_TRIP_COORDINATES = [
    "H4292 BD23",
    "G7825 FB24",
    "G7353 DD67",
    "A0000 AA00",
    "W9999 HE99",
    "G7825 FB2436",
    "C1234 CD5678",
    "Y4187 GC00",
    "X5050 CD12",
    "S2556 CA70",
    "Z0054 EC0222",
    "Z6012 AB34",
    "Z9999 HE9999",
]


class TestConvertToXY:
    """Test grid coordinate to planar meters."""

    def setup_method(self):
        self.converter = PlanarConverter()

    @pytest.mark.parametrize("text,expected", PLANAR_VECTORS)
    def test_reference_vectors(self, text, expected):
        x, y = self.converter.convert_to_xy(GridCoordinate.parse(text))

        assert x == pytest.approx(expected[0], abs=0.1)
        assert y == pytest.approx(expected[1], abs=0.1)

    def test_two_and_four_digit_precision_agree(self):
        """Sub-precision digits only add meters inside the 10 m cell."""
        x2, y2 = self.converter.convert_to_xy(GridCoordinate.parse("G7825 FB24"))
        x4, y4 = self.converter.convert_to_xy(GridCoordinate.parse("G7825 FB2040"))

        assert (x2, y2) == (x4, y4)

    def test_unknown_sector(self):
        converter = PlanarConverter(RegionBaselineRegistry({"A": (170000.0, 2750000.0)}))

        with pytest.raises(UnknownSectorError) as exc_info:
            converter.convert_to_xy(GridCoordinate.parse("B0000 AA00"))

        assert exc_info.value.sector == "B"
        assert "Unknown sector: B" in str(exc_info.value)

    @pytest.mark.parametrize("zone_x,expected", [
        (0, 100),
        (49, 149),
        (50, 50),
        (99, 99),
    ])
    def test_fold_jinmen_zone(self, zone_x, expected):
        assert fold_jinmen_zone(zone_x) == expected


class TestConvertFromXY:
    """Test planar meters to grid coordinate."""

    def setup_method(self):
        self.converter = PlanarConverter()

    def test_two_digit_inverse(self):
        coordinate = self.converter.convert_from_xy(283720.0, 2696330.0, precision_digits=2)
        assert coordinate.formatted == "H4292 BD23"

    def test_four_digit_inverse(self):
        coordinate = self.converter.convert_from_xy(283720.0, 2696330.0)
        assert coordinate.formatted == "H4292 BD2030"

    def test_fractional_meters_truncate(self):
        coordinate = self.converter.convert_from_xy(283725.7, 2696338.2)
        assert coordinate.formatted == "H4292 BD2538"

    @pytest.mark.parametrize("text", ROUND_TRIP_COORDINATES)
    def test_round_trip(self, text):
        coordinate = GridCoordinate.parse(text)
        x, y = self.converter.convert_to_xy(coordinate)

        result = self.converter.convert_from_xy(
            x,
            y,
            is_penghu=coordinate.sector in ("X", "Y"),
            precision_digits=len(coordinate.precision),
        )

        assert result.formatted == coordinate.formatted

    def test_invalid_precision_digits(self):
        with pytest.raises(ValueError):
            self.converter.convert_from_xy(283720.0, 2696330.0, precision_digits=3)

    def test_sector_missing_from_registry_is_out_of_bounds(self):
        converter = PlanarConverter(RegionBaselineRegistry({"A": (170000.0, 2750000.0)}))

        with pytest.raises(OutOfBoundsError) as exc_info:
            converter.convert_from_xy(250000.0, 2650000.0)

        assert not isinstance(exc_info.value, UnknownSectorError)
        assert (exc_info.value.x, exc_info.value.y) == (250000.0, 2650000.0)
        assert "H" in str(exc_info.value)


class TestDetermineSector:
    """Test sector lookup and out-of-bounds handling."""

    def setup_method(self):
        self.converter = PlanarConverter()

    @pytest.mark.parametrize("x,y,is_penghu,expected", [
        (250000.0, 2650000.0, False, "H"),
        (250000.0, 2700000.0, False, "E"),   # row edges belong to the row above
        (250000.0, 2699999.9, False, "H"),
        (249999.9, 2699999.9, False, "G"),
        (90000.0, 2600000.0, False, "J"),
        (250000.0, 2400000.0, False, "W"),
        (90000.0, 2700000.0, False, "Z"),
        (150000.0, 2720000.0, False, "Z"),
        (50000.0, 2900000.0, False, "S"),
        (300000.0, 2600000.0, True, "Y"),
        (300000.0, 2620000.0, True, "X"),
    ])
    def test_sector_lookup(self, x, y, is_penghu, expected):
        assert self.converter.determine_sector(x, y, is_penghu) == expected

    @pytest.mark.parametrize("x,y,is_penghu,region", [
        (100000.0, 2790000.0, False, Region.TAIWAN),   # unused cell
        (50000.0, 2600000.0, False, Region.TAIWAN),    # west of the layout
        (400000.0, 2600000.0, False, Region.TAIWAN),   # east of the layout
        (200000.0, 2810000.0, False, Region.TAIWAN),   # north of the layout
        (200000.0, 2300000.0, False, Region.TAIWAN),   # south of the layout
        (95000.0, 2900000.0, False, Region.MAZU),
        (200000.0, 2600000.0, True, Region.PENGHU),
        (300000.0, 2500000.0, True, Region.PENGHU),
        (300000.0, 2700000.0, True, Region.PENGHU),
    ])
    def test_out_of_bounds(self, x, y, is_penghu, region):
        with pytest.raises(OutOfBoundsError) as exc_info:
            self.converter.convert_from_xy(x, y, is_penghu=is_penghu)

        assert exc_info.value.region is region
        assert (exc_info.value.x, exc_info.value.y) == (x, y)

    @pytest.mark.parametrize("x,y", [
        (math.nan, 2650000.0),
        (250000.0, math.inf),
        (-math.inf, 2650000.0),
    ])
    def test_non_finite_input(self, x, y):
        with pytest.raises(OutOfBoundsError):
            self.converter.convert_from_xy(x, y)
