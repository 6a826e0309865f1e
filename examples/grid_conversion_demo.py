#!/usr/bin/env python3
"""
Grid Coordinate Conversion Example.

Walks OCR text from a utility pole tag through parsing, planar conversion
and projection to WGS84, then converts a planar point back to a grid
coordinate.
"""

from pathlib import Path

from taipower_grid import RegionDispatcher, convert_to_wgs84
from taipower_grid.config import configure_logging
from taipower_grid.model import TAIWAN_CENTER, GridCoordinate
from taipower_grid.parsing import CoordinateParser, ParserConfig


SAMPLE_OCR_TEXT = """
TAIPOWER
G78Z5 F824
No. 17 Inspected 2024
"""


def main():
    """Demonstrate the text to WGS84 pipeline."""

    configure_logging(level="WARNING")

    print("🗺️  Taipower Grid Coordinate Conversion")
    print("=" * 60)

    # Step 1: Load parser configuration
    print("\n1. Loading parser configuration...")
    config_path = Path(__file__).parent / "parser.yaml"
    parser_config = ParserConfig.from_yaml(config_path)
    print(f"   • Strategies: {', '.join(parser_config.enabled_strategies)}")
    print(f"   • OCR corrections: {parser_config.apply_ocr_corrections}")

    # Step 2: Parse the OCR text
    print("\n2. Parsing OCR text...")
    parser = CoordinateParser(parser_config)
    parsed = parser.parse_with_details(SAMPLE_OCR_TEXT)

    if not parsed.found:
        print("❌ No grid coordinate found")
        return

    print(f"✅ Found {len(parsed.coordinates)} coordinate(s) with '{parsed.strategy}'")
    for candidate in parsed.rejected:
        print(f"   • Rejected candidate: {candidate}")

    # Step 3: Convert every coordinate
    print("\n3. Converting to WGS84...")
    dispatcher = RegionDispatcher(parser=parser)

    for result in dispatcher.convert_text(SAMPLE_OCR_TEXT):
        geographic = result.geographic
        distance_km = geographic.distance_to(TAIWAN_CENTER) / 1000

        print(f"   📍 {result.grid.formatted} ({result.region.value})")
        print(f"      XY:    {result.xy[0]:.1f}, {result.xy[1]:.1f}")
        print(f"      WGS84: {geographic.formatted()} (±{geographic.accuracy_meters:g} m)")
        print(f"      {distance_km:.1f} km from the centre of Taiwan")
        if not result.is_plausible:
            print("      ⚠️  Outside the expected area for its region")

    # Step 4: Outlying islands use their own projections
    print("\n4. Outlying islands...")
    for text in ("Y4187 GC00", "Z0054 EC0222", "S2556 CA70"):
        coordinate = GridCoordinate.parse(text)
        geographic = convert_to_wgs84(coordinate)
        print(f"   📍 {coordinate.formatted}: {geographic.formatted(5)}")

    # Step 5: Back from planar meters
    print("\n5. Planar meters to grid coordinate...")
    coordinate = dispatcher.converter.convert_from_xy(283720.0, 2696330.0, precision_digits=2)
    print(f"   (283720, 2696330) -> {coordinate.formatted}")

    print("\n✅ Done")


if __name__ == "__main__":
    main()
