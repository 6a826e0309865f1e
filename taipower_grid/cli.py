"""
Command line tool for reading and converting Taipower grid coordinates.
"""

import sys

import click

from .config import configure_logging, get_settings
from .conversion import (
    ConversionResult,
    GridConversionError,
    PlanarConverter,
    RegionDispatcher,
)
from .model import GridCoordinate
from .parsing import CoordinateParser, ParserConfig
from .schemas import ConversionResponse, GridCoordinateSchema, ScanResponse


def _build_dispatcher(settings) -> RegionDispatcher:
    if settings.parser_config_path:
        parser_config = ParserConfig.from_yaml(settings.parser_config_path)
    else:
        parser_config = ParserConfig()
    return RegionDispatcher(parser=CoordinateParser(parser_config))


def _echo_result(result: ConversionResult, precision: int) -> None:
    geographic = result.geographic
    click.echo(result.grid.formatted)
    click.echo(f"  XY:     {result.xy[0]:.1f}, {result.xy[1]:.1f}")
    click.echo(f"  WGS84:  {geographic.formatted(precision)} "
               f"(±{geographic.accuracy_meters:g} m)")
    click.echo(f"  Region: {result.region.value}")
    if not result.is_plausible:
        click.echo("  ⚠️  Position falls outside the expected area for this region")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose):
    """Read Taiwan Power Company grid coordinates and convert them to WGS84."""
    settings = get_settings()
    configure_logging(settings, level="DEBUG" if verbose else None)

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings
    ctx.obj["dispatcher"] = _build_dispatcher(settings)


@cli.command()
@click.argument("text")
@click.option("--details", is_flag=True, help="Show strategy and rejected candidates")
@click.pass_context
def parse(ctx, text, details):
    """List grid coordinates found in TEXT, best guess first."""
    parser = ctx.obj["dispatcher"].parser
    result = parser.parse_with_details(text)

    if not result.found:
        click.echo("❌ No grid coordinate found.", err=True)
        sys.exit(1)

    for coordinate in result.coordinates:
        click.echo(coordinate.formatted)

    if details:
        click.echo(f"Strategy: {result.strategy}")
        for candidate in result.rejected:
            click.echo(f"Rejected: {candidate}")


@cli.command()
@click.argument("coordinate")
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_context
def convert(ctx, coordinate, format):
    """Convert a grid COORDINATE to planar meters and WGS84."""
    grid = GridCoordinate.parse(coordinate)
    if grid is None:
        click.echo(f"❌ Invalid grid coordinate: {coordinate}", err=True)
        sys.exit(1)

    try:
        result = ctx.obj["dispatcher"].convert(grid)
    except GridConversionError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    if format == "json":
        click.echo(ConversionResponse.from_result(result).model_dump_json(indent=2))
    else:
        _echo_result(result, ctx.obj["settings"].display_precision)


@cli.command(name="from-xy")
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.option("--penghu", is_flag=True, help="Interpret the point in the Penghu sectors")
@click.option(
    "--digits",
    type=click.Choice(["2", "4"]),
    default="4",
    help="Width of the precision field",
)
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_context
def from_xy(ctx, x, y, penghu, digits, format):
    """Convert planar meters X Y to a grid coordinate."""
    converter: PlanarConverter = ctx.obj["dispatcher"].converter
    try:
        grid = converter.convert_from_xy(x, y, is_penghu=penghu, precision_digits=int(digits))
    except GridConversionError as e:
        click.echo(f"❌ {e}", err=True)
        sys.exit(1)

    if format == "json":
        click.echo(GridCoordinateSchema.from_coordinate(grid).model_dump_json(indent=2))
    else:
        click.echo(grid.formatted)


@cli.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option(
    "--format",
    "-f",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.pass_context
def scan(ctx, source, format):
    """Convert every grid coordinate in OCR text read from SOURCE (default stdin)."""
    dispatcher: RegionDispatcher = ctx.obj["dispatcher"]
    text = source.read()

    parsed = dispatcher.parser.parse_with_details(text)
    results = dispatcher.convert_coordinates(parsed.coordinates)

    if format == "json":
        response = ScanResponse(
            results=[ConversionResponse.from_result(result) for result in results],
            strategy=parsed.strategy,
        )
        click.echo(response.model_dump_json(indent=2))
    else:
        for result in results:
            _echo_result(result, ctx.obj["settings"].display_precision)

    if not results:
        click.echo("❌ No grid coordinate found.", err=True)
        sys.exit(1)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
