# geowords/cli.py
"""Command line interface for converting between coordinates and words."""

import click

from .converter import format_words, parse_words
from .errors import ConfigError, InputError, RangeError
from .logger import set_level
from .processing import DIRECTIONS, run_batch_pipeline
from .settings import build_converter, get_converter


def _get_converter(ctx: click.Context):
    """Build the converter, exiting with status 2 if the configuration is bad."""
    try:
        if ctx.obj.get("vocabulary_path"):
            return build_converter(vocabulary_path=ctx.obj["vocabulary_path"])
        return get_converter()
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        ctx.exit(2)


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.option('--vocabulary', type=click.Path(exists=True, dir_okay=False),
              help='Vocabulary file to use instead of the configured one')
@click.pass_context
def cli(ctx, verbose, vocabulary):
    """Convert between coordinates and three-word identifiers."""
    if verbose:
        set_level('DEBUG')
    ctx.ensure_object(dict)
    ctx.obj['vocabulary_path'] = vocabulary


@cli.command('to-words')
@click.argument('lat', type=float)
@click.argument('lng', type=float)
@click.option('--separator', default='.', show_default=True, help='Separator between words')
@click.pass_context
def to_words(ctx, lat, lng, separator):
    """Print the words for the cell containing LAT LNG."""
    converter = _get_converter(ctx)
    try:
        words = converter.coords_to_words(lat, lng)
    except InputError as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()
    click.echo(format_words(words, separator))


@cli.command('to-coords')
@click.argument('words', nargs=-1, required=True)
@click.pass_context
def to_coords(ctx, words):
    """Print the center coordinates of the cell named by WORDS.

    WORDS may be given as three arguments or as one dotted string.
    """
    converter = _get_converter(ctx)
    try:
        value = words[0] if len(words) == 1 else list(words)
        coordinates = converter.words_to_coords(parse_words(value))
    except InputError as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()
    except RangeError:
        click.echo("❌ Those words do not name a location in the region", err=True)
        raise click.Abort()
    click.echo(f"{coordinates.latitude:.6f},{coordinates.longitude:.6f}")


@cli.command()
@click.argument('lat', type=float)
@click.argument('lng', type=float)
@click.pass_context
def locate(ctx, lat, lng):
    """Show the grid cell containing LAT LNG: its index, edges, center and words."""
    converter = _get_converter(ctx)
    try:
        cell = converter.indexer.coord_to_cell(lat, lng)
    except InputError as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()

    south, west, north, east = converter.indexer.cell_bounds(cell)
    center = converter.indexer.cell_to_coord(cell)
    click.echo(f"Cell: row {cell.row}, column {cell.column}")
    click.echo(f"  Index: {converter.linearizer.to_linear(cell)}")
    click.echo(f"  Bounds: S {south:.6f} W {west:.6f} N {north:.6f} E {east:.6f}")
    click.echo(f"  Center: {center.latitude:.6f},{center.longitude:.6f}")
    click.echo(f"  Words: {format_words(converter.cell_to_words(cell))}")


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.argument('output_file', type=click.Path(dir_okay=False, writable=True))
@click.option('--direction', type=click.Choice(DIRECTIONS), default='words', show_default=True,
              help='"words" adds words from coordinates, "coords" adds coordinates from words')
@click.option('--lat-col', default='Latitude', show_default=True)
@click.option('--lng-col', default='Longitude', show_default=True)
@click.option('--words-col', default='words', show_default=True)
@click.pass_context
def batch(ctx, input_file, output_file, direction, lat_col, lng_col, words_col):
    """Convert every row of a CSV file and write the result to OUTPUT_FILE."""
    converter = _get_converter(ctx)
    try:
        result_df = run_batch_pipeline(
            input_file,
            direction=direction,
            lat_col=lat_col,
            lng_col=lng_col,
            words_col=words_col,
            converter=converter,
        )
    except InputError as e:
        click.echo(f"❌ {e}", err=True)
        raise click.Abort()

    result_df.to_csv(output_file, index=False)
    click.echo(f"✅ Wrote {len(result_df)} rows to {output_file}")


@cli.command()
@click.pass_context
def info(ctx):
    """Show the grid and vocabulary configuration."""
    details = _get_converter(ctx).describe()
    region = details['region']

    click.echo("Grid configuration:")
    click.echo(f"  Region: lat [{region['min_lat']}, {region['max_lat']}), "
               f"lng [{region['min_lng']}, {region['max_lng']})")
    click.echo(f"  Cell size: {details['cell_size_meters']} m")
    click.echo(f"  Reference latitude: {details['reference_lat']}")
    click.echo(f"  Grid: {details['rows']} rows x {details['columns']} columns")
    click.echo(f"  Cells: {details['cells']}")
    click.echo(f"  Vocabulary: {details['vocabulary_size']} words")
    click.echo(f"  Identifiers: {details['capacity']}")


if __name__ == '__main__':
    cli()
