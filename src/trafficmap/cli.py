"""CLI for trafficmap."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from trafficmap import __version__
from trafficmap.dump import (
    DumpFormatError,
    load_dump,
    read_csv_segments,
    read_header,
    write_dump,
)
from trafficmap.render import RenderConfig, write_png
from trafficmap.render.constants import (
    DEFAULT_CUTOFF,
    DEFAULT_INPUT,
    DEFAULT_METERS_PER_PIXEL,
    DEFAULT_OUTPUT,
    MAX_WIDTH_BASES,
)
from trafficmap.windows import WINDOWS

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug output)")
def cli(verbose: int) -> None:
    """trafficmap: Render weighted segment dumps as traffic density maps."""
    logging.basicConfig(
        level=LOG_LEVELS[min(verbose, len(LOG_LEVELS) - 1)],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path),
                default=DEFAULT_INPUT)
@click.option("-o", "--output", type=click.Path(path_type=Path), default=DEFAULT_OUTPUT,
              help=f"Output PNG file path (default: {DEFAULT_OUTPUT})")
@click.option("--window", type=click.Choice(list(WINDOWS.keys())), default="france",
              help="Map window preset (default: france)")
@click.option("--meters-per-pixel", type=float, default=DEFAULT_METERS_PER_PIXEL,
              help=f"Map scale (default: {DEFAULT_METERS_PER_PIXEL:g})")
@click.option("--cutoff", type=float, default=DEFAULT_CUTOFF,
              help=f"Skip segments with count <= cutoff (default: {DEFAULT_CUTOFF:g})")
@click.option("--xmin", type=float, default=None, help="Override window west bound")
@click.option("--xmax", type=float, default=None, help="Override window east bound")
@click.option("--ymin", type=float, default=None, help="Override window south bound")
@click.option("--ymax", type=float, default=None, help="Override window north bound")
@click.option("--max-width-basis", type=click.Choice(list(MAX_WIDTH_BASES)), default="count",
              help="Scale darkness against the busiest drawn segment (count) "
                   "or the number of loaded segments (size)")
def render(
    input_file: Path,
    output: Path,
    window: str,
    meters_per_pixel: float,
    cutoff: float,
    xmin: float | None,
    xmax: float | None,
    ymin: float | None,
    ymax: float | None,
    max_width_basis: str,
) -> None:
    """Render a segment dump to a PNG density map."""
    try:
        config = RenderConfig(
            window=WINDOWS[window].with_bounds(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax),
            meters_per_pixel=meters_per_pixel,
            cutoff=cutoff,
            input_path=input_file,
            output_path=output,
            max_width_basis=max_width_basis,
        )
        collection = load_dump(config.input_path)
        result = write_png(collection, config)
    except (ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Rendered {result.drawn} of {len(collection)} segments "
               f"({result.skipped} skipped) on {result.width}x{result.height} "
               f"canvas -> {result.output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate that a dump matches its declared segment count."""
    try:
        collection = load_dump(input_file)
    except DumpFormatError as e:
        click.echo(f"Format error: {e}", err=True)
        raise SystemExit(1)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    negative = sum(1 for s in collection if s.count < 0)
    if negative:
        click.echo(f"Warning: {negative} segments have a negative count", err=True)
    click.echo(f"Valid: {collection.declared_count} segments")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--cutoff", type=float, default=DEFAULT_CUTOFF,
              help=f"Count threshold to report on (default: {DEFAULT_CUTOFF:g})")
@click.option("--header-only", is_flag=True,
              help="Only report the declared segment count, without reading records")
def info(input_file: Path, cutoff: float, header_only: bool) -> None:
    """Show information about a segment dump."""
    try:
        if header_only:
            click.echo(f"Segments: {read_header(input_file)}")
            return
        collection = load_dump(input_file)
    except DumpFormatError as e:
        click.echo(f"Format error: {e}", err=True)
        raise SystemExit(1)
    except OSError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Segments: {collection.declared_count}")
    bounds = collection.bounds()
    if bounds is None:
        return
    click.echo(f"Count range: {collection.min_count:g} .. {collection.max_count:g}")
    above = sum(1 for s in collection if s.count > cutoff)
    click.echo(f"Above cutoff {cutoff:g}: {above}")
    xmin, ymin, xmax, ymax = bounds
    click.echo(f"Bounds: x {xmin:g} .. {xmax:g}, y {ymin:g} .. {ymax:g}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output dump path. Defaults to <input>.dump")
def convert(input_file: Path, output: Path | None) -> None:
    """Convert a CSV of x1,y1,x2,y2,count rows to a segment dump."""
    if output is None:
        output = input_file.with_suffix(".dump")

    try:
        segments = read_csv_segments(input_file)
        written = write_dump(output, segments)
    except DumpFormatError as e:
        click.echo(f"Format error: {e}", err=True)
        raise SystemExit(1)
    except (ValueError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Converted {written} segments -> {output}")
