"""CLI for star-overlay."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from star_overlay import __version__
from star_overlay.overlay import OverlaySession
from star_overlay.parser import parse_system
from star_overlay.render import render_svg
from star_overlay.render.constants import DEFAULT_HEIGHT, DEFAULT_WIDTH
from star_overlay.themes import THEMES


def _load(input_file: Path):
    try:
        return parse_system(input_file.read_text(encoding="utf-8"))
    except ValueError as e:
        click.echo(f"Parse error: {e}", err=True)
        raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log layout progress to stderr")
def cli(verbose: bool) -> None:
    """star-overlay: Lay out star system map overlays and preview them as SVG."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("-o", "--output", type=click.Path(path_type=Path), default=None,
              help="Output SVG file path. Defaults to <input>.svg")
@click.option("--theme", type=click.Choice(list(THEMES.keys())), default="dark",
              help="Visual theme (default: dark)")
@click.option("--width", type=int, default=DEFAULT_WIDTH,
              help=f"Viewport width in pixels (default: {DEFAULT_WIDTH})")
@click.option("--height", type=int, default=DEFAULT_HEIGHT,
              help=f"Viewport height in pixels (default: {DEFAULT_HEIGHT})")
def render(
    input_file: Path,
    output: Path | None,
    theme: str,
    width: int,
    height: int,
) -> None:
    """Render a star system overlay to SVG."""
    system = _load(input_file)

    session = OverlaySession(system, width, height)
    session.open()
    svg = render_svg(session, THEMES[theme])

    if output is None:
        output = input_file.with_suffix(".svg")

    output.write_text(svg, encoding="utf-8")
    click.echo(f"Rendered {len(session.layout.states)} objects, "
               f"{len(session.visible_lanes())} lanes, "
               f"{len(session.markers)} markers -> {output}")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option("--width", type=int, default=DEFAULT_WIDTH)
@click.option("--height", type=int, default=DEFAULT_HEIGHT)
def info(input_file: Path, width: int, height: int) -> None:
    """Show the computed layout of a star system overlay."""
    system = _load(input_file)
    session = OverlaySession(system, width, height)
    session.open()
    layout = session.layout

    click.echo(f"Title: {system.title or '(none)'}")
    click.echo(f"Resolution: {layout.resolution:.3f}")
    click.echo(f"Relaxation: {layout.iterations} sweeps, "
               f"{'converged' if layout.converged else 'not converged'}")
    click.echo(f"Objects: {len(layout.states)} of {len(system.objects)} shown")
    for object_id, state in layout.states.items():
        dx, dy = state.offset
        click.echo(f"  {object_id}: radius {state.radius:.2f}, "
                   f"label {state.placement.value} ({dx:+.2f}, {dy:+.2f})")
    click.echo(f"Markers: {len(session.markers)}")
    for marker in session.markers:
        click.echo(f"  [{marker.id}] {marker.text or '(no text)'} "
                   f"@ ({marker.shape.x:g}, {marker.shape.y:g})")


@cli.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
def validate(input_file: Path) -> None:
    """Validate a star system overlay definition."""
    system = _load(input_file)

    known = system.known_objects()
    click.echo(f"Valid: {len(system.objects)} objects "
               f"({len(known)} known), "
               f"{len(system.lanes)} lanes, "
               f"{len(system.markers)} markers")
