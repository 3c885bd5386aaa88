"""SVG preview rendering."""

from star_overlay.render.svg import render_svg

__all__ = ["render_svg"]
