"""SVG preview of the overlay using drawsvg.

Overlay coordinates grow upwards; SVG coordinates grow downwards, so
every y is flipped against the viewport height.
"""

from __future__ import annotations

import drawsvg as draw

from star_overlay.overlay.session import OverlaySession
from star_overlay.parser.model import ObjectKind, Standing
from star_overlay.render.constants import (
    MARKER_STROKE_WIDTH,
    MARKER_TEXT_GAP,
    TITLE_X,
    TITLE_Y,
)
from star_overlay.render.style import Theme


def render_svg(session: OverlaySession, theme: Theme) -> str:
    """Render the session's current layout snapshot to an SVG string."""
    width = session.viewport_width
    height = session.viewport_height

    d = draw.Drawing(width, height)

    d.append(draw.Rectangle(
        0, 0, width, height,
        fill=theme.background_color,
        fill_opacity=theme.background_opacity,
    ))

    if session.system.title:
        d.append(draw.Text(
            session.system.title,
            theme.title_font_size,
            TITLE_X, TITLE_Y,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    _render_lanes(d, session, theme)
    _render_objects(d, session, theme)
    _render_markers(d, session, theme)

    return d.as_svg()


def _render_lanes(d: draw.Drawing, session: OverlaySession, theme: Theme) -> None:
    colors = {
        Standing.FRIEND: theme.lane_friend,
        Standing.NEUTRAL: theme.lane_neutral,
        Standing.HOSTILE: theme.lane_hostile,
    }
    height = session.viewport_height
    for lane in session.visible_lanes():
        src = session.system.objects[lane.source]
        tgt = session.system.objects[lane.target]
        x1, y1 = session.world_to_screen(src.x, src.y)
        x2, y2 = session.world_to_screen(tgt.x, tgt.y)
        d.append(draw.Line(
            x1, height - y1, x2, height - y2,
            stroke=colors[lane.standing],
            stroke_width=2 * theme.lane_half_width,
            stroke_opacity=theme.lane_opacity * session.lane_alpha(lane),
            stroke_linecap="round",
        ))


def _render_objects(d: draw.Drawing, session: OverlaySession, theme: Theme) -> None:
    height = session.viewport_height
    for object_id in session.layout.states:
        obj = session.system.objects[object_id]
        view = session.view(object_id)
        sx, sy = session.world_to_screen(obj.x, obj.y)

        d.append(draw.Circle(
            sx, height - sy, view.radius,
            fill=theme.planet_fill if obj.kind is ObjectKind.PLANET else theme.jump_fill,
            fill_opacity=view.alpha,
            stroke=theme.footprint_stroke,
            stroke_width=theme.footprint_stroke_width,
            stroke_opacity=view.alpha,
        ))

        # The offset locates the bottom-left corner of the text
        dx, dy = view.label_offset
        d.append(draw.Text(
            obj.label,
            theme.label_font_size,
            sx + dx, height - (sy + dy),
            fill=theme.label_color,
            fill_opacity=view.alpha,
            font_family=theme.label_font_family,
        ))


def _render_markers(d: draw.Drawing, session: OverlaySession, theme: Theme) -> None:
    height = session.viewport_height
    for marker in session.markers:
        sx, sy = session.world_to_screen(marker.shape.x, marker.shape.y)
        d.append(draw.Circle(
            sx, height - sy, theme.marker_radius,
            fill="none",
            stroke=theme.marker_color,
            stroke_width=MARKER_STROKE_WIDTH,
        ))
        if marker.text is not None:
            d.append(draw.Text(
                marker.text,
                theme.label_font_size,
                sx + MARKER_TEXT_GAP, height - sy,
                fill=theme.marker_color,
                font_family=theme.label_font_family,
                dominant_baseline="central",
            ))
