"""Theme and style constants for overlay rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Theme:
    """Visual theme for the system overlay."""

    name: str
    background_color: str
    background_opacity: float
    planet_fill: str
    jump_fill: str
    footprint_stroke: str
    footprint_stroke_width: float
    label_color: str
    label_font_family: str
    label_font_size: float
    title_color: str
    title_font_size: float
    marker_color: str
    lane_friend: str
    lane_neutral: str
    lane_hostile: str
    lane_opacity: float = 0.1
    lane_half_width: float = 9.0
    marker_radius: float = 9.0
