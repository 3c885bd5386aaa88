"""Light theme."""

from star_overlay.render.style import Theme

LIGHT_THEME = Theme(
    name="light",
    background_color="#ffffff",
    background_opacity=1.0,
    planet_fill="#1f6f9f",
    jump_fill="#555555",
    footprint_stroke="#222222",
    footprint_stroke_width=1.5,
    label_color="#333333",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#111111",
    title_font_size=20.0,
    marker_color="#d35400",
    lane_friend="#27ae60",
    lane_neutral="#7f8c8d",
    lane_hostile="#c0392b",
    lane_opacity=0.25,
)
