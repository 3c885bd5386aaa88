"""Dark theme, the overlay's in-game look."""

from star_overlay.render.style import Theme

DARK_THEME = Theme(
    name="dark",
    background_color="#000000",
    background_opacity=0.6,
    planet_fill="#5fa8d3",
    jump_fill="#c0c0c0",
    footprint_stroke="#1c1c1c",
    footprint_stroke_width=1.0,
    label_color="#e0e0e0",
    label_font_family="'Helvetica Neue', Helvetica, Arial, sans-serif",
    label_font_size=12.0,
    title_color="#ffffff",
    title_font_size=20.0,
    marker_color="#ffd23f",
    lane_friend="#4cd137",
    lane_neutral="#dcdde1",
    lane_hostile="#e84118",
)
