"""Render constants used across render modules.

Theme-dependent values remain in style.py.
"""

# ---------------------------------------------------------------------------
# Canvas
# ---------------------------------------------------------------------------
DEFAULT_WIDTH: int = 800
"""Default overlay viewport width in pixels."""

DEFAULT_HEIGHT: int = 600
"""Default overlay viewport height in pixels."""

TITLE_X: float = 16.0
"""Left inset of the title text."""

TITLE_Y: float = 30.0
"""Baseline of the title text."""

# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------
MARKER_TEXT_GAP: float = 10.0
"""Horizontal distance from a marker center to its text."""

MARKER_STROKE_WIDTH: float = 2.0
"""Stroke width of marker rings."""
