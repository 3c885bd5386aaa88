"""Layout engine for overlay footprints and labels."""

from star_overlay.layout.engine import (
    LayoutState,
    OverlayLayout,
    TextMetrics,
    compute_layout,
    compute_resolution,
)

__all__ = [
    "LayoutState",
    "OverlayLayout",
    "TextMetrics",
    "compute_layout",
    "compute_resolution",
]
