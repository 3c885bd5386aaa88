"""Layout constants used across layout modules.

Centralizes the tuning values of the radius solver, label placement and
label relaxation.  Distances are in screen pixels unless noted.
"""

# ---------------------------------------------------------------------------
# Font / text metrics
# ---------------------------------------------------------------------------
CHAR_WIDTH: float = 7.0
"""Approximate pixel width of a single character at default font size."""

FONT_HEIGHT: float = 14.0
"""Approximate pixel height of default font."""

TEXT_PAD: float = 5.0
"""Extra margin around label text, also the collision tolerance.

A large pad lets the relaxation converge in fewer iterations.
"""

LABEL_GAP: float = 0.1
"""Gap between a footprint boundary and a candidate label box."""

# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------
RESOLUTION_FACTOR: float = 2.4
"""Scale applied to the largest extent/viewport ratio (2 * 1.2 margin)."""

DEFAULT_RESOLUTION: float = 50.0
"""World units per pixel when there is nothing to fit in the view."""

# ---------------------------------------------------------------------------
# Footprints
# ---------------------------------------------------------------------------
FOOTPRINT_PAD: float = 2.0
"""Pixels added to a scaled footprint before applying the per-kind minimum."""

PLANET_MIN_RADIUS: float = 7.5
"""Smallest initial footprint of a planet."""

JUMP_MIN_RADIUS: float = 5.0
"""Smallest initial footprint of a jump point."""

FLOOR_RADIUS: float = 4.0
"""Footprint floor applied after the shrink loop converges."""

SHRINK_EPSILON: float = 1.1920929e-07
"""Slack subtracted from each shrink ratio (single precision epsilon)."""

# ---------------------------------------------------------------------------
# Relaxation
# ---------------------------------------------------------------------------
MAX_ITERATIONS: int = 15
"""Maximum number of relaxation sweeps."""

STIFFNESS_X: float = 0.015
"""Horizontal softness factor."""

STIFFNESS_Y: float = 0.045
"""Vertical softness factor (moving along y is usually the right answer)."""

CONVERGENCE_EPS: float = 1.3
"""Largest per-item offset change, in pixels, that counts as converged."""

# ---------------------------------------------------------------------------
# Interaction / animation
# ---------------------------------------------------------------------------
FADE_RATE: float = 1.0 / 3.0
"""Alpha gained per second while an object fades in."""

PLANET_CLICK_RADIUS: float = 10.0
"""Pointer targeting radius for planets, in pixels."""

JUMP_CLICK_RADIUS: float = 15.0
"""Pointer targeting radius for jump points, in pixels."""

HOLD_TO_CLOSE_MS: int = 300
"""Key-up closes the overlay only if it has been open at least this long."""
