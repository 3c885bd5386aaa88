"""Overlay layout engine: orchestrates the refresh pipeline.

Scales the system into the viewport, then runs radius shrinking, initial
label placement and label relaxation over the known objects.  The result
is an immutable snapshot; a new one is built from scratch on every
refresh.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from star_overlay.layout.constants import (
    CHAR_WIDTH,
    DEFAULT_RESOLUTION,
    FONT_HEIGHT,
    FOOTPRINT_PAD,
    JUMP_MIN_RADIUS,
    MAX_ITERATIONS,
    PLANET_MIN_RADIUS,
    RESOLUTION_FACTOR,
)
from star_overlay.layout.placement import LabelItem, Placement, initial_offsets
from star_overlay.layout.radii import solve_radii
from star_overlay.layout.relaxation import relax_labels
from star_overlay.parser.model import MapObject, ObjectKind, SystemMap

logger = logging.getLogger(__name__)


def _approx_width(text: str) -> float:
    return len(text) * CHAR_WIDTH


@dataclass
class TextMetrics:
    """Measures rendered label text in screen pixels."""

    width: Callable[[str], float] = _approx_width
    height: float = FONT_HEIGHT


@dataclass(frozen=True)
class LayoutState:
    """Computed footprint and label position of one object."""

    object_id: str
    radius: float
    offset: tuple[float, float]
    placement: Placement
    text_width: float
    text_height: float


@dataclass(frozen=True)
class OverlayLayout:
    """Snapshot produced by one refresh."""

    resolution: float = DEFAULT_RESOLUTION
    states: dict[str, LayoutState] = field(default_factory=dict)
    iterations: int = 0
    converged: bool = True


_MIN_RADIUS = {
    ObjectKind.PLANET: PLANET_MIN_RADIUS,
    ObjectKind.JUMP: JUMP_MIN_RADIUS,
}


def compute_resolution(
    objects: list[MapObject],
    viewport_width: float,
    viewport_height: float,
) -> float:
    """World units per pixel needed to fit every object in the viewport.

    Unknown objects count too, so the view does not jump around as the
    system gets explored.
    """
    max_x = max((abs(o.x) for o in objects), default=0.0)
    max_y = max((abs(o.y) for o in objects), default=0.0)
    resolution = RESOLUTION_FACTOR * max(
        max_x / viewport_width, max_y / viewport_height
    )
    if resolution <= 0.0:
        return DEFAULT_RESOLUTION
    return resolution


def initial_radius(obj: MapObject, resolution: float) -> float:
    """Screen radius of a footprint before shrinking."""
    return max(FOOTPRINT_PAD + obj.radius / resolution, _MIN_RADIUS[obj.kind])


def compute_layout(
    system: SystemMap,
    viewport_width: float,
    viewport_height: float,
    metrics: TextMetrics | None = None,
    max_iterations: int = MAX_ITERATIONS,
) -> OverlayLayout:
    """Compute footprint radii and label offsets for every known object."""
    metrics = metrics or TextMetrics()
    objects = system.known_objects()

    if not objects:
        logger.info("No known objects in %r, using default resolution", system.title)
        return OverlayLayout()

    resolution = compute_resolution(
        list(system.objects.values()), viewport_width, viewport_height
    )

    centers = [(o.x / resolution, o.y / resolution) for o in objects]
    radii = solve_radii(centers, [initial_radius(o, resolution) for o in objects])

    items = [
        LabelItem(
            cx=cx,
            cy=cy,
            radius=r,
            text_width=metrics.width(o.label),
            text_height=metrics.height,
        )
        for o, (cx, cy), r in zip(objects, centers, radii)
    ]
    placements = initial_offsets(items)
    relaxed = relax_labels(
        items, [offset for _, offset in placements], max_iterations=max_iterations
    )

    states = {
        o.id: LayoutState(
            object_id=o.id,
            radius=item.radius,
            offset=offset,
            placement=placement,
            text_width=item.text_width,
            text_height=item.text_height,
        )
        for o, item, (placement, _), offset in zip(
            objects, items, placements, relaxed.offsets
        )
    }
    logger.info(
        "Laid out %d objects at resolution %.3f (%d sweeps, converged=%s)",
        len(states), resolution, relaxed.iterations, relaxed.converged,
    )
    return OverlayLayout(
        resolution=resolution,
        states=states,
        iterations=relaxed.iterations,
        converged=relaxed.converged,
    )
