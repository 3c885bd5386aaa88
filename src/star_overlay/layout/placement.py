"""Initial label placement.

Each label is tried on the four sides of its footprint and the side
colliding least with the footprints of all laid-out objects wins.  The
label's own footprint is included, so clustered objects tend to put their
labels on alternating sides.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from star_overlay.layout.collision import Box, force_collision
from star_overlay.layout.constants import LABEL_GAP, TEXT_PAD


class Placement(Enum):
    """Canonical label positions, in the order they are tried."""

    RIGHT = "right"
    LEFT = "left"
    ABOVE = "above"
    BELOW = "below"


@dataclass
class LabelItem:
    """An object's footprint and label extent, in screen pixels.

    ``cx``/``cy`` are the object's position relative to the overlay
    center.  Label offsets are measured from that point to the text
    origin; the label box adds ``pad`` on every side.
    """

    cx: float
    cy: float
    radius: float
    text_width: float
    text_height: float

    def footprint(self) -> Box:
        return Box.around(self.cx, self.cy, self.radius)

    def label_box(self, dx: float, dy: float, pad: float = TEXT_PAD) -> Box:
        return Box(
            self.cx + dx - pad,
            self.cy + dy - pad,
            self.text_width + 2 * pad,
            self.text_height + 2 * pad,
        )


def candidate_offsets(
    item: LabelItem,
    pad: float = TEXT_PAD,
    gap: float = LABEL_GAP,
) -> list[tuple[Placement, tuple[float, float]]]:
    """Return the label offset for each canonical placement, in try order."""
    w = item.text_width + 2 * pad
    h = item.text_height + 2 * pad
    r = item.radius
    return [
        (Placement.RIGHT, (r + pad + gap, -item.text_height / 2)),
        (Placement.LEFT, (-r - gap - w, -item.text_height / 2)),
        (Placement.ABOVE, (-item.text_width / 2, r + pad + gap)),
        (Placement.BELOW, (-item.text_width / 2, -r - gap - h)),
    ]


def footprint_cost(
    box: Box,
    items: list[LabelItem],
    pad: float = TEXT_PAD,
) -> float:
    """Total push magnitude between ``box`` and every footprint."""
    total = 0.0
    for other in items:
        fx, fy = force_collision(box, other.footprint(), tolerance=pad)
        total += abs(fx) + abs(fy)
    return total


def select_placement(
    item: LabelItem,
    items: list[LabelItem],
    pad: float = TEXT_PAD,
    gap: float = LABEL_GAP,
) -> tuple[Placement, tuple[float, float], float]:
    """Pick the placement with the lowest footprint cost.

    Returns ``(placement, offset, cost)``.  Ties keep the earlier
    placement, and the first collision-free placement is taken without
    looking further.
    """
    best: tuple[Placement, tuple[float, float], float] | None = None
    for placement, (dx, dy) in candidate_offsets(item, pad, gap):
        cost = footprint_cost(item.label_box(dx, dy, pad), items, pad)
        if best is None or cost < best[2]:
            best = (placement, (dx, dy), cost)
        if cost == 0.0:
            break
    return best


def initial_offsets(
    items: list[LabelItem],
    pad: float = TEXT_PAD,
    gap: float = LABEL_GAP,
) -> list[tuple[Placement, tuple[float, float]]]:
    """Select a placement for every item against all footprints."""
    result = []
    for item in items:
        placement, offset, _ = select_placement(item, items, pad, gap)
        result.append((placement, offset))
    return result
