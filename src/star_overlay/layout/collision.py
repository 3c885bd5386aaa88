"""Rectangle overlap forces used by label placement and relaxation."""

from __future__ import annotations

from dataclasses import dataclass

from star_overlay.layout.constants import TEXT_PAD


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle anchored at its minimum corner."""

    x: float
    y: float
    w: float
    h: float

    @classmethod
    def around(cls, cx: float, cy: float, radius: float) -> Box:
        """Square bounding a circular footprint."""
        return cls(cx - radius, cy - radius, 2 * radius, 2 * radius)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + 0.5 * self.w, self.y + 0.5 * self.h)


def force_collision(
    a: Box,
    b: Box,
    prior: tuple[float, float] = (0.0, 0.0),
    tolerance: float = TEXT_PAD,
) -> tuple[float, float]:
    """Return the force pushing box ``a`` out of box ``b``.

    Each axis is resolved on its own.  The x component is zero unless the
    boxes overlap vertically by more than ``tolerance`` (and vice versa);
    otherwise it is the translation separating them along x, signed away
    from ``b``'s center.

    ``prior`` is the force computed for the same pair on the previous
    sweep.  The new translation is added to it and the sum is projected
    onto the half-line pointing away from ``b``, so the force keeps growing
    while the boxes stay in contact and vanishes once they separate.
    """
    fx, fy = prior
    acx, acy = a.center
    bcx, bcy = b.center

    if a.y + a.h < b.y + tolerance or a.y + tolerance > b.y + b.h:
        fx = 0.0
    elif acx < bcx:
        fx = min(0.0, fx + b.x - (a.x + a.w))
    else:
        fx = max(0.0, fx + (b.x + b.w) - a.x)

    if a.x + a.w < b.x + tolerance or a.x + tolerance > b.x + b.w:
        fy = 0.0
    elif acy < bcy:
        fy = min(0.0, fy + b.y - (a.y + a.h))
    else:
        fy = max(0.0, fy + (b.y + b.h) - a.y)

    return fx, fy
