"""World to overlay screen coordinate mapping."""

from __future__ import annotations

from dataclasses import dataclass

from star_overlay.layout.constants import DEFAULT_RESOLUTION


@dataclass(frozen=True)
class CoordinateMapper:
    """Maps world positions onto the overlay, centered on ``center``.

    ``resolution`` is in world units per screen pixel and is always
    positive.
    """

    center_x: float = 0.0
    center_y: float = 0.0
    resolution: float = DEFAULT_RESOLUTION

    def __post_init__(self) -> None:
        if not self.resolution > 0.0:
            raise ValueError(f"resolution must be positive, got {self.resolution}")

    def world_to_screen(self, x: float, y: float) -> tuple[float, float]:
        return (
            self.center_x + x / self.resolution,
            self.center_y + y / self.resolution,
        )

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        return (
            (sx - self.center_x) * self.resolution,
            (sy - self.center_y) * self.resolution,
        )

    def to_world_length(self, pixels: float) -> float:
        return pixels * self.resolution
