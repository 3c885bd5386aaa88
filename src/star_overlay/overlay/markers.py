"""User-placed overlay markers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointMarker:
    """A marker pinned to a single world position."""

    x: float
    y: float


# Further marker shapes join this union
MarkerShape = Union[PointMarker]


@dataclass(frozen=True)
class Marker:
    """A marker with its registry id and optional display text."""

    id: int
    shape: MarkerShape
    text: str | None = None


class MarkerRegistry:
    """Ordered store of markers with ids that are never reused."""

    def __init__(self) -> None:
        self._markers: list[Marker] = []
        self._last_id = 0

    def add_point(self, text: str | None, x: float, y: float) -> int:
        """Add a point marker and return its id."""
        self._last_id += 1
        self._markers.append(
            Marker(id=self._last_id, shape=PointMarker(x, y), text=text)
        )
        logger.debug("Added marker %d at (%.1f, %.1f)", self._last_id, x, y)
        return self._last_id

    def remove(self, marker_id: int) -> None:
        """Remove a marker; unknown ids are ignored."""
        self._markers = [m for m in self._markers if m.id != marker_id]

    def clear(self) -> None:
        self._markers = []

    def get(self, marker_id: int) -> Marker | None:
        for marker in self._markers:
            if marker.id == marker_id:
                return marker
        return None

    def __iter__(self) -> Iterator[Marker]:
        return iter(list(self._markers))

    def __len__(self) -> int:
        return len(self._markers)
