"""Overlay session: the state behind one open/close-able system overlay."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from star_overlay.layout.constants import (
    FADE_RATE,
    HOLD_TO_CLOSE_MS,
    JUMP_CLICK_RADIUS,
    PLANET_CLICK_RADIUS,
)
from star_overlay.layout.engine import OverlayLayout, TextMetrics, compute_layout
from star_overlay.overlay.fade import FadeAnimation
from star_overlay.overlay.mapper import CoordinateMapper
from star_overlay.overlay.markers import MarkerRegistry
from star_overlay.parser.model import MapObject, ObjectKind, SafeLane, SystemMap

logger = logging.getLogger(__name__)

_CLICK_RADIUS = {
    ObjectKind.PLANET: PLANET_CLICK_RADIUS,
    ObjectKind.JUMP: JUMP_CLICK_RADIUS,
}


@dataclass(frozen=True)
class ObjectView:
    """What the renderer needs to draw one object."""

    radius: float
    label_offset: tuple[float, float]
    alpha: float


class OverlaySession:
    """Owns the overlay's open flag, layout snapshot, markers and fades.

    The layout is only recomputed by :meth:`refresh`, which callers must
    invoke whenever the object set or visibility changes.  Everything else
    reads the latest snapshot.
    """

    def __init__(
        self,
        system: SystemMap,
        viewport_width: float,
        viewport_height: float,
        center: tuple[float, float] | None = None,
        metrics: TextMetrics | None = None,
        fade_rate: float = FADE_RATE,
    ) -> None:
        self.system = system
        self.viewport_width = viewport_width
        self.viewport_height = viewport_height
        if center is None:
            center = (viewport_width / 2, viewport_height / 2)
        self.center = center
        self.metrics = metrics or TextMetrics()
        self.markers = MarkerRegistry()
        for x, y, text in system.markers:
            self.markers.add_point(text, x, y)
        self.fade = FadeAnimation(fade_rate)
        self.layout = OverlayLayout()
        self._open = False
        self._opened_at = 0
        self._closed_for_good = False

    # ------------------------------------------------------------------
    # Open / close
    # ------------------------------------------------------------------

    def _check_alive(self) -> None:
        if self._closed_for_good:
            raise RuntimeError("overlay session has been torn down")

    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        """Open the overlay, resetting fades and recomputing the layout."""
        self._check_alive()
        if self._open:
            return
        self._open = True
        logger.debug("Overlay opened for %r", self.system.title)
        self.fade.reset(self._known_keys())
        self.refresh()

    def close(self) -> None:
        self._check_alive()
        self._close()

    def _close(self) -> None:
        if self._open:
            logger.debug("Overlay closed")
        self._open = False

    def key(self, pressed: bool, now_ms: int) -> None:
        """Handle the overlay key.

        Pressing toggles the overlay.  Releasing closes it again only if it
        has been held open long enough, so a long press acts as a peek.
        """
        self._check_alive()
        if pressed:
            if self._open:
                self.close()
            else:
                self.open()
                self._opened_at = now_ms
        elif self._open and now_ms - self._opened_at > HOLD_TO_CLOSE_MS:
            self.close()

    def teardown(self) -> None:
        """Release all state; only :meth:`is_open` and teardown work afterwards."""
        self._close()
        self.markers.clear()
        self.layout = OverlayLayout()
        self.fade.prune(set())
        self._closed_for_good = True

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def refresh(self) -> None:
        """Recompute the layout snapshot.  Does nothing while closed."""
        self._check_alive()
        if not self._open:
            return
        self.layout = compute_layout(
            self.system, self.viewport_width, self.viewport_height, self.metrics
        )
        known = self._known_keys()
        self.fade.prune(set(known))
        for key, is_known in known.items():
            self.fade.track(key, is_known)

    def set_system(self, system: SystemMap) -> None:
        """Swap in a new object set and refresh.

        While closed the old snapshot is dropped; the next open lays out
        the new system.
        """
        self._check_alive()
        self.system = system
        if self._open:
            self.refresh()
        else:
            self.layout = OverlayLayout()

    @property
    def mapper(self) -> CoordinateMapper:
        self._check_alive()
        return CoordinateMapper(self.center[0], self.center[1], self.layout.resolution)

    def world_to_screen(self, x: float, y: float) -> tuple[float, float]:
        return self.mapper.world_to_screen(x, y)

    def screen_to_world(self, sx: float, sy: float) -> tuple[float, float]:
        return self.mapper.screen_to_world(sx, sy)

    def view(self, object_id: str) -> ObjectView:
        """Computed radius, label offset and alpha of a laid-out object."""
        self._check_alive()
        state = self.layout.states[object_id]
        return ObjectView(
            radius=state.radius,
            label_offset=state.offset,
            alpha=self.fade.alpha(object_id),
        )

    def pick(self, sx: float, sy: float) -> MapObject | None:
        """Return the laid-out object nearest to a pointer position.

        An object is in reach within its kind's click radius, or within
        its footprint when that is larger.
        """
        mapper = self.mapper
        x, y = mapper.screen_to_world(sx, sy)
        best = None
        best_dist = math.inf
        for object_id, state in self.layout.states.items():
            obj = self.system.objects[object_id]
            reach = max(_CLICK_RADIUS[obj.kind], state.radius)
            dist = math.hypot(obj.x - x, obj.y - y)
            if dist <= mapper.to_world_length(reach) and dist < best_dist:
                best, best_dist = obj, dist
        return best

    # ------------------------------------------------------------------
    # Animation
    # ------------------------------------------------------------------

    def frame(self, dt: float) -> None:
        """Advance fade animations by ``dt`` seconds while open."""
        self._check_alive()
        if self._open:
            self.fade.advance(dt)

    def lane_alpha(self, lane: SafeLane) -> float:
        self._check_alive()
        return self.fade.alpha(lane.key)

    def visible_lanes(self) -> list[SafeLane]:
        self._check_alive()
        return [lane for lane in self.system.lanes if self.system.lane_known(lane)]

    def _known_keys(self) -> dict[str, bool]:
        keys = {o.id: o.known for o in self.system.objects.values()}
        for lane in self.system.lanes:
            keys[lane.key] = self.system.lane_known(lane)
        return keys

    # ------------------------------------------------------------------
    # Markers
    # ------------------------------------------------------------------

    def add_point(self, text: str | None, x: float, y: float) -> int:
        self._check_alive()
        return self.markers.add_point(text, x, y)

    def remove_marker(self, marker_id: int) -> None:
        self._check_alive()
        self.markers.remove(marker_id)

    def clear_markers(self) -> None:
        self._check_alive()
        self.markers.clear()
