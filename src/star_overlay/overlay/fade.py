"""Fade-in animation for overlay objects."""

from __future__ import annotations

from star_overlay.layout.constants import FADE_RATE


class FadeAnimation:
    """Per-key alpha ramping from 0 to 1.

    Keys that were already known when the overlay opened start fully
    visible; the rest fade in at ``rate`` per second.  Alphas only go
    down on :meth:`reset`.
    """

    def __init__(self, rate: float = FADE_RATE) -> None:
        self.rate = rate
        self.elapsed = 0.0
        self._alpha: dict[str, float] = {}

    def reset(self, known: dict[str, bool]) -> None:
        self._alpha = {key: 1.0 if is_known else 0.0 for key, is_known in known.items()}
        self.elapsed = 0.0

    def advance(self, dt: float) -> None:
        self.elapsed += dt
        step = self.rate * max(dt, 0.0)
        for key, alpha in self._alpha.items():
            if alpha < 1.0:
                self._alpha[key] = min(alpha + step, 1.0)

    def track(self, key: str, known: bool = False) -> None:
        """Start animating a key that appeared after the last reset."""
        self._alpha.setdefault(key, 1.0 if known else 0.0)

    def alpha(self, key: str) -> float:
        return self._alpha.get(key, 0.0)

    def prune(self, keys: set[str]) -> None:
        """Stop tracking every key not in ``keys``."""
        self._alpha = {k: a for k, a in self._alpha.items() if k in keys}

    def __contains__(self, key: str) -> bool:
        return key in self._alpha
