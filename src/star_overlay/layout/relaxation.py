"""Label relaxation by projected force iteration.

After the initial placement, labels are nudged away from footprints and
from each other.  This is an Uzawa-style iteration: we minimize the
(weighted) squared length of the label displacements under the
constraint that boxes do not interpenetrate.  The contact forces play the
role of the dual variables; each sweep adds the current penetration to
them and projects them back onto the admissible half-line, and the
displacement is the force scaled by a diagonal stiffness.

As with any Uzawa scheme the constraints are not necessarily satisfied
when the iteration budget runs out; crowded scenes may keep some overlap.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from star_overlay.layout.collision import Box, force_collision
from star_overlay.layout.constants import (
    CONVERGENCE_EPS,
    MAX_ITERATIONS,
    STIFFNESS_X,
    STIFFNESS_Y,
    TEXT_PAD,
)
from star_overlay.layout.placement import LabelItem

logger = logging.getLogger(__name__)


class ForceCategory(Enum):
    """What a contributor pushes a label with."""

    FOOTPRINT = "footprint"
    LABEL = "label"


class ForceAccumulator:
    """Contact forces received by each label, per contributor.

    Forces are indexed by ``(item, contributor, category)``.  Only the row
    of the item being processed is written during a sweep, so every other
    row still holds the previous sweep's values.
    """

    def __init__(self, items: int) -> None:
        self._rows: list[dict[tuple[int, ForceCategory], tuple[float, float]]] = [
            {} for _ in range(items)
        ]

    def get(
        self, item: int, contributor: int, category: ForceCategory
    ) -> tuple[float, float]:
        return self._rows[item].get((contributor, category), (0.0, 0.0))

    def push(
        self,
        item: int,
        contributor: int,
        category: ForceCategory,
        box: Box,
        obstacle: Box,
        tolerance: float = TEXT_PAD,
    ) -> tuple[float, float]:
        """Update the force ``obstacle`` exerts on ``box`` and return it."""
        prior = self.get(item, contributor, category)
        force = force_collision(box, obstacle, prior, tolerance)
        self._rows[item][(contributor, category)] = force
        return force

    def total(self, item: int) -> tuple[float, float]:
        """Sum of all forces acting on ``item``."""
        sx = sy = 0.0
        for fx, fy in self._rows[item].values():
            sx += fx
            sy += fy
        return sx, sy


@dataclass
class RelaxationResult:
    """Outcome of a relaxation run."""

    offsets: list[tuple[float, float]] = field(default_factory=list)
    """Final label offsets (initial placement plus relaxation)."""

    displacements: list[tuple[float, float]] = field(default_factory=list)
    """Relaxation part of each offset."""

    iterations: int = 0
    converged: bool = True
    max_delta: float = 0.0


def relax_labels(
    items: list[LabelItem],
    initial: list[tuple[float, float]],
    max_iterations: int = MAX_ITERATIONS,
    kx: float = STIFFNESS_X,
    ky: float = STIFFNESS_Y,
    eps: float = CONVERGENCE_EPS,
    pad: float = TEXT_PAD,
) -> RelaxationResult:
    """Refine label offsets against footprints and other labels.

    All forces in a sweep are computed from the displacements committed
    by the previous sweep, and the new displacements are committed
    together at the end, so the result does not depend on item order.
    The run stops after the first sweep whose largest per-item change
    (L1) is at most ``eps``, or after ``max_iterations`` sweeps.
    """
    if not items:
        return RelaxationResult()

    forces = ForceAccumulator(len(items))
    displacements = [(0.0, 0.0)] * len(items)
    result = RelaxationResult(converged=False)

    for iteration in range(max_iterations):
        delta = 0.0
        updated = []
        for i, item in enumerate(items):
            box = item.label_box(
                initial[i][0] + displacements[i][0],
                initial[i][1] + displacements[i][1],
                pad,
            )
            for j, other in enumerate(items):
                forces.push(i, j, ForceCategory.FOOTPRINT, box, other.footprint(), pad)
                if j == i:
                    continue
                other_box = other.label_box(
                    initial[j][0] + displacements[j][0],
                    initial[j][1] + displacements[j][1],
                    pad,
                )
                forces.push(i, j, ForceCategory.LABEL, box, other_box, pad)

            sx, sy = forces.total(i)
            dx, dy = kx * sx, ky * sy
            old_dx, old_dy = displacements[i]
            delta = max(delta, abs(old_dx - dx) + abs(old_dy - dy))
            updated.append((dx, dy))

        displacements = updated
        result.iterations = iteration + 1
        result.max_delta = delta
        logger.debug("Relaxation sweep %d: max change %.3f", iteration + 1, delta)
        if delta <= eps:
            result.converged = True
            break

    if not result.converged:
        logger.debug(
            "Relaxation stopped after %d sweeps without converging", result.iterations
        )

    result.displacements = displacements
    result.offsets = [
        (ox + dx, oy + dy) for (ox, oy), (dx, dy) in zip(initial, displacements)
    ]
    return result
