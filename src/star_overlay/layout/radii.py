"""Footprint radius shrinking.

Footprints of objects that sit close together are shrunk until no two
of them interpenetrate, then every radius is raised to a fixed floor so
markers stay clickable.  The floor is applied last and never re-checked:
in crowded scenes clamped footprints may overlap again.
"""

from __future__ import annotations

import logging
import math

import networkx as nx

from star_overlay.layout.constants import FLOOR_RADIUS, SHRINK_EPSILON

logger = logging.getLogger(__name__)


def conflict_graph(
    centers: list[tuple[float, float]],
    radii: list[float],
) -> nx.Graph:
    """Build a graph whose edges are the pairs of overlapping footprints.

    Each edge carries the center distance as its ``dist`` attribute.
    """
    graph = nx.Graph()
    for i in range(len(centers)):
        for j in range(i + 1, len(centers)):
            dist = math.hypot(
                centers[i][0] - centers[j][0], centers[i][1] - centers[j][1]
            )
            if dist < radii[i] + radii[j]:
                graph.add_edge(i, j, dist=dist)
    return graph


def shrink_radii(
    centers: list[tuple[float, float]],
    radii: list[float],
    epsilon: float = SHRINK_EPSILON,
) -> list[float]:
    """Shrink radii until no pair of footprints overlaps.

    Every round, the smallest ratio ``dist / (r_i + r_j)`` among the
    conflicting pairs (minus ``epsilon``) is applied to all items taking
    part in a conflict.  Radii strictly decrease, so the loop terminates.
    """
    radii = list(radii)
    conflicts = conflict_graph(centers, radii)
    rounds = 0

    while conflicts.number_of_edges() > 0:
        settled = []
        shrink = math.inf
        for i, j, dist in conflicts.edges(data="dist"):
            total = radii[i] + radii[j]
            if total <= 0.0 or dist >= total:
                settled.append((i, j))
            else:
                shrink = min(shrink, dist / total - epsilon)

        conflicts.remove_edges_from(settled)
        conflicts.remove_nodes_from(list(nx.isolates(conflicts)))
        if conflicts.number_of_edges() == 0:
            break

        # Coincident centers give a zero ratio
        shrink = max(shrink, 0.0)
        for i in conflicts.nodes:
            radii[i] *= shrink
        rounds += 1
        logger.debug(
            "Shrink round %d: factor %.6f over %d items",
            rounds, shrink, conflicts.number_of_nodes(),
        )

    return radii


def solve_radii(
    centers: list[tuple[float, float]],
    radii: list[float],
    floor: float = FLOOR_RADIUS,
    epsilon: float = SHRINK_EPSILON,
) -> list[float]:
    """Shrink overlapping footprints, then clamp every radius to ``floor``."""
    return [max(r, floor) for r in shrink_radii(centers, radii, epsilon)]
