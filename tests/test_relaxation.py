"""Tests for label relaxation."""

import pytest

from star_overlay.layout.collision import Box
from star_overlay.layout.placement import LabelItem, initial_offsets
from star_overlay.layout.relaxation import (
    ForceAccumulator,
    ForceCategory,
    relax_labels,
)


def _item(cx, cy, radius=4.0, width=40.0, height=14.0):
    return LabelItem(cx=cx, cy=cy, radius=radius, text_width=width, text_height=height)


def _crowd():
    return [
        _item(0, 0),
        _item(0, 10),
        _item(12, 4, width=60.0),
        _item(-20, 8, width=30.0),
        _item(6, -12),
    ]


def _offsets(items):
    return [offset for _, offset in initial_offsets(items)]


def test_empty_input_is_skipped():
    result = relax_labels([], [])
    assert result.offsets == []
    assert result.iterations == 0


def test_isolated_item_does_not_move():
    item = _item(0, 0)
    initial = _offsets([item])
    result = relax_labels([item], initial)
    assert result.displacements == [(0.0, 0.0)]
    assert result.offsets == initial
    assert result.iterations == 1
    assert result.converged


def test_overlapping_labels_move_apart_vertically():
    lower = _item(0, 0)
    upper = _item(0, 10)
    initial = [(9.1, -7.0), (9.1, -7.0)]
    result = relax_labels([lower, upper], initial)
    (_, dy_lower), (_, dy_upper) = result.displacements
    assert dy_lower < 0.0 < dy_upper
    assert dy_lower == pytest.approx(-dy_upper)


def test_vertical_correction_is_stiffer():
    lower = _item(0, 0)
    upper = _item(0, 10)
    initial = [(9.1, -7.0), (9.1, -7.0)]
    result = relax_labels([lower, upper], initial, max_iterations=1)
    # First sweep: 50px horizontal and 14px vertical penetration
    dx, dy = result.displacements[1]
    assert dx == pytest.approx(0.015 * 50.0)
    assert dy == pytest.approx(0.045 * 14.0)


def test_never_exceeds_iteration_budget():
    items = _crowd()
    result = relax_labels(items, _offsets(items), max_iterations=3, eps=-1.0)
    assert result.iterations == 3
    assert not result.converged


def test_deterministic():
    items = _crowd()
    initial = _offsets(items)
    first = relax_labels(items, initial)
    second = relax_labels(items, initial)
    assert first.offsets == second.offsets
    assert first.iterations == second.iterations


def test_independent_of_item_order():
    items = _crowd()
    initial = _offsets(items)
    forward = relax_labels(items, initial)
    backward = relax_labels(items[::-1], initial[::-1])
    for a, b in zip(forward.offsets, backward.offsets[::-1]):
        assert a == pytest.approx(b, abs=1e-9)


def test_final_offset_is_initial_plus_displacement():
    items = _crowd()
    initial = _offsets(items)
    result = relax_labels(items, initial)
    for (ox, oy), (dx, dy), final in zip(initial, result.displacements, result.offsets):
        assert final == (ox + dx, oy + dy)


def test_force_accumulator_rows_are_separate():
    forces = ForceAccumulator(2)
    assert forces.get(0, 1, ForceCategory.LABEL) == (0.0, 0.0)
    forces.push(0, 1, ForceCategory.LABEL, Box(0, 0, 10, 10), Box(2, 3, 10, 10), 5.0)
    forces.push(0, 0, ForceCategory.FOOTPRINT, Box(0, 0, 10, 10), Box(2, 3, 10, 10), 5.0)
    assert forces.total(0) == (-16.0, -14.0)
    assert forces.total(1) == (0.0, 0.0)
