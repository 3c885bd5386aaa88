"""Tests for the overlay layout engine."""

import pytest

from star_overlay.layout.constants import DEFAULT_RESOLUTION, FLOOR_RADIUS
from star_overlay.layout.engine import (
    TextMetrics,
    compute_layout,
    compute_resolution,
    initial_radius,
)
from star_overlay.layout.placement import Placement
from star_overlay.parser.model import MapObject, ObjectKind, SystemMap


def _planet(id, x, y, radius=100.0, known=True):
    return MapObject(id=id, kind=ObjectKind.PLANET, name=id, x=x, y=y,
                     radius=radius, known=known)


def _jump(id, x, y, radius=60.0, known=True):
    return MapObject(id=id, kind=ObjectKind.JUMP, name=id, x=x, y=y,
                     radius=radius, known=known)


def _system(*objects):
    system = SystemMap(title="Test")
    for obj in objects:
        system.add_object(obj)
    return system


def test_resolution_from_largest_extent():
    objects = [_planet("a", 1200, 0), _planet("b", 0, -300)]
    assert compute_resolution(objects, 800, 600) == pytest.approx(3.6)


def test_resolution_uses_vertical_extent():
    objects = [_planet("a", 100, 0), _planet("b", 0, -1200)]
    assert compute_resolution(objects, 800, 600) == pytest.approx(4.8)


def test_resolution_defaults_when_empty():
    assert compute_resolution([], 800, 600) == DEFAULT_RESOLUTION


def test_resolution_defaults_when_degenerate():
    assert compute_resolution([_planet("a", 0, 0)], 800, 600) == DEFAULT_RESOLUTION


def test_initial_radius_per_kind_minimum():
    assert initial_radius(_planet("a", 0, 0, radius=0.0), 10.0) == 7.5
    assert initial_radius(_jump("j", 0, 0, radius=0.0), 10.0) == 5.0
    assert initial_radius(_planet("a", 0, 0, radius=300.0), 10.0) == 32.0


def test_empty_system_uses_default_resolution():
    layout = compute_layout(SystemMap(), 800, 600)
    assert layout.resolution == DEFAULT_RESOLUTION
    assert layout.states == {}


def test_unknown_objects_only():
    layout = compute_layout(_system(_planet("a", 1000, 0, known=False)), 800, 600)
    assert layout.resolution == DEFAULT_RESOLUTION
    assert layout.states == {}


def test_isolated_object_scenario():
    layout = compute_layout(_system(_planet("a", 1000, 0)), 800, 600)
    assert layout.resolution == pytest.approx(3.0)
    state = layout.states["a"]
    radius = 2.0 + 100.0 / 3.0
    assert state.radius == pytest.approx(radius)
    assert state.placement is Placement.RIGHT
    # Initial right-of offset, untouched by relaxation
    assert state.offset == pytest.approx((radius + 5.1, -7.0))
    assert layout.converged


def test_unknown_objects_count_toward_extent():
    system = _system(_planet("a", 100, 0), _planet("far", 4000, 0, known=False))
    layout = compute_layout(system, 800, 600)
    assert layout.resolution == pytest.approx(12.0)
    assert list(layout.states) == ["a"]


def test_jumps_laid_out_before_planets():
    system = _system(_planet("p", 1000, 0), _jump("j", -1000, 0))
    layout = compute_layout(system, 800, 600)
    assert list(layout.states) == ["j", "p"]


def test_crowded_objects_shrink_and_floor():
    system = _system(
        _planet("a", 0, 0, radius=2000),
        _planet("b", 30, 0, radius=2000),
        _planet("c", 3000, 2000),
    )
    layout = compute_layout(system, 800, 600)
    assert layout.states["a"].radius == FLOOR_RADIUS
    assert layout.states["b"].radius == FLOOR_RADIUS
    assert layout.iterations <= 15


def test_text_metrics_are_used():
    metrics = TextMetrics(width=lambda text: 100.0, height=20.0)
    layout = compute_layout(_system(_planet("a", 1000, 0)), 800, 600, metrics)
    state = layout.states["a"]
    assert state.text_width == 100.0
    assert state.text_height == 20.0
    assert state.offset[1] == pytest.approx(-10.0)


def test_layout_is_recomputed_from_scratch():
    system = _system(_planet("a", 1000, 0), _planet("b", -1000, 0))
    first = compute_layout(system, 800, 600)
    system.objects["b"].known = False
    second = compute_layout(system, 800, 600)
    assert list(second.states) == ["a"]
    assert first.resolution == second.resolution
    assert first.states["a"] == second.states["a"]
