"""Tests for the fade-in animation."""

import pytest

from star_overlay.overlay.fade import FadeAnimation


def test_reset_from_known_flags():
    fade = FadeAnimation()
    fade.reset({"a": True, "b": False})
    assert fade.alpha("a") == 1.0
    assert fade.alpha("b") == 0.0


def test_alpha_ramps_at_rate():
    fade = FadeAnimation(rate=1.0 / 3.0)
    fade.reset({"b": False})
    fade.advance(1.5)
    assert fade.alpha("b") == pytest.approx(0.5)
    assert fade.elapsed == pytest.approx(1.5)


def test_alpha_clamped_to_one():
    fade = FadeAnimation()
    fade.reset({"b": False})
    fade.advance(10.0)
    assert fade.alpha("b") == 1.0


def test_alpha_never_decreases():
    fade = FadeAnimation()
    fade.reset({"b": False})
    fade.advance(1.0)
    before = fade.alpha("b")
    fade.advance(-5.0)
    assert fade.alpha("b") == before


def test_reset_starts_over():
    fade = FadeAnimation()
    fade.reset({"b": False})
    fade.advance(10.0)
    fade.reset({"b": False})
    assert fade.alpha("b") == 0.0
    assert fade.elapsed == 0.0


def test_track_keeps_existing_alpha():
    fade = FadeAnimation()
    fade.reset({"b": False})
    fade.advance(1.5)
    fade.track("b", known=True)
    fade.track("c", known=True)
    assert fade.alpha("b") == pytest.approx(0.5)
    assert fade.alpha("c") == 1.0


def test_prune_drops_other_keys():
    fade = FadeAnimation()
    fade.reset({"a": True, "b": False})
    fade.prune({"a"})
    assert "a" in fade
    assert "b" not in fade
    assert fade.alpha("a") == 1.0
