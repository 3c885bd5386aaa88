"""Shared fixtures."""

from pathlib import Path

import pytest

from star_overlay.parser import parse_system

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"
ALPHA_CENTAURI = EXAMPLES_DIR / "alpha_centauri.sys"


@pytest.fixture
def system():
    return parse_system(ALPHA_CENTAURI.read_text(encoding="utf-8"))
