#!/usr/bin/env python3
"""Batch render all example systems to SVG and report residual overlap.

Outputs go to /tmp/star_overlay_renders/ unless -o is given.

Usage:
    python scripts/render_examples.py [--width 800] [--height 600] [-o DIR]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from star_overlay.layout.collision import Box, force_collision  # noqa: E402
from star_overlay.overlay import OverlaySession  # noqa: E402
from star_overlay.parser import parse_system  # noqa: E402
from star_overlay.render import render_svg  # noqa: E402
from star_overlay.themes import THEMES  # noqa: E402

OUTPUT_DIR = Path("/tmp/star_overlay_renders")
EXAMPLES_DIR = project_root / "examples"


def count_overlaps(session: OverlaySession) -> int:
    """Count label boxes still touching another label or a footprint."""
    boxes = []
    footprints = []
    for object_id, state in session.layout.states.items():
        obj = session.system.objects[object_id]
        cx = obj.x / session.layout.resolution
        cy = obj.y / session.layout.resolution
        dx, dy = state.offset
        boxes.append(Box(cx + dx, cy + dy, state.text_width, state.text_height))
        footprints.append(Box.around(cx, cy, state.radius))

    overlaps = 0
    for i, box in enumerate(boxes):
        others = footprints + [b for j, b in enumerate(boxes) if j != i]
        if any(force_collision(box, other, tolerance=0.0) != (0.0, 0.0) for other in others):
            overlaps += 1
    return overlaps


def render_file(path: Path, output_dir: Path, width: int, height: int) -> tuple[str, list[str]]:
    """Parse, lay out and render a system file.

    Returns (name, list_of_issues).
    """
    name = path.stem
    issues: list[str] = []

    try:
        system = parse_system(path.read_text(encoding="utf-8"))
    except ValueError as e:
        return name, [f"PARSE ERROR: {e}"]

    session = OverlaySession(system, width, height)
    session.open()

    if not session.layout.converged:
        issues.append(f"relaxation did not converge in {session.layout.iterations} sweeps")
    overlaps = count_overlaps(session)
    if overlaps:
        issues.append(f"{overlaps} labels still overlap")

    for theme_name, theme in THEMES.items():
        svg_path = output_dir / f"{name}_{theme_name}.svg"
        svg_path.write_text(render_svg(session, theme), encoding="utf-8")

    return name, issues


def main():
    parser = argparse.ArgumentParser(description="Batch render example systems")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("-o", "--output-dir", type=Path, default=OUTPUT_DIR)
    args = parser.parse_args()

    args.output_dir.mkdir(parents=True, exist_ok=True)
    results = dict(
        render_file(path, args.output_dir, args.width, args.height)
        for path in sorted(EXAMPLES_DIR.glob("*.sys"))
    )

    failed = [name for name, issues in results.items()
              if any(i.startswith("PARSE ERROR") for i in issues)]
    flagged = [name for name, issues in results.items() if issues and name not in failed]

    for name in failed + flagged:
        print(f"{name}:")
        for issue in results[name]:
            print(f"  {issue}")

    clean = len(results) - len(failed) - len(flagged)
    print(f"{len(results)} systems: {clean} clean, {len(flagged)} with layout issues, "
          f"{len(failed)} failed to parse -> {args.output_dir}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
