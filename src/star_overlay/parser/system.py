"""Parser for star system overlay definitions.

One directive per line, fields separated by ``|``::

    title: Alpha Centauri
    planet: earth | Earth | 1200 | -300 | 600
    jump: j1 | Sol | -9000 | 4000 | 60 | unknown | unexplored
    lane: earth | j1 | friend
    marker: 500 | 500 | Rendezvous

Lines starting with ``%%`` are comments.
"""

from __future__ import annotations

from star_overlay.parser.model import (
    MapObject,
    ObjectKind,
    SafeLane,
    Standing,
    SystemMap,
)

_PLANET_SYMBOL = "⊕ "
_JUMP_SYMBOL = "⇒ "


def parse_system(text: str) -> SystemMap:
    """Parse a star system definition."""
    system = SystemMap()
    pending_lanes: list[tuple[int, SafeLane]] = []

    for lineno, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("%%"):
            continue

        key, sep, rest = stripped.partition(":")
        if not sep:
            raise ValueError(f"Line {lineno}: expected '<directive>: ...', got {stripped!r}")
        key = key.strip().lower()
        fields = [f.strip() for f in rest.split("|")]

        if key == "title":
            system.title = rest.strip()
        elif key in ("planet", "jump"):
            system.add_object(_parse_object(lineno, ObjectKind(key), fields))
        elif key == "lane":
            pending_lanes.append((lineno, _parse_lane(lineno, fields)))
        elif key == "marker":
            system.markers.append(_parse_marker(lineno, fields))
        else:
            raise ValueError(f"Line {lineno}: unknown directive {key!r}")

    # Lanes may reference objects declared later in the file
    for lineno, lane in pending_lanes:
        for end in (lane.source, lane.target):
            if end not in system.objects:
                raise ValueError(f"Line {lineno}: lane references unknown object {end!r}")
        system.add_lane(lane)

    return system


def _number(lineno: int, value: str, what: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Line {lineno}: invalid {what} {value!r}") from None


def _parse_object(lineno: int, kind: ObjectKind, fields: list[str]) -> MapObject:
    """Parse ``id | name | x | y | radius [| flags...]``."""
    if len(fields) < 5:
        raise ValueError(
            f"Line {lineno}: {kind.value} needs id | name | x | y | radius"
        )
    flags = {f.lower() for f in fields[5:] if f}
    unsupported = flags - {"unknown", "unexplored"}
    if unsupported:
        raise ValueError(f"Line {lineno}: unknown flags {sorted(unsupported)}")

    return MapObject(
        id=fields[0],
        kind=kind,
        name=fields[1] or fields[0],
        x=_number(lineno, fields[2], "x"),
        y=_number(lineno, fields[3], "y"),
        radius=_number(lineno, fields[4], "radius"),
        known="unknown" not in flags,
        symbol=_PLANET_SYMBOL if kind is ObjectKind.PLANET else _JUMP_SYMBOL,
        target_known="unexplored" not in flags,
    )


def _parse_lane(lineno: int, fields: list[str]) -> SafeLane:
    """Parse ``source | target [| standing]``."""
    if len(fields) < 2 or not fields[0] or not fields[1]:
        raise ValueError(f"Line {lineno}: lane needs source | target")
    standing = Standing.NEUTRAL
    if len(fields) > 2 and fields[2]:
        try:
            standing = Standing(fields[2].lower())
        except ValueError:
            raise ValueError(f"Line {lineno}: invalid standing {fields[2]!r}") from None
    return SafeLane(source=fields[0], target=fields[1], standing=standing)


def _parse_marker(lineno: int, fields: list[str]) -> tuple[float, float, str | None]:
    """Parse ``x | y [| text]``."""
    if len(fields) < 2:
        raise ValueError(f"Line {lineno}: marker needs x | y")
    text = fields[2] if len(fields) > 2 and fields[2] else None
    return (_number(lineno, fields[0], "x"), _number(lineno, fields[1], "y"), text)
