"""Data model for star system overlay maps."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ObjectKind(Enum):
    """Kind of map object shown on the overlay."""

    PLANET = "planet"
    JUMP = "jump"


class Standing(Enum):
    """Faction standing of a safe lane, relative to the viewer."""

    FRIEND = "friend"
    NEUTRAL = "neutral"
    HOSTILE = "hostile"


@dataclass
class MapObject:
    """A fixed-position object with a circular footprint and a text label."""

    id: str
    kind: ObjectKind
    name: str
    x: float = 0.0
    y: float = 0.0
    radius: float = 0.0
    known: bool = True
    symbol: str = ""
    # Jumps only: whether the destination system has been explored
    target_known: bool = True

    @property
    def label(self) -> str:
        """Text displayed next to the footprint."""
        if self.kind is ObjectKind.JUMP and not self.target_known:
            return f"{self.symbol}Unknown"
        return f"{self.symbol}{self.name}"


@dataclass
class SafeLane:
    """A patrolled lane between two map objects."""

    source: str
    target: str
    standing: Standing = Standing.NEUTRAL

    @property
    def key(self) -> str:
        return f"{self.source}~{self.target}"


@dataclass
class SystemMap:
    """Everything shown on the overlay for one star system."""

    title: str = ""
    objects: dict[str, MapObject] = field(default_factory=dict)
    lanes: list[SafeLane] = field(default_factory=list)
    # (x, y, text) markers declared alongside the system
    markers: list[tuple[float, float, str | None]] = field(default_factory=list)

    def add_object(self, obj: MapObject) -> None:
        self.objects[obj.id] = obj

    def add_lane(self, lane: SafeLane) -> None:
        self.lanes.append(lane)

    def known_objects(self) -> list[MapObject]:
        """Objects that get a footprint and label, in insertion order.

        Jumps come before planets, matching the order the overlay lays
        them out in.
        """
        jumps = [o for o in self.objects.values() if o.kind is ObjectKind.JUMP]
        planets = [o for o in self.objects.values() if o.kind is ObjectKind.PLANET]
        return [o for o in jumps + planets if o.known]

    def lane_known(self, lane: SafeLane) -> bool:
        """A lane is shown only when both of its endpoints are known."""
        src = self.objects.get(lane.source)
        tgt = self.objects.get(lane.target)
        return bool(src and tgt and src.known and tgt.known)
