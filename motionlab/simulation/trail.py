"""Bounded FIFO history of recently rendered points."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from motionlab.models.parameters import ModuleKind

Point = tuple[float, float]

# Waves draw the whole medium each frame, so they keep no trail.
TRAIL_CAPACITY: dict[ModuleKind, int] = {
    ModuleKind.PROJECTILE: 20,
    ModuleKind.PENDULUM: 50,
    ModuleKind.SPRING: 100,
    ModuleKind.WAVE: 0,
}


@dataclass(frozen=True)
class Trail:
    """
    Immutable trail buffer.

    ``append`` returns a new trail; once ``capacity`` is exceeded the
    oldest points are dropped, so the points stay in chronological order.
    """

    capacity: int
    points: tuple[Point, ...] = ()

    @classmethod
    def for_module(cls, kind: ModuleKind) -> Trail:
        return cls(capacity=TRAIL_CAPACITY[kind])

    def append(self, point: Point) -> Trail:
        if self.capacity <= 0:
            return self
        points = (*self.points, point)
        if len(points) > self.capacity:
            points = points[-self.capacity:]
        return Trail(capacity=self.capacity, points=points)

    def clear(self) -> Trail:
        return Trail(capacity=self.capacity)

    @property
    def latest(self) -> Point | None:
        return self.points[-1] if self.points else None

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)
