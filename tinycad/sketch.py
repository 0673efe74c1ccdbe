"""Two-dimensional sketch entities and a bounded sketch container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

DEFAULT_CAPACITY = 1000


class SketchFullError(Exception):
    """Raised when an entity is added to a sketch that has no room left."""


@dataclass(frozen=True)
class SketchPoint:
    x: float
    y: float


@dataclass(frozen=True)
class SketchLine:
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class SketchCircle:
    x: float
    y: float
    r: float


Entity = Union[SketchPoint, SketchLine, SketchCircle]


def describe_entity(entity: Entity) -> str:
    """Return a one-line human readable description of a sketch entity."""
    match entity:
        case SketchPoint(x, y):
            return f"Point at ({x:f}, {y:f})"
        case SketchLine(x1, y1, x2, y2):
            return f"Line from ({x1:f}, {y1:f}) to ({x2:f}, {y2:f})"
        case SketchCircle(x, y, r):
            return f"Circle at ({x:f}, {y:f}) with radius {r:f}"
    raise TypeError(f"not a sketch entity: {entity!r}")


class Sketch:
    """An ordered collection of sketch entities with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._entities: list[Entity] = []

    def _add(self, entity: Entity) -> Entity:
        if len(self._entities) >= self.capacity:
            raise SketchFullError("Sketch buffer full")
        self._entities.append(entity)
        return entity

    def add_point(self, x: float, y: float) -> SketchPoint:
        """Append a point and return it."""
        return self._add(SketchPoint(float(x), float(y)))

    def add_line(self, x1: float, y1: float, x2: float, y2: float) -> SketchLine:
        """Append a line segment and return it."""
        return self._add(SketchLine(float(x1), float(y1), float(x2), float(y2)))

    def add_circle(self, x: float, y: float, r: float) -> SketchCircle:
        """Append a circle and return it."""
        return self._add(SketchCircle(float(x), float(y), float(r)))

    def clear(self) -> None:
        """Remove every entity."""
        self._entities.clear()

    def describe(self) -> list[str]:
        """Return one description line per entity, in insertion order."""
        return [describe_entity(entity) for entity in self._entities]

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))