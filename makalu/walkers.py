"""Things that walk across the non-negative quarter of a grid."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0

    def __str__(self) -> str:
        return f"{{{self.x} {self.y}}}"

    @property
    def is_valid(self) -> bool:
        return self.x >= 0 and self.y >= 0


class InvalidPointError(ValueError):
    """Raised when asked to walk to a point with a negative coordinate."""

    def __init__(self, point: Point, message: str = "invalid point") -> None:
        super().__init__(message)
        self.point = point


class _Walker(Protocol):
    position: Point

    def walk(self, point: Point) -> None:
        ...


@dataclass
class Human:
    """A walker that can also talk."""

    position: Point = field(default_factory=Point)

    def walk(self, point: Point) -> None:
        """Move to ``point``; negative coordinates are refused."""
        if not point.is_valid:
            raise InvalidPointError(point, "Invalid Point ")
        self.position = point
        print("human walked to", self.position)

    def talk(self, s: str) -> None:
        """Say ``s`` out loud."""
        print("This human talking: ", s)


@dataclass
class Animal:
    """A walker that cannot talk."""

    position: Point = field(default_factory=Point)

    def walk(self, point: Point) -> None:
        """Move to ``point``; negative coordinates are refused."""
        if not point.is_valid:
            raise InvalidPointError(point, "invalid point")
        self.position = point
        print("animal walked to:  ", self.position)


def move(walker: _Walker, points: Iterable[Point]) -> None:
    """Walk through ``points`` in order, stopping at the first invalid one."""
    for point in points:
        walker.walk(point)