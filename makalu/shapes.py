"""Plane shapes with areas, and rectangle perimeters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol


class Shape(Protocol):
    """Anything with an area."""

    def area(self) -> float:
        ...


@dataclass(frozen=True)
class Rectangle:
    height: float
    width: float

    def area(self) -> float:
        return self.height * self.width


@dataclass(frozen=True)
class Circle:
    radius: float

    def area(self) -> float:
        return math.pi * math.pow(self.radius, 2)


@dataclass(frozen=True)
class Triangle:
    base: float
    height: float

    def area(self) -> float:
        return (self.base * self.height) * 0.5


def perimeter(rectangle: Rectangle) -> float:
    """Return the perimeter of a rectangle."""
    return 2 * (rectangle.width + rectangle.height)


def area(rectangle: Rectangle) -> float:
    """Return the area of a rectangle."""
    return rectangle.height * rectangle.width