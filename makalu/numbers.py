"""Small integer helpers."""

from __future__ import annotations

import math

MARS_DAY = 687
EARTH_DAY = 365


def add(x: int, y: int) -> int:
    """Return the sum of two integers."""
    return x + y


def mars_age(age: int) -> int:
    """Convert an age in Earth years to Mars years, truncating toward zero."""
    days = age * EARTH_DAY
    quotient = abs(days) // MARS_DAY
    return -quotient if days < 0 else quotient


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative integer."""
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers: {n}")
    return math.prod(range(1, n + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number; values below 2 are returned as is."""
    if n < 2:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def is_prime(num: int) -> bool:
    """Trial-divide ``num`` by every integer from 2 up to, not including, floor(sqrt(num))."""
    if num < 0:
        return True
    limit = math.isqrt(num)
    return all(num % divisor for divisor in range(2, limit))