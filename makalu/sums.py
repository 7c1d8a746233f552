"""Summing numbers and collections of numbers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

FIXED_LENGTH = 5


def sum_five(numbers: Sequence[int]) -> int:
    """Sum exactly five numbers."""
    if len(numbers) != FIXED_LENGTH:
        raise ValueError(f"expected {FIXED_LENGTH} numbers, got {len(numbers)}")
    return sum(numbers)


def sum_numbers(numbers: Iterable[int]) -> int:
    """Sum any number of integers."""
    return sum(numbers)


def sum_all(*args: Iterable[int]) -> list[int]:
    """Return the sum of each collection given."""
    return [sum_numbers(numbers) for numbers in args]


def sum_all_tails(*args: Sequence[int]) -> list[int]:
    """Return the sum of each collection without its first element; empty ones give 0."""
    return [sum_numbers(numbers[1:]) for numbers in args]