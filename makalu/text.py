"""String helpers and fixed greeting texts."""

from __future__ import annotations

REPEAT_COUNT = 5

WELCOME = "Hello Amar"
MORNING_TEXT = "Good Morning"
EVENING_TEXT = "Good Evening"

_NUMBER_WORDS = (
    "Zero",
    "One",
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
)


def repeat(character: str) -> str:
    """Return ``character`` repeated five times."""
    return character * REPEAT_COUNT


def reverse(s: str) -> str:
    """Reverse a string character by character."""
    return s[::-1]


def say_number(num: int) -> str | None:
    """Return the English word for 0 to 10, or None outside that range."""
    if 0 <= num <= 10:
        return _NUMBER_WORDS[num]
    return None