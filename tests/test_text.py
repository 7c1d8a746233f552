import pytest

from makalu.text import EVENING_TEXT, MORNING_TEXT, WELCOME, repeat, reverse, say_number


def test_repeat():
    assert repeat("a") == "aaaaa"


def test_repeat_multichar():
    assert repeat("ab") == "ababababab"


@pytest.mark.parametrize(
    ("text", "expected"),
    [("Amar", "ramA"), ("", ""), ("héllo", "olléh"), ("x", "x")],
)
def test_reverse(text, expected):
    assert reverse(text) == expected


def test_reverse_round_trip():
    text = "नमस्ते world"
    assert reverse(reverse(text)) == text


@pytest.mark.parametrize(
    ("num", "expected"),
    [(0, "Zero"), (3, "Three"), (7, "Seven"), (10, "Ten")],
)
def test_say_number(num, expected):
    assert say_number(num) == expected


@pytest.mark.parametrize("num", [-1, 11, 100])
def test_say_number_out_of_range(num):
    assert say_number(num) is None


def test_greeting_texts_reversed():
    assert reverse(WELCOME) == "ramA olleH"
    assert reverse(MORNING_TEXT) == "gninroM dooG"
    assert reverse(EVENING_TEXT) == "gninevE dooG"