"""Input validation helpers that signal failure by raising."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a field is given an empty value."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"invalid input on field '{field_name}' ")
        self.field_name = field_name


class InvalidLengthError(ValueError):
    """Raised when a string is empty."""

    def __init__(self) -> None:
        super().__init__("Invalid length")


def get_error(flag: bool) -> RuntimeError | None:
    """Return a generic error when ``flag`` is true, otherwise ``None``."""
    if flag:
        return RuntimeError("this is an error :(")
    return None


def validate_input(field: str, value: str) -> None:
    """Reject an empty ``value`` for ``field``."""
    if value == "":
        raise InvalidInputError(field)


def check_length(s: str) -> None:
    """Reject an empty string, and the literal word ``error``."""
    if len(s) < 1:
        raise InvalidLengthError()
    if s == "error":
        raise ValueError("Invalid input")


def concat(x: str, y: str) -> tuple[str, int]:
    """Join two strings and return the result with its length."""
    result = x + y
    return result, len(result)


def return_error(flag: bool) -> str:
    """Return ``okay``, or raise when ``flag`` is true."""
    if flag:
        raise RuntimeError("this is a returned error")
    return "okay"