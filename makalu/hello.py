"""Localised greetings."""

from __future__ import annotations

SPANISH = "Spanish"
FRENCH = "French"
ENGLISH_HELLO_PREFIX = "Hello, "
SPANISH_HELLO_PREFIX = "Hola, "
FRENCH_HELLO_PREFIX = "Bonjour, "

_PREFIXES = {
    SPANISH: SPANISH_HELLO_PREFIX,
    FRENCH: FRENCH_HELLO_PREFIX,
}


def greeting_prefix(language: str) -> str:
    """Return the greeting prefix for a language, English by default."""
    return _PREFIXES.get(language, ENGLISH_HELLO_PREFIX)


def hello(name: str, language: str = "") -> str:
    """Greet ``name`` in ``language``; an empty name greets the world."""
    return greeting_prefix(language) + (name or "World")


def main(argv: list[str] | None = None) -> int:
    """Print a greeting in each supported language."""
    for language in (SPANISH, FRENCH, ""):
        print(hello("Bijay", language))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())