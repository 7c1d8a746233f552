"""A word dictionary that refuses silent overwrites."""

from __future__ import annotations


class DictionaryError(Exception):
    """Base class for dictionary errors."""


class WordNotFoundError(DictionaryError, LookupError):
    """Raised when a word is not in the dictionary."""

    def __init__(self, word: str = "") -> None:
        super().__init__("could not find the word you are looking for")
        self.word = word


class WordExistsError(DictionaryError):
    """Raised when adding a word that is already defined."""

    def __init__(self, word: str = "") -> None:
        super().__init__("cannot add word because it already exists")
        self.word = word


class WordDoesNotExistError(DictionaryError):
    """Raised when updating a word that is not defined."""

    def __init__(self, word: str = "") -> None:
        super().__init__("cannot update word because it does not exists")
        self.word = word


class Dictionary(dict[str, str]):
    """Mapping of words to definitions."""

    def search(self, word: str) -> str:
        """Return the definition of ``word``."""
        try:
            return self[word]
        except KeyError:
            raise WordNotFoundError(word) from None

    def add(self, word: str, definition: str) -> None:
        """Define a new word; an existing word is left untouched."""
        if word in self:
            raise WordExistsError(word)
        self[word] = definition

    def update(self, word: str, definition: str) -> None:
        """Replace the definition of a word that already exists."""
        if word not in self:
            raise WordDoesNotExistError(word)
        self[word] = definition

    def delete(self, word: str) -> None:
        """Remove ``word`` if present; a missing word is ignored."""
        self.pop(word, None)