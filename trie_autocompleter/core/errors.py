# errors.py
# Exception hierarchy shared by the trie engine and the command boundary.
# "Not found" is never an exception: queries return None or an empty list.

from __future__ import annotations

from typing import Optional


class TrieError(Exception):
    """Base class for every error raised by the dictionary engine."""


class InvalidInputError(TrieError, ValueError):
    """Malformed word, prefix, mode, distance bound or command arguments."""


class InvalidWordError(InvalidInputError):
    """A word uses symbols outside a-z, is empty, or is too long."""

    def __init__(self, word: str, reason: str):
        super().__init__(f"invalid word {word!r}: {reason}")
        self.word = word
        self.reason = reason


class DictionaryLoadError(InvalidInputError):
    """LOAD could not open or read its file. The trie is left untouched."""

    def __init__(self, filename: str, cause: Optional[BaseException] = None):
        msg = f"cannot load {filename!r}"
        if cause is not None:
            msg += f": {cause}"
        super().__init__(msg)
        self.filename = filename


class ResourceExhaustedError(TrieError):
    """
    Allocation failed while growing the trie.
    The failed operation is rolled back; the host decides whether the
    session can continue.
    """
