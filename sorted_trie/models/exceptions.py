"""
Custom exceptions for the trie container.
"""

from typing import Any


class TrieError(Exception):
    """Base class for every error raised by the trie and its cursors."""


class EmptyKeyError(TrieError, ValueError):
    """Raised when inserting an empty key."""

    def __init__(self) -> None:
        super().__init__("Empty key couldn't be added")


class DuplicateKeyError(TrieError, KeyError):
    """
    Raised when a key already maps to a stored entry.

    The container is left unchanged.
    """

    def __init__(self, key: Any):
        """
        Initialize duplicate key error.

        Args:
            key: The key that already exists.
        """
        self.key = key
        super().__init__(f"Key already exists: {key!r}")

    def __str__(self) -> str:
        return self.args[0]


class EmptyAdvanceError(TrieError, ValueError):
    """Raised when a cursor is advanced by an empty sub-key."""

    def __init__(self) -> None:
        super().__init__("Advance with zero prefix")


class NoSuchPrefixError(TrieError, KeyError):
    """
    Raised when a cursor cannot descend along the requested sub-key.

    Neither the cursor nor the container is modified.
    """

    def __init__(self, sub_key: Any, matched: int):
        """
        Initialize missing prefix error.

        Args:
            sub_key: The sub-key passed to advance.
            matched: Number of leading key-units that were found.
        """
        self.sub_key = sub_key
        self.matched = matched
        super().__init__(
            f"No such prefix: {sub_key!r} (matched {matched} of {len(sub_key)} units)"
        )

    def __str__(self) -> str:
        return self.args[0]


class OutOfRangeError(TrieError, IndexError):
    """Raised when a cursor moves past the end or before the beginning."""


class StaleCursorError(TrieError, RuntimeError):
    """
    Raised when a cursor is used after its entry was erased or cleared.
    """
