"""
SortedContainer abstract base class for cursor-based sorted containers.
"""

from abc import abstractmethod
from collections.abc import Sequence
from typing import Any

from sorted_trie.interfaces.range_iterable import RangeIterable


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key-value containers addressed by cursors.

    Lookups return a cursor; a missing key is reported by returning end().
    Inherits ordered iteration capabilities from RangeIterable.

    Implementations:
    - Trie: prefix tree over sequences of key-units
    """

    @abstractmethod
    def insert(self, key: Sequence[Any], value: Any) -> Any:
        """
        Insert a new key-value pair.

        Args:
            key: The key to insert. Must not be empty.
            value: The value to associate with the key.

        Returns:
            A cursor to the new entry.

        Raises:
            EmptyKeyError: If key is empty.
            DuplicateKeyError: If key is already stored.
        """
        pass

    @abstractmethod
    def erase(self, cursor: Any) -> None:
        """
        Remove the entry a cursor points to.

        Args:
            cursor: Cursor obtained from this container.
        """
        pass

    @abstractmethod
    def find(self, key: Sequence[Any]) -> Any:
        """
        Locate a key.

        Args:
            key: The key to look up.

        Returns:
            A cursor to the entry, or end() if the key is not stored.
        """
        pass

    @abstractmethod
    def get_value(self, key: Sequence[Any]) -> tuple[bool, Any]:
        """
        Retrieve the value for a key.

        Args:
            key: The key to look up.

        Returns:
            (True, value) if found, (False, None) otherwise.
        """
        pass

    @abstractmethod
    def begin(self) -> Any:
        """Return a cursor to the smallest key, or end() if empty."""
        pass

    @abstractmethod
    def end(self) -> Any:
        """Return the past-the-end cursor."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry."""
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def empty(self) -> bool:
        """Return True if the container holds no entries."""
        pass
