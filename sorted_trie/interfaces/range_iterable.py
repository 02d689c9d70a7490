"""
RangeIterable protocol for data structures that support ordered iteration.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any


class RangeIterable(ABC):
    """
    Protocol for data structures that support iteration over their keys.

    Implementations must support:
    - Full iteration via __iter__
    - Range-bounded iteration via iterator(start, end)
    - Prefix-bounded iteration via items(prefix)
    """

    @abstractmethod
    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Return an iterator over all key-value pairs in sorted order."""
        pass

    @abstractmethod
    def iterator(
        self, start: Sequence[Any] | None = None, end: Sequence[Any] | None = None
    ) -> Iterator[tuple[Any, Any]]:
        """
        Return an iterator over key-value pairs in the specified range.

        Args:
            start: Start key (inclusive). If None, starts from the beginning.
            end: End key (exclusive). If None, iterates to the end.

        Returns:
            Iterator yielding (key, value) tuples in sorted order.
        """
        pass

    @abstractmethod
    def items(self, prefix: Sequence[Any] | None = None) -> Iterator[tuple[Any, Any]]:
        """
        Return an iterator over key-value pairs whose key starts with prefix.

        Args:
            prefix: Leading key-units every yielded key must share. If None
                or empty, every pair is yielded.

        Returns:
            Iterator yielding (key, value) tuples in sorted order.
        """
        pass
