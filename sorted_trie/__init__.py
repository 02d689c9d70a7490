"""
Ordered prefix-tree container.

This package provides a trie mapping sequence keys to values with:
- insert(key, value) / erase(cursor) - O(|key| log c) structural updates
- find(key) / get_value(key) - exact lookups returning cursors
- begin() / end() - bidirectional cursors walking keys in lexicographic order
- items(prefix) / iterator(start, end) - prefix and range scans
"""

from sorted_trie.models.cursor import Cursor
from sorted_trie.models.exceptions import (
    DuplicateKeyError,
    EmptyAdvanceError,
    EmptyKeyError,
    NoSuchPrefixError,
    OutOfRangeError,
    StaleCursorError,
    TrieError,
)
from sorted_trie.models.sortedcontainers.trie import Trie, swap

__all__ = [
    "Trie",
    "Cursor",
    "swap",
    "TrieError",
    "EmptyKeyError",
    "DuplicateKeyError",
    "EmptyAdvanceError",
    "NoSuchPrefixError",
    "OutOfRangeError",
    "StaleCursorError",
]
