"""
Trie implementation for ordered storage of sequence keys.

Keys are sequences of totally ordered key-units (characters of a string by
default). Shared prefixes are stored once; iteration is lexicographic.
"""

import logging
from collections.abc import Iterator, Sequence
from copy import deepcopy
from typing import Any

from sorted_trie.interfaces.sorted_container import SortedContainer
from sorted_trie.models.cursor import Cursor
from sorted_trie.models.exceptions import (
    DuplicateKeyError,
    EmptyKeyError,
    OutOfRangeError,
)
from sorted_trie.models.key_unit import MAX_KEY_UNIT, key_builder
from sorted_trie.models.node import Node

logger = logging.getLogger(__name__)


class Trie(SortedContainer):
    """
    Prefix tree implementation of SortedContainer.

    Properties maintained:
    1. Children of every node are sorted by key-unit, without duplicates
    2. The root's last child is a sentinel leaf marking the end position
    3. Every non-root, non-leaf node has at least one child
    4. size() equals the number of leaves, sentinel excluded
    """

    def __init__(self, key_type: type = str) -> None:
        """
        Initialize an empty trie.

        Args:
            key_type: Sequence type of the keys (str, bytes, tuple, ...).
                Keys handed back by cursors are rebuilt as this type.
        """
        self._make_key = key_builder(key_type)
        self._key_type = key_type
        self._root = Node()
        self._size: int = 0
        self._root.insert_child(Node(key_unit=MAX_KEY_UNIT, is_leaf=True))

    @property
    def key_type(self) -> type:
        return self._key_type

    def _cursor(self, node: Node) -> Cursor:
        return Cursor(node, self._make_key)

    def _check_key(self, key: Sequence[Any]) -> None:
        if not isinstance(key, self._key_type):
            raise TypeError(
                f"key must be {self._key_type.__name__}, got {type(key).__name__}"
            )

    def _sentinel(self) -> Node:
        return self._root.children[-1]

    def _owns(self, node: Node) -> bool:
        while node.parent is not None:
            node = node.parent
        return node is self._root

    def _walk(self, key: Sequence[Any]) -> Node | None:
        """Follow key from the root. None if some unit is missing."""
        node = self._root
        for unit in key:
            node = node.find_child(unit)
            if node is None:
                return None
        return node

    def insert(self, key: Sequence[Any], value: Any) -> Cursor:
        """Insert a new key-value pair. O(|key| log c)"""
        self._check_key(key)
        if len(key) == 0:
            raise EmptyKeyError()

        node = self._root
        matched = 0
        while matched < len(key):
            child = node.find_child(key[matched])
            if child is None:
                break
            node = child
            matched += 1

        if matched == len(key):
            if node.is_leaf:
                raise DuplicateKeyError(key)
            node.value = value
            node.is_leaf = True
            self._size += 1
            logger.debug(f"Promoted prefix node to entry for key of length {len(key)}")
            return self._cursor(node)

        # Build the missing suffix detached, then attach it in one step
        head = Node(key_unit=key[matched])
        tail = head
        for unit in key[matched + 1 :]:
            child = Node(key_unit=unit, parent=tail)
            tail.children.append(child)
            tail = child
        tail.value = value
        tail.is_leaf = True

        node.insert_child(head)
        self._size += 1
        logger.debug(
            f"Inserted key of length {len(key)} ({len(key) - matched} new nodes)"
        )
        return self._cursor(tail)

    def erase(self, cursor: Cursor) -> None:
        """
        Remove the entry at cursor. O(depth)

        Raises:
            StaleCursorError: If the entry was already erased.
            OutOfRangeError: If cursor is end().
            ValueError: If cursor belongs to another container.
        """
        node = cursor.node
        if node.is_sentinel:
            raise OutOfRangeError("End iterator couldn't be erased")
        if not self._owns(node):
            raise ValueError("Cursor does not belong to this trie")

        self._size -= 1

        if node.children:
            # Still a shared prefix of deeper keys
            node.is_leaf = False
            node.value = None
            logger.debug("Erased entry, node kept as shared prefix")
            return

        parent = node.parent
        while (
            parent is not self._root
            and not parent.is_leaf
            and len(parent.children) == 1
        ):
            node = parent
            parent = node.parent

        parent.remove_child(node)
        logger.debug(f"Erased entry, pruned subtree at depth {parent.depth() + 1}")

    def find(self, key: Sequence[Any]) -> Cursor:
        """Locate key. O(|key| log c)"""
        self._check_key(key)
        node = self._walk(key)
        if node is None or not node.is_leaf or node.is_sentinel:
            return self.end()
        return self._cursor(node)

    def get_value(self, key: Sequence[Any]) -> tuple[bool, Any]:
        found = self.find(key)
        if found == self.end():
            return False, None
        return True, found.value

    def get(self, key: Sequence[Any], default: Any = None) -> Any:
        ok, value = self.get_value(key)
        return value if ok else default

    def has(self, key: Sequence[Any]) -> bool:
        return self.find(key) != self.end()

    def find_longest_prefix(self) -> Cursor:
        """
        Return the first stored key of greatest length.

        Scans every entry in order; end() if the trie is empty.
        O(n * average key length)
        """
        longest = self.end()
        max_length = 0
        cursor = self.begin()
        end = self.end()
        while cursor != end:
            length = cursor.node.depth()
            if length > max_length:
                max_length = length
                longest = cursor.copy()
            cursor.increment()
        return longest

    def longest_prefix_of(self, query: Sequence[Any]) -> Cursor:
        """
        Return the longest stored key that is a prefix of query.

        Args:
            query: Key to match against, e.g. an address in a routing table.

        Returns:
            Cursor to the matching entry, or end() if no stored key matches.
        """
        self._check_key(query)
        best = None
        node = self._root
        for unit in query:
            node = node.find_child(unit)
            if node is None:
                break
            if node.is_leaf and not node.is_sentinel:
                best = node
        return self.end() if best is None else self._cursor(best)

    def lower_bound(self, key: Sequence[Any]) -> Cursor:
        """Return a cursor to the first stored key >= key, or end()."""
        self._check_key(key)
        return self._cursor(self._lower_bound_node(key))

    def _lower_bound_node(self, key: Sequence[Any]) -> Node:
        node = self._root
        for unit in key:
            child = node.find_child(unit)
            if child is not None:
                node = child
                continue
            # Keys through smaller siblings sort before key
            candidate = node.child_after(unit)
            if candidate is not None:
                return candidate.first_leaf()
            following = node.leaf_after_subtree()
            return following if following is not None else self._sentinel()
        return node.first_leaf()

    def clear(self) -> None:
        """Remove every entry. Cursors other than end() go stale."""
        sentinel = self._sentinel()
        destroyed = 0
        for child in self._root.children[:-1]:
            destroyed += child.destroy()
        self._root.children = [sentinel]
        logger.debug(f"Cleared {self._size} entries ({destroyed} nodes)")
        self._size = 0

    def begin(self) -> Cursor:
        return self._cursor(self._root.first_leaf())

    def end(self) -> Cursor:
        return self._cursor(self._sentinel())

    def size(self) -> int:
        return self._size

    def empty(self) -> bool:
        return len(self._root.children) == 1

    def copy(self) -> "Trie":
        """Return an independent trie with the same entries. Values are shared."""
        other = self.__class__(self._key_type)
        other._root = self._root.clone()
        other._size = self._size
        logger.debug(f"Copied trie with {self._size} entries")
        return other

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "Trie":
        other = self.copy()
        stack = [other._root]
        while stack:
            node = stack.pop()
            if node.is_leaf and not node.is_sentinel:
                node.value = deepcopy(node.value, memo)
            stack.extend(node.children)
        return other

    def assign(self, other: "Trie") -> "Trie":
        """
        Replace the contents of this trie with a copy of other.

        Cursors into the previous contents go stale.
        """
        if other is not self:
            replacement = other.copy()
            self.swap(replacement)
            replacement._root.destroy()
        return self

    def swap(self, other: "Trie") -> None:
        """Exchange contents with other in O(1). Cursors follow their entries."""
        self._root, other._root = other._root, self._root
        self._size, other._size = other._size, self._size
        self._key_type, other._key_type = other._key_type, self._key_type
        self._make_key, other._make_key = other._make_key, self._make_key
        logger.debug("Swapped trie contents")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, self._key_type):
            return False
        return self.has(key)

    def __getitem__(self, key: Sequence[Any]) -> Any:
        ok, value = self.get_value(key)
        if not ok:
            raise KeyError(key)
        return value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return self._size == other._size and list(self) == list(other)

    __hash__ = None

    def __repr__(self) -> str:
        entries = ", ".join(f"{k!r}: {v!r}" for k, v in self)
        return f"{self.__class__.__name__}({{{entries}}})"

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return _RangeIterator(self.begin(), self.end())

    def iterator(
        self, start: Sequence[Any] | None = None, end: Sequence[Any] | None = None
    ) -> Iterator[tuple[Any, Any]]:
        first = self.begin() if start is None else self.lower_bound(start)
        stop = self.end() if end is None else self.lower_bound(end)
        if start is not None and end is not None and start >= end:
            return _RangeIterator(stop, stop)
        return _RangeIterator(first, stop)

    def items(self, prefix: Sequence[Any] | None = None) -> Iterator[tuple[Any, Any]]:
        if not prefix:
            return iter(self)

        self._check_key(prefix)
        node = self._walk(prefix)
        if node is None or node.is_sentinel:
            return _RangeIterator(self.end(), self.end())

        following = node.leaf_after_subtree()
        stop = self._sentinel() if following is None else following
        return _RangeIterator(self._cursor(node.first_leaf()), self._cursor(stop))

    def keys(self, prefix: Sequence[Any] | None = None) -> Iterator[Any]:
        for key, _ in self.items(prefix):
            yield key

    def values(self) -> Iterator[Any]:
        for _, value in self:
            yield value


def swap(lhs: Trie, rhs: Trie) -> None:
    """Exchange the contents of two tries."""
    lhs.swap(rhs)


class _RangeIterator(Iterator[tuple[Any, Any]]):
    """Iterator over the entries in [first, stop) of a trie."""

    def __init__(self, first: Cursor, stop: Cursor) -> None:
        self._cursor = first.copy()
        self._stop = stop

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return self

    def __next__(self) -> tuple[Any, Any]:
        if self._cursor == self._stop or self._cursor.is_end():
            raise StopIteration

        result = self._cursor.item()

        # Step before yielding so the caller may erase the entry just returned
        self._cursor.increment()

        return result
