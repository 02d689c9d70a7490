"""
Cursor - bidirectional position over the leaves of a trie.
"""

import logging
from collections.abc import Sequence
from typing import Any

from sorted_trie.models.exceptions import (
    DuplicateKeyError,
    EmptyAdvanceError,
    NoSuchPrefixError,
    OutOfRangeError,
    StaleCursorError,
)
from sorted_trie.models.key_unit import KeyBuilder
from sorted_trie.models.node import Node

logger = logging.getLogger(__name__)


class Cursor:
    """
    Non-owning reference to one leaf of a trie.

    The end position is the trie's sentinel leaf. Moving past it, or before
    the first leaf, raises OutOfRangeError. A cursor whose entry was erased
    raises StaleCursorError on any further use.

    Leaves are ordered pre-order: a key comes right before the keys it is a
    strict prefix of, and siblings follow their key-unit order.
    """

    __slots__ = ("_node", "_make_key")

    def __init__(self, node: Node, make_key: KeyBuilder) -> None:
        self._node = node
        self._make_key = make_key

    @property
    def node(self) -> Node:
        """The referenced node. Raises StaleCursorError once it was erased."""
        return self._checked()

    def _checked(self) -> Node:
        node = self._node
        if not node.alive or not node.is_leaf:
            raise StaleCursorError("Cursor references an erased entry")
        return node

    def is_end(self) -> bool:
        return self._checked().is_sentinel

    def _entry(self) -> Node:
        node = self._checked()
        if node.is_sentinel:
            raise OutOfRangeError("End iterator has no key")
        return node

    def key(self) -> Any:
        """Rebuild the full key by walking parents to the root. O(depth)"""
        return self._make_key(self._entry().units())

    @property
    def value(self) -> Any:
        return self._checked().value

    @value.setter
    def value(self, value: Any) -> None:
        self._entry().value = value

    def item(self) -> tuple[Any, Any]:
        """Return the (key, value) pair at this position."""
        node = self._entry()
        return self._make_key(node.units()), node.value

    def advance(self, sub_key: Sequence[Any]) -> "Cursor":
        """
        Move the entry at this position down to key() + sub_key.

        This relabels which node holds the entry: the current node stops
        being a leaf, the destination becomes one and receives the value,
        and the cursor follows it. Other cursors on the old node go stale.

        Args:
            sub_key: Key-units to descend through from the current node.

        Returns:
            self, repositioned.

        Raises:
            EmptyAdvanceError: If sub_key is empty.
            NoSuchPrefixError: If the path does not exist below this node.
            DuplicateKeyError: If the destination already holds an entry.
        """
        node = self._checked()
        if len(sub_key) == 0:
            raise EmptyAdvanceError()

        target = node
        for matched, unit in enumerate(sub_key):
            found = target.find_child(unit)
            if found is None:
                raise NoSuchPrefixError(sub_key, matched)
            target = found

        if target.is_leaf:
            raise DuplicateKeyError(self._make_key(target.units()))

        target.value = node.value
        target.is_leaf = True
        node.value = None
        node.is_leaf = False
        self._node = target
        logger.debug(f"Relabelled entry down {len(sub_key)} units")
        return self

    def increment(self) -> "Cursor":
        """
        Move to the next leaf in ascending key order.

        Raises:
            OutOfRangeError: If already at the end.
        """
        node = self._checked()
        if node.is_sentinel:
            raise OutOfRangeError("Iterator to end couldn't be incremented")

        if node.children:
            self._node = node.children[0].first_leaf()
            return self

        following = node.leaf_after_subtree()
        if following is None:
            # Only reachable if the sentinel went missing from the root
            raise OutOfRangeError("Iterator to end couldn't be incremented")
        self._node = following
        return self

    def decrement(self) -> "Cursor":
        """
        Move to the previous leaf in ascending key order.

        Raises:
            OutOfRangeError: If already at the first leaf.
        """
        node = self._checked()
        while True:
            parent = node.parent
            if parent is None:
                raise OutOfRangeError("Begin iterator couldn't be decremented")

            idx = parent.child_index(node)
            if idx > 0:
                self._node = parent.children[idx - 1].last_leaf()
                return self
            if parent.is_leaf:
                self._node = parent
                return self
            node = parent

    def next(self) -> "Cursor":
        return self.copy().increment()

    def prev(self) -> "Cursor":
        return self.copy().decrement()

    def copy(self) -> "Cursor":
        return Cursor(self._node, self._make_key)

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._node is other._node

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._node is not other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        node = self._node
        if not node.alive or not node.is_leaf:
            return "Cursor(<stale>)"
        if node.is_sentinel:
            return "Cursor(<end>)"
        return f"Cursor(key={self._make_key(node.units())!r})"
