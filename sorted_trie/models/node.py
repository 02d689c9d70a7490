"""
Trie node and the sorted-children scheme.
"""

import bisect
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Any

from sorted_trie.models.key_unit import MAX_KEY_UNIT

_unit_of = attrgetter("key_unit")


@dataclass(eq=False)
class Node:
    """
    Vertex of the trie.

    Children are kept strictly ascending by key_unit so that lookups can
    binary-search them and a first-child descent visits keys in
    lexicographic order.
    """

    key_unit: Any = None
    value: Any = None
    is_leaf: bool = False
    parent: "Node | None" = field(default=None, repr=False)
    children: list["Node"] = field(default_factory=list, repr=False)
    alive: bool = field(default=True, repr=False)

    @property
    def is_sentinel(self) -> bool:
        return self.key_unit is MAX_KEY_UNIT

    def find_child(self, unit: Any) -> "Node | None":
        """Binary search for the child holding unit. O(log c)"""
        children = self.children
        idx = bisect.bisect_left(children, unit, key=_unit_of)
        if idx < len(children) and children[idx].key_unit == unit:
            return children[idx]
        return None

    def child_after(self, unit: Any) -> "Node | None":
        """First child whose key-unit sorts after unit."""
        idx = bisect.bisect_right(self.children, unit, key=_unit_of)
        return self.children[idx] if idx < len(self.children) else None

    def child_index(self, child: "Node") -> int:
        """Position of an existing child in the sorted sequence."""
        idx = bisect.bisect_left(self.children, child.key_unit, key=_unit_of)
        if idx == len(self.children) or self.children[idx] is not child:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        return idx

    def insert_child(self, child: "Node") -> None:
        """
        Insert child keeping the children sorted.

        The caller guarantees that no sibling already holds child.key_unit.
        """
        child.parent = self
        bisect.insort(self.children, child, key=_unit_of)

    def remove_child(self, child: "Node") -> None:
        """Detach child from this node and destroy its subtree."""
        del self.children[self.child_index(child)]
        child.destroy()

    def first_leaf(self) -> "Node":
        """Leftmost leaf of the subtree rooted here (self included)."""
        node = self
        while not node.is_leaf:
            node = node.children[0]
        return node

    def last_leaf(self) -> "Node":
        """Rightmost, deepest leaf of the subtree rooted here."""
        node = self
        while node.children:
            node = node.children[-1]
        return node

    def leaf_after_subtree(self) -> "Node | None":
        """First leaf that follows every node of this subtree, if any."""
        node = self
        while node.parent is not None:
            parent = node.parent
            idx = parent.child_index(node)
            if idx + 1 < len(parent.children):
                return parent.children[idx + 1].first_leaf()
            node = parent
        return None

    def depth(self) -> int:
        """Number of key-units on the path from the root to this node."""
        count = 0
        node = self
        while node.parent is not None:
            count += 1
            node = node.parent
        return count

    def units(self) -> list[Any]:
        """Key-units from the root down to this node."""
        path = []
        node = self
        while node.parent is not None:
            path.append(node.key_unit)
            node = node.parent
        path.reverse()
        return path

    def clone(self) -> "Node":
        """
        Copy the subtree rooted here.

        Parent references of the copy point into the copy. Values are shared.
        Iterative, so very deep subtrees do not hit the recursion limit.
        """
        root = Node(key_unit=self.key_unit, value=self.value, is_leaf=self.is_leaf)
        stack = [(self, root)]
        while stack:
            source, target = stack.pop()
            for child in source.children:
                copy = Node(
                    key_unit=child.key_unit,
                    value=child.value,
                    is_leaf=child.is_leaf,
                    parent=target,
                )
                # Source order is already sorted
                target.children.append(copy)
                stack.append((child, copy))
        return root

    def destroy(self) -> int:
        """
        Tear down the subtree rooted here.

        Every node is marked dead so outstanding cursors can detect it.

        Returns:
            Number of nodes destroyed.
        """
        count = 0
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(node.children)
            node.children = []
            node.parent = None
            node.value = None
            node.is_leaf = False
            node.alive = False
            count += 1
        return count
