"""
Abstract base classes for the trie container.
"""

from sorted_trie.interfaces.range_iterable import RangeIterable
from sorted_trie.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
