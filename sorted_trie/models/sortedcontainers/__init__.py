"""
Sorted container implementations.
"""

from sorted_trie.models.sortedcontainers.trie import Trie

__all__ = ["Trie"]
