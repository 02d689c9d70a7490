"""
Data models for the trie container.
"""

from sorted_trie.models.node import Node
from sorted_trie.models.cursor import Cursor
from sorted_trie.models.key_unit import MAX_KEY_UNIT

__all__ = [
    "Node",
    "Cursor",
    "MAX_KEY_UNIT",
]
