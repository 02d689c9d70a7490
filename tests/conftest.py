"""
Shared pytest fixtures for trie tests.
"""

import pytest

from sorted_trie import Trie


@pytest.fixture
def trie():
    """Provide a fresh, empty Trie instance."""
    return Trie()


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries sharing prefixes."""
    return [
        ("cat", 1),
        ("car", 2),
        ("card", 3),
    ]


@pytest.fixture
def populated_trie(sample_entries):
    """Provide a Trie holding sample_entries."""
    t = Trie()
    for key, value in sample_entries:
        t.insert(key, value)
    return t


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(f"key{i:04d}", f"value{i}") for i in range(1000)]
