"""
Key-unit helpers: the end-of-container marker and key reconstruction.
"""

from collections.abc import Callable, Sequence
from functools import total_ordering
from typing import Any


@total_ordering
class _MaxKeyUnit:
    """Key-unit that sorts after every other object."""

    _instance: "_MaxKeyUnit | None" = None

    def __new__(cls) -> "_MaxKeyUnit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return other is self

    def __lt__(self, other: object) -> bool:
        return False

    def __gt__(self, other: object) -> bool:
        return other is not self

    def __hash__(self) -> int:
        return hash(_MaxKeyUnit)

    def __repr__(self) -> str:
        return "MAX_KEY_UNIT"

    def __copy__(self) -> "_MaxKeyUnit":
        return self

    def __deepcopy__(self, memo: dict) -> "_MaxKeyUnit":
        return self


MAX_KEY_UNIT = _MaxKeyUnit()

KeyBuilder = Callable[[Sequence[Any]], Any]


def _join_str(units: Sequence[Any]) -> str:
    return "".join(units)


def key_builder(key_type: type) -> KeyBuilder:
    """
    Return the function that turns a root-to-node list of units into a key.

    Args:
        key_type: Sequence type of the container's keys (str, bytes, tuple...).

    Returns:
        Callable building a key of ``key_type`` from a list of units.

    Raises:
        TypeError: If key_type is not a sequence type.
    """
    if not isinstance(key_type, type):
        raise TypeError(f"key_type must be a type, got {key_type!r}")
    if key_type is str:
        return _join_str
    if issubclass(key_type, str):
        return lambda units: key_type(_join_str(units))
    if issubclass(key_type, (bytes, bytearray)):
        return key_type
    if not issubclass(key_type, Sequence):
        raise TypeError(f"key_type must be a sequence type, got {key_type.__name__}")
    return key_type
