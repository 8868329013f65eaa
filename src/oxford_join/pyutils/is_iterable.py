from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator
from typing import Any

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard


__all__ = ["is_collection", "is_iterable", "is_iterator"]

not_iterable_types: Any = (str, bytes, bytearray, memoryview)


def is_collection(value: Any) -> TypeGuard[Collection]:
    """Check if value is a sized collection, but not a string."""
    return isinstance(value, Collection) and not isinstance(value, not_iterable_types)


def is_iterable(value: Any) -> TypeGuard[Iterable]:
    """Check if value is an iterable, but not a string."""
    return isinstance(value, Iterable) and not isinstance(value, not_iterable_types)


def is_iterator(value: Any) -> TypeGuard[Iterator]:
    """Check if value is a one-shot iterator that is consumed when iterated."""
    return isinstance(value, Iterator)
