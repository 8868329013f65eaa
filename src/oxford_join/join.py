"""Oxford join"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Sequence

from .conjunction import Conjunction, ConjunctionLike
from .pyutils import is_iterable

__all__ = [
    "and_list",
    "and_or_list",
    "join_capacity",
    "nor_list",
    "or_list",
    "oxford_join",
    "oxford_join_length",
    "realize_items",
    "write_oxford_join",
]


COMMA_SPACE = ", "


def realize_items(items: Iterable[Any]) -> List[str]:
    """Get the items of a container as a list of strings.

    Items that are not strings are converted with ``str()``. Mappings contribute
    their values. The order is the iteration order of the container.
    """
    if isinstance(items, Mapping):
        items = items.values()
    elif not is_iterable(items):
        raise TypeError(f"Expected {items!r} to be an iterable of items.")
    return [item if isinstance(item, str) else str(item) for item in items]


def final_separator(conjunction: Conjunction, num_items: int) -> str:
    """Get the separator that precedes the last of two or more items."""
    text = conjunction.text
    if num_items == 2:
        return " " + text if text else COMMA_SPACE
    return COMMA_SPACE + text


def join_capacity(lengths: Sequence[int], conjunction: ConjunctionLike) -> int:
    """Get the length of the Oxford join of items with the given lengths.

    Only the lengths of the items are needed, not their contents.
    """
    glue = len(Conjunction.coerce(conjunction))
    n = len(lengths)
    if n < 2:
        return lengths[0] if n else 0
    total = sum(lengths)
    if n == 2:
        return total + (glue + 1 if glue else 2)
    # all but the last pair separated by comma and space, plus the Oxford comma
    return total + 2 * (n - 1) + glue


def oxford_join_length(
    items: Iterable[Any], conjunction: ConjunctionLike = Conjunction.AND
) -> int:
    """Get the length of the Oxford join of the given items."""
    conjunction = Conjunction.coerce(conjunction)
    return join_capacity([len(item) for item in realize_items(items)], conjunction)


def write_oxford_join(
    strings: Sequence[str], conjunction: Conjunction, write: Callable[[str], Any]
) -> None:
    """Write the Oxford join of the given strings fragment by fragment."""
    n = len(strings)
    if not n:
        return
    write(strings[0])
    if n == 1:
        return
    for i in range(1, n - 1):
        write(COMMA_SPACE)
        write(strings[i])
    write(final_separator(conjunction, n))
    write(strings[-1])


def oxford_join(
    items: Iterable[Any], conjunction: ConjunctionLike = Conjunction.AND
) -> str:
    """Join items with Oxford commas and a conjunction before the last item.

    The result depends on the number of items::

        0: ""
        1: "first"
        2: "first <conjunction> last"
        n: "first, second, ..., <conjunction> last"

    With the empty conjunction, the last item is separated by a comma only.
    """
    conjunction = Conjunction.coerce(conjunction)
    strings = realize_items(items)
    n = len(strings)
    if n < 2:
        return strings[0] if n else ""
    # fragments alternate between items and separators
    buffer = [COMMA_SPACE] * (2 * n - 1)
    buffer[::2] = strings
    buffer[-2] = final_separator(conjunction, n)
    return "".join(buffer)


def and_list(items: Iterable[Any]) -> str:
    """Given [ A, B, C ] return 'A, B, and C'."""
    return oxford_join(items, Conjunction.AND)


def and_or_list(items: Iterable[Any]) -> str:
    """Given [ A, B, C ] return 'A, B, and/or C'."""
    return oxford_join(items, Conjunction.AND_OR)


def nor_list(items: Iterable[Any]) -> str:
    """Given [ A, B, C ] return 'A, B, nor C'."""
    return oxford_join(items, Conjunction.NOR)


def or_list(items: Iterable[Any]) -> str:
    """Given [ A, B, C ] return 'A, B, or C'."""
    return oxford_join(items, Conjunction.OR)
