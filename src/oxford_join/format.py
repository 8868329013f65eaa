"""Lazily formatted joins

The classes in this module hold on to the items to be joined and render them
only when they are converted with ``str()`` or ``format()``, or written into a
text sink such as a file or an ``io.StringIO`` buffer. Writing into a sink
avoids building the joined string as an intermediate value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Protocol

from .conjunction import Conjunction, ConjunctionLike
from .join import join_capacity, realize_items, write_oxford_join
from .pyutils import is_iterable, is_iterator

__all__ = ["JoinFormat", "OxfordJoinFormat", "Sink", "oxford_join_lazy"]


class Sink(Protocol):
    """Anything text can be written to, like a text file or io.StringIO"""

    def write(self, text: str) -> Any:
        ...


def check_items(items: Any) -> None:
    """Make sure the items can be rendered more than once."""
    if isinstance(items, Mapping):
        return
    if not is_iterable(items):
        raise TypeError(f"Expected {items!r} to be an iterable of items.")
    if is_iterator(items):
        raise TypeError(
            f"Expected {items!r} to be a collection of items, not an iterator."
        )


class LazyFormat:
    """Base class for joins that are rendered on demand."""

    __slots__ = ()

    def render(self, write: Callable[[str], Any]) -> None:
        """Render the join by passing its fragments to the given write function."""
        raise NotImplementedError

    def write_to(self, sink: Sink) -> int:
        """Write the join into the given sink.

        Returns the number of characters that have been written.
        """
        count = 0
        write = sink.write

        def write_and_count(text: str) -> None:
            nonlocal count
            write(text)
            count += len(text)

        self.render(write_and_count)
        return count

    def __str__(self) -> str:
        fragments: list[str] = []
        self.render(fragments.append)
        return "".join(fragments)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (str, LazyFormat)):
            return str(self) == str(other)
        return NotImplemented

    # the rendering changes when the items change
    __hash__ = None  # type: ignore


class OxfordJoinFormat(LazyFormat):
    """Oxford join of a collection of items that is rendered on demand.

    Renders exactly like ``oxford_join()`` with the same arguments, but only
    when needed and as often as needed. The items are not copied, so changes to
    the collection show up in later renderings::

        >>> fruits = ["apples", "oranges"]
        >>> basket = OxfordJoinFormat(fruits, "or")
        >>> fruits.append("bananas")
        >>> f"{basket}?"
        'apples, oranges, or bananas?'
    """

    __slots__ = "items", "conjunction"

    items: Iterable[Any]
    conjunction: Conjunction

    def __init__(
        self, items: Iterable[Any], conjunction: ConjunctionLike = Conjunction.AND
    ) -> None:
        check_items(items)
        self.items = items
        self.conjunction = Conjunction.coerce(conjunction)

    @classmethod
    def and_list(cls, items: Iterable[Any]) -> OxfordJoinFormat:
        """Given [ A, B, C ] render 'A, B, and C'."""
        return cls(items, Conjunction.AND)

    @classmethod
    def and_or_list(cls, items: Iterable[Any]) -> OxfordJoinFormat:
        """Given [ A, B, C ] render 'A, B, and/or C'."""
        return cls(items, Conjunction.AND_OR)

    @classmethod
    def nor_list(cls, items: Iterable[Any]) -> OxfordJoinFormat:
        """Given [ A, B, C ] render 'A, B, nor C'."""
        return cls(items, Conjunction.NOR)

    @classmethod
    def or_list(cls, items: Iterable[Any]) -> OxfordJoinFormat:
        """Given [ A, B, C ] render 'A, B, or C'."""
        return cls(items, Conjunction.OR)

    def render(self, write: Callable[[str], Any]) -> None:
        write_oxford_join(realize_items(self.items), self.conjunction, write)

    def __len__(self) -> int:
        lengths = [len(item) for item in realize_items(self.items)]
        return join_capacity(lengths, self.conjunction)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.items!r}, {self.conjunction!r})"


class JoinFormat(LazyFormat):
    """Plain join of a collection of items that is rendered on demand.

    The separator is put between every pair of items, without any Oxford comma
    or conjunction, so that ``str(JoinFormat(items, sep))`` is the same as
    ``sep.join(items)`` for a collection of strings.
    """

    __slots__ = "items", "separator"

    items: Iterable[Any]
    separator: str

    def __init__(self, items: Iterable[Any], separator: str = ", ") -> None:
        check_items(items)
        if not isinstance(separator, str):
            raise TypeError(f"Expected {separator!r} to be a string.")
        self.items = items
        self.separator = separator

    def render(self, write: Callable[[str], Any]) -> None:
        strings = realize_items(self.items)
        if not strings:
            return
        separator = self.separator
        write(strings[0])
        for string in strings[1:]:
            if separator:
                write(separator)
            write(string)

    def __len__(self) -> int:
        strings = realize_items(self.items)
        if not strings:
            return 0
        return sum(map(len, strings)) + len(self.separator) * (len(strings) - 1)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.items!r}, {self.separator!r})"


def oxford_join_lazy(
    items: Iterable[Any], conjunction: ConjunctionLike = Conjunction.AND
) -> OxfordJoinFormat:
    """Get an Oxford join of the items that is only rendered when needed."""
    return OxfordJoinFormat(items, conjunction)
