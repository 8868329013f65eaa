"""Conjunctions"""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Any, ClassVar, Dict, Union

__all__ = ["Conjunction", "ConjunctionKind", "ConjunctionLike"]


class ConjunctionKind(Enum):
    """The kinds of conjunctions that can be put before the last item of a list."""

    AMPERSAND = "&"
    AND = "and"
    AND_OR = "and/or"
    NOR = "nor"
    OR = "or"
    PLUS = "+"
    CUSTOM = "custom"


_well_known_kinds: Dict[str, ConjunctionKind] = {
    kind.value: kind for kind in ConjunctionKind if kind is not ConjunctionKind.CUSTOM
}


@total_ordering
class Conjunction:
    """The glue that binds the last item of an Oxford-joined list.

    A conjunction is either one of the well-known kinds, which are available as
    the class attributes ``AMPERSAND``, ``AND``, ``AND_OR``, ``NOR``, ``OR`` and
    ``PLUS``, or arbitrary custom text. The rendering ``text`` always carries
    exactly one trailing space, so that it can directly precede the last item::

        >>> Conjunction("then").text
        'then '

    Custom text is stripped before the trailing space is added. Text that is
    blank after stripping makes the empty conjunction, which joins the last item
    with a plain comma instead.

    Conjunctions are immutable. They compare and hash by their rendering text.
    """

    __slots__ = "_kind", "_text"

    _kind: ConjunctionKind
    _text: str

    AMPERSAND: ClassVar[Conjunction]
    AND: ClassVar[Conjunction]
    AND_OR: ClassVar[Conjunction]
    NOR: ClassVar[Conjunction]
    OR: ClassVar[Conjunction]
    PLUS: ClassVar[Conjunction]

    def __init__(self, value: ConjunctionLike = ConjunctionKind.AND) -> None:
        if isinstance(value, Conjunction):
            kind, text = value._kind, value._text
        elif isinstance(value, ConjunctionKind):
            if value is ConjunctionKind.CUSTOM:
                raise TypeError("Custom conjunctions must be created from text.")
            kind, text = value, value.value + " "
        elif isinstance(value, str):
            word = value.strip()
            kind = _well_known_kinds.get(word, ConjunctionKind.CUSTOM)
            text = word + " " if word else ""
        else:
            raise TypeError(f"Expected {value!r} to be a conjunction kind or text.")
        self._kind = kind
        self._text = text

    @classmethod
    def coerce(cls, value: Any) -> Conjunction:
        """Get a conjunction from a conjunction, a conjunction kind or text."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, (ConjunctionKind, str)):
            raise TypeError(f"Expected {value!r} to be a conjunction.")
        return cls(value)

    @property
    def kind(self) -> ConjunctionKind:
        """The kind of this conjunction (CUSTOM if it is not well-known)"""
        return self._kind

    @property
    def text(self) -> str:
        """The rendering text, with a trailing space unless it is empty"""
        return self._text

    @property
    def word(self) -> str:
        """The rendering text without the trailing space"""
        return self._text[:-1]

    @property
    def is_empty(self) -> bool:
        """Whether this is the empty conjunction"""
        return not self._text

    def __len__(self) -> int:
        return len(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.word!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Conjunction):
            return self._text == other._text
        if isinstance(other, str):
            return self._text == other
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, Conjunction):
            return self._text < other._text
        if isinstance(other, str):
            return self._text < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_text"):
            raise AttributeError(f"{self.__class__.__name__} is immutable.")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable.")

    def __reduce__(self) -> Any:
        if self._kind is ConjunctionKind.CUSTOM:
            return self.__class__, (self.word,)
        return self.__class__, (self._kind,)


Conjunction.AMPERSAND = Conjunction(ConjunctionKind.AMPERSAND)
Conjunction.AND = Conjunction(ConjunctionKind.AND)
Conjunction.AND_OR = Conjunction(ConjunctionKind.AND_OR)
Conjunction.NOR = Conjunction(ConjunctionKind.NOR)
Conjunction.OR = Conjunction(ConjunctionKind.OR)
Conjunction.PLUS = Conjunction(ConjunctionKind.PLUS)


ConjunctionLike = Union[Conjunction, ConjunctionKind, str]
