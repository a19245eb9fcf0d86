"""
Fluent sequence views.

A SequenceView is a single-pass cursor over an ordered sequence it owns.
The chainable operators (map, reverse) and the terminal ones (reduce, join)
all consume whatever the cursor has not visited yet.
"""

import logging
from typing import Any, Callable, Iterable, List, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class ExhaustedIteration(LookupError):
    """Raised by next() when the view has no elements left"""


class _Absent:
    """Marker for a reduction that had nothing to reduce"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"


ABSENT = _Absent()

_NO_INITIAL = object()


class FluentIterator(Protocol):
    """Contract shared by fluent views (used for typing and test doubles)"""

    def has_next(self) -> bool:
        ...

    def next(self) -> Any:
        ...

    def map(self, fn: Callable[[Any], Any]) -> "FluentIterator":
        ...

    def reduce(self, fn: Callable[[Any, Any], Any], initial: Any = ...) -> Any:
        ...

    def join(self, separator: str) -> str:
        ...

    def reverse(self) -> "FluentIterator":
        ...


class SequenceView:
    """
    A chainable, single-pass view over ordered data. Every element is handed
    out at most once; once the cursor reaches the end the view stays empty
    unless reverse() installs a new backing sequence.
    """
    def __init__(self, items: Iterable = ()):
        self._items = list(items)      # owned copy, never shared
        self._position = 0             # index of the next element to hand out

    # --------- iteration primitives ----------
    def has_next(self) -> bool:
        return self._position < len(self._items)

    def next(self):
        if not self.has_next():
            raise ExhaustedIteration("sequence view is exhausted")
        item = self._items[self._position]
        self._position += 1
        return item

    def remaining(self) -> int:
        """Number of elements not yet consumed"""
        return len(self._items) - self._position

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self.next()

    # --------- chainable operators ----------
    def map(self, fn: Callable[[T], R]) -> "SequenceView":
        """Apply fn to every remaining element, returning a new view over the results"""
        logger.debug("map over %d remaining element(s)", self.remaining())
        result = []
        while self.has_next():
            result.append(fn(self.next()))
        return SequenceView(result)

    def reverse(self) -> "SequenceView":
        """Replace the remaining elements with the same elements in reverse order"""
        logger.debug("reverse over %d remaining element(s)", self.remaining())
        result = []
        while self.has_next():
            result.append(self.next())
        result.reverse()
        self._items = result
        self._position = 0
        return self

    # --------- terminal operations ----------
    def reduce(self, fn: Callable[[T, T], T], initial=_NO_INITIAL):
        """
        Fold the remaining elements from left to right.

        With an initial value the fold starts from it and an empty view returns
        it unchanged. Without one, the first remaining element is the seed and
        an empty view returns ABSENT.
        """
        if initial is _NO_INITIAL:
            if not self.has_next():
                logger.debug("reduce without seed on an empty view")
                return ABSENT
            initial = self.next()

        result = initial
        while self.has_next():
            result = fn(result, self.next())
        return result

    def join(self, separator: str) -> str:
        """Concatenate str() of the remaining elements with separator between them"""
        parts: List[str] = []
        while self.has_next():
            parts.append(str(self.next()))
        return separator.join(parts)

    def to_list(self) -> list:
        result = []
        while self.has_next():
            result.append(self.next())
        return result

    def __repr__(self):
        return f"{type(self).__name__}(remaining={self.remaining()})"


def list_of(*items) -> SequenceView:
    """Create a view positioned before the first of the given items"""
    return SequenceView(items)
