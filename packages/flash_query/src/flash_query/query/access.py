from __future__ import annotations

from .base import E
from .predicates import QueryPredicates


class QueryAccess(QueryPredicates[E]):
    """
    Positional accessors.

    Out-of-range access follows the Query's bounds policy: with the safe
    default the caller's ``default`` is returned, in strict mode an
    ``EmptySequenceError`` or ``IndexOutOfBoundsError`` is raised.
    Negative positions are out of range; there is no wrap-around.
    """

    def at(self, index: int, default: E | None = None) -> E | None:
        """
        Element at ``index``.

        Example:
            >>> wrap([1, 2, 3]).at(2)
            3
            >>> wrap([1, 2, 3]).at(7, default=0)
            0
        """
        if 0 <= index < len(self._items):
            return self._items[index]
        if self._strict:
            if not self._items:
                self._empty("at")
            self._out_of_bounds("at")
        return default

    def first(self, default: E | None = None) -> E | None:
        """First element, or ``default`` when empty."""
        if self._items:
            return self._items[0]
        if self._strict:
            self._empty("first")
        return default

    def last(self, default: E | None = None) -> E | None:
        """Last element, or ``default`` when empty."""
        if self._items:
            return self._items[-1]
        if self._strict:
            self._empty("last")
        return default
