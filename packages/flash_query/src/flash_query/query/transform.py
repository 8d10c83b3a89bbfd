from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable

from .access import QueryAccess
from .base import E


class QueryTransform(QueryAccess[E]):
    """
    Chainable operations that rewrite the backing list.

    Every method here works in place and returns the same Query, so a
    caller holding a reference observes the result. Use ``clone()`` first
    when the original order or contents must be preserved.
    """

    def each(self, action: Callable[[E], E] | None) -> Any:
        """
        Replace every element with ``action(element)``, in order.

        Example:
            >>> wrap([1, 2, 3]).each(lambda x: x * 10).to_list()
            [10, 20, 30]
        """
        if action is None:
            return self
        for i, e in enumerate(self._items):
            self._items[i] = action(e)
        self._log("each", len(self._items))
        return self

    def where(self, predicate: Callable[[E], bool] | None) -> Any:
        """
        Keep only the elements satisfying ``predicate``, preserving order.

        A missing predicate filters everything out.

        Example:
            >>> wrap([1, 2, 3, 4, 5]).where(lambda x: x % 2 == 0).to_list()
            [2, 4]
        """
        if not self._items or predicate is None:
            return self._replace("where", [])
        return self._replace("where", [e for e in self._items if predicate(e)])

    def skip(self, count: int) -> Any:
        """
        Drop the first ``count`` elements.

        Counts past the end drop everything; negative counts drop nothing.
        In strict mode both raise ``IndexOutOfBoundsError``.
        """
        count = self._checked_count("skip", count)
        return self._replace("skip", self._items[count:])

    def take(self, count: int) -> Any:
        """
        Keep only the first ``count`` elements.

        Same range rules as ``skip``.
        """
        count = self._checked_count("take", count)
        return self._replace("take", self._items[:count])

    def reverse(self) -> Any:
        """Reverse the element order in place."""
        items = self._items
        i, j = 0, len(items) - 1
        while i < j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
        self._log("reverse", len(items))
        return self

    def sort(self, less: Callable[[E, E], bool] | None) -> Any:
        """
        Sort in place with a strict less-than comparator.

        The sort is stable: elements the comparator considers equal keep their
        relative order.

        Example:
            >>> wrap([3, 2, 5, 4, 1]).sort(lambda a, b: a < b).to_list()
            [1, 2, 3, 4, 5]
        """
        if less is None or len(self._items) < 2:
            return self

        def compare(a: E, b: E) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        self._items.sort(key=cmp_to_key(compare))
        self._log("sort", len(self._items))
        return self

    def _checked_count(self, op: str, count: int) -> int:
        """Clamp ``count`` into ``[0, len]`` or raise in strict mode."""
        size = len(self._items)
        if 0 <= count <= size:
            return count
        if self._strict:
            self._out_of_bounds(op)
        return 0 if count < 0 else size
