from __future__ import annotations

import operator
from typing import Callable, Sequence, TypeVar

from .base import E
from .transform import QueryTransform

R = TypeVar("R")


class QueryExport(QueryTransform[E]):
    """
    Terminal operations: reduction, comparison and conversion.

    These never modify the Query.
    """

    def fold(self, initial: R, combiner: Callable[[R, E], R] | None) -> R:
        """
        Left-to-right reduction starting from ``initial``.

        An empty Query or a missing combiner returns ``initial`` unchanged.

        Example:
            >>> wrap([1, 2, 3, 4, 5]).fold(0, lambda a, b: a + b)
            15
        """
        result = initial
        if combiner is None:
            return result
        for e in self._items:
            result = combiner(result, e)
        return result

    def equal(
        self,
        other: Sequence[E],
        eq: Callable[[E, E], bool] | None = None,
    ) -> bool:
        """
        True if ``other`` has the same length and ``eq`` holds pairwise.

        ``eq`` defaults to ``==``.

        Example:
            >>> wrap(["a", "B"]).equal(["A", "b"], lambda x, y: x.lower() == y.lower())
            True
        """
        eq = eq or operator.eq
        if len(self._items) != len(other):
            return False
        for a, b in zip(self._items, other):
            if not eq(a, b):
                return False
        return True

    def to_list(self) -> list[E]:
        """A new list with the current elements."""
        return list(self._items)

    def as_sequence(self) -> tuple[E, ...]:
        """An immutable snapshot of the current elements."""
        return tuple(self._items)

    def __str__(self) -> str:
        return "[" + " ".join(str(e) for e in self._items) + "]"
