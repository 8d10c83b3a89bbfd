from __future__ import annotations

from typing import Any, Callable

from .base import E, QueryBase


class QueryPredicates(QueryBase[E]):
    """
    Read-only tests over the elements.

    None of these methods modify the Query. A missing predicate never raises;
    it yields the documented neutral answer (False or 0).
    """

    def all(self, predicate: Callable[[E], bool] | None) -> bool:
        """
        True if the Query is non-empty and every element satisfies ``predicate``.

        An empty Query returns False rather than the vacuous True.

        Example:
            >>> wrap([2, 4]).all(lambda x: x % 2 == 0)
            True
            >>> wrap([]).all(lambda x: True)
            False
        """
        if not self._items or predicate is None:
            return False
        for e in self._items:
            if not predicate(e):
                return False
        return True

    def any(self, predicate: Callable[[E], bool] | None) -> bool:
        """
        True if at least one element satisfies ``predicate``.

        Example:
            >>> wrap([1, 2, 3]).any(lambda x: x > 2)
            True
        """
        if predicate is None:
            return False
        for e in self._items:
            if predicate(e):
                return True
        return False

    def contains(self, predicate: Callable[[E], bool] | None) -> bool:
        """Membership check; same answer as ``any``."""
        return self.any(predicate)

    def count(self, predicate: Callable[[E], bool] | None) -> int:
        """Number of elements satisfying ``predicate``."""
        if predicate is None:
            return 0
        n = 0
        for e in self._items:
            if predicate(e):
                n += 1
        return n

    def index(self, match: Callable[[E], bool] | Any) -> int:
        """
        Position of the first matching element, or -1.

        A callable ``match`` is used as a predicate; any other value is
        compared with ``==``. ``None`` is searched for like any other
        value. To look up a callable element itself, pass a predicate such as
        ``lambda e: e is fn``.

        Example:
            >>> wrap(["a", "b", "c"]).index("b")
            1
            >>> wrap([5, 6, 7]).index(lambda x: x > 5)
            1
        """
        test = match if callable(match) else (lambda e: e == match)
        for i, e in enumerate(self._items):
            if test(e):
                return i
        return -1
