from __future__ import annotations

from typing import (
    Callable,
    Iterable,
)

from .base import E
from .export import QueryExport


class Query(QueryExport[E]):
    """
    Eager, chainable query over an in-memory sequence.

    A Query owns a shallow copy of the sequence it was built from. Chain
    operations (where, skip, take, sort, each, reverse) rewrite that copy in
    place and return the same Query, so calls compose fluently:

        >>> people = wrap([("Bob", 31), ("Jenny", 26), ("John", 42)])
        >>> people.where(lambda p: p[1] > 30).sort(lambda a, b: a[1] < b[1]).last()
        ('John', 42)

    Terminal methods return plain values:
        - all(), any(), contains(), count(), index()
        - at(), first(), last()
        - fold(), equal()
        - to_list(), as_sequence(), str()

    Notes:
        - Call ``clone()`` to branch a chain without disturbing the original.
        - Missing callbacks (None) never raise; see each method for its
          neutral result.
        - Boundary handling is controlled by ``strict`` (defaults to
          ``QuerySettings.STRICT_BOUNDS``).
    """


def wrap(items: Iterable[E] | None = None, *, strict: bool | None = None) -> Query[E]:
    """
    Build a Query over a shallow copy of ``items``.

    ``None`` or an empty iterable gives an empty Query.

    Example:
        >>> str(wrap([1, 2, 3]))
        '[1 2 3]'
    """
    return Query(items, strict=strict)


def generate(
    count: int,
    generator: Callable[[int], E] | None,
    *,
    strict: bool | None = None,
) -> Query[E]:
    """
    Build a Query whose element ``i`` is ``generator(i)`` for ``i < count``.

    A non-positive count or a missing generator gives an empty Query.

    Example:
        >>> generate(5, lambda i: i + 1).to_list()
        [1, 2, 3, 4, 5]
    """
    if count <= 0 or generator is None:
        return Query(strict=strict)
    return Query((generator(i) for i in range(count)), strict=strict)


__all__ = ["Query", "generate", "wrap"]
