from __future__ import annotations

import logging
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    NoReturn,
    TypeVar,
)

from flash_query.config import QuerySettings, query_settings
from flash_query.exceptions import EmptySequenceError, IndexOutOfBoundsError

logger = logging.getLogger(__name__)

E = TypeVar("E")


class QueryBase(Generic[E]):
    """
    Fundamental state and identity for a Query.

    This base class owns the backing list shared by every Query layer and
    decides how boundary violations are reported. The list is a shallow copy
    of whatever the caller passed in, so later changes to the caller's
    sequence are not observed.
    """

    def __init__(
        self,
        items: Iterable[E] | None = None,
        *,
        strict: bool | None = None,
        settings: QuerySettings | None = None,
    ):
        if settings is None:
            settings = query_settings
        self._items: list[E] = list(items) if items is not None else []
        self._strict: bool = settings.STRICT_BOUNDS if strict is None else strict
        self._debug: bool = settings.DEBUG

    @property
    def strict(self) -> bool:
        """True when boundary violations raise instead of returning defaults."""
        return self._strict

    def clone(self) -> Any:
        """
        Return a new, independent instance holding a shallow copy of the items.

        Using self.__class__ ensures that the top-most class in the
        inheritance chain is instantiated, so the clone keeps every capability.
        """
        new = self.__class__(self._items, strict=self._strict)
        new._debug = self._debug
        return new

    def _log(self, op: str, before: int) -> None:
        """Record a chain operation when debug output is enabled."""
        if self._debug:
            logger.debug("Query.%s: %d -> %d items", op, before, len(self._items))

    def _replace(self, op: str, items: list[E]) -> Any:
        """Swap in a new backing list and return self for chaining."""
        before = len(self._items)
        self._items = items
        self._log(op, before)
        return self

    def _empty(self, op: str) -> NoReturn:
        """Raise EmptySequenceError for operation ``op``."""
        message = f"Query.{op}: empty sequence"
        logger.debug("Bounds violation: %s", message)
        raise EmptySequenceError(message)

    def _out_of_bounds(self, op: str) -> NoReturn:
        """Raise IndexOutOfBoundsError for operation ``op``."""
        message = f"Query.{op}: index out of bounds"
        logger.debug("Bounds violation: %s", message)
        raise IndexOutOfBoundsError(message)

    # --- Python protocols ---

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryBase):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    # Mutable container; equality is by value.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"
