from .config import QuerySettings, query_settings
from .exceptions import EmptySequenceError, FlashQueryError, IndexOutOfBoundsError
from .logging import get_logger, setup_logging
from .query import Query, generate, wrap

__all__ = [
    "EmptySequenceError",
    "FlashQueryError",
    "IndexOutOfBoundsError",
    "Query",
    "QuerySettings",
    "generate",
    "get_logger",
    "query_settings",
    "setup_logging",
    "wrap",
]
