class FlashQueryError(Exception):
    """Base class for all Flash Query exceptions."""


class EmptySequenceError(FlashQueryError, IndexError):
    """Raised when an element was requested from an empty sequence."""


class IndexOutOfBoundsError(FlashQueryError, IndexError):
    """Raised when a position or count falls outside the sequence."""
