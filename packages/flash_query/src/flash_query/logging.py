import logging
import sys
import time
from typing import Union

from .config import query_settings


class UTCFormatter(logging.Formatter):
    """
    Formatter that renders timestamps as ISO-8601 UTC.
    """

    def __init__(self, fmt: str | None = None, datefmt: str | None = None):
        super().__init__(fmt, datefmt)
        self.converter = time.gmtime

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        if datefmt:
            return time.strftime(datefmt, ct)
        t = time.strftime("%Y-%m-%d %H:%M:%S", ct)
        return "%s.%03dZ" % (t, record.msecs)


def get_logger(name: str) -> logging.Logger:
    """
    Returns a standard logger instance.

    Name loggers with dot-notation matching the module path:
    >>> logger = get_logger(__name__)
    """
    return logging.getLogger(name)


def setup_logging(
    level: Union[int, str, None] = None,
    capture_roots: bool = False,
    module_name: str = "flash_query",
) -> logging.Logger:
    """
    Attach a stdout handler for Flash Query diagnostics.

    The library never calls this itself; applications opt in.

    Args:
        level: Logging level. Defaults to ``QuerySettings.LOG_LEVEL``.
        capture_roots: If True, configures the root logger.
                       If False, only configures 'flash_query.*' loggers.
        module_name: Namespace configured when ``capture_roots`` is False.
    """
    if level is None:
        level = query_settings.LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    target_logger = (
        logging.getLogger() if capture_roots else logging.getLogger(module_name)
    )

    # Reset handlers so repeated calls (tests) do not stack output.
    target_logger.handlers.clear()
    target_logger.setLevel(level)

    log_format = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(UTCFormatter(log_format))
    target_logger.addHandler(console)

    if not capture_roots:
        target_logger.propagate = False

    return target_logger

