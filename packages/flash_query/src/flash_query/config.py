"""
Runtime settings for Flash Query.
"""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuerySettings(BaseSettings):
    """
    Settings shared by every Query created without explicit options.

    Values are read from ``FLASH_QUERY_*`` environment variables or a ``.env``
    file, so the bounds policy can be switched per deployment.
    """

    model_config = SettingsConfigDict(
        env_prefix="FLASH_QUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Bounds policy ---
    # False: accessors return a default and skip/take clamp.
    # True: out-of-range access raises EmptySequenceError/IndexOutOfBoundsError.
    STRICT_BOUNDS: bool = False

    # --- Diagnostics ---
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accepts any stdlib level name, case-insensitively."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


# Singleton instance for core use
query_settings = QuerySettings()
