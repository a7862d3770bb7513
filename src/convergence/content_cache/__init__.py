"""Read-through caching of Confluence content."""

from .content_cache import (
    ContentCache,
    DEFAULT_SWEEP_INTERVAL_SECONDS,
    DEFAULT_TTL_SECONDS,
    RESET_SWEEP_INTERVAL_SECONDS,
    RESET_TTL_SECONDS,
)
from .ttl_store import TTLStore

__all__ = [
    "ContentCache",
    "TTLStore",
    "DEFAULT_TTL_SECONDS",
    "DEFAULT_SWEEP_INTERVAL_SECONDS",
    "RESET_TTL_SECONDS",
    "RESET_SWEEP_INTERVAL_SECONDS",
]
