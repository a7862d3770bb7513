"""In-memory key-value store with per-entry time-to-live.

This module provides the TTLStore used by ContentCache. Entries expire a
fixed time after they were written (no sliding expiration). Expired entries
are dropped lazily when read, and a sweep purges every expired entry once
the sweep interval has passed since the previous sweep. The sweep runs on
the calling thread during a store access; no background thread is started.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A single cached value.

    Attributes:
        value: The cached entity (or sequence of entities)
        created_at: Clock reading when the entry was written
    """
    value: Any
    created_at: float


class TTLStore:
    """Thread-safe key-value store with lazy expiry and periodic sweep.

    All operations are guarded by a reentrant lock, so the store can be
    shared by concurrent request handlers without external locking.

    Example:
        >>> store = TTLStore(ttl_seconds=1800, sweep_interval_seconds=300)
        >>> store.set("spaces-all", spaces)
        >>> store.get("spaces-all")
    """

    def __init__(
        self,
        ttl_seconds: float,
        sweep_interval_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize an empty store.

        Args:
            ttl_seconds: Lifetime of each entry from the moment it is written
            sweep_interval_seconds: Minimum time between full expiry sweeps
            clock: Monotonic time source in seconds (injectable for tests)
        """
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be positive")
        if sweep_interval_seconds <= 0:
            raise ValueError("sweep_interval_seconds must be positive")

        self.ttl_seconds = ttl_seconds
        self.sweep_interval_seconds = sweep_interval_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.RLock()
        self._last_sweep = clock()

    def _is_expired(self, entry: CacheEntry, now: float) -> bool:
        return now - entry.created_at >= self.ttl_seconds

    def _maybe_sweep(self, now: float) -> None:
        """Purge expired entries if the sweep interval has elapsed.

        Caller must hold the lock.
        """
        if now - self._last_sweep < self.sweep_interval_seconds:
            return

        expired = [
            key for key, entry in self._entries.items()
            if self._is_expired(entry, now)
        ]
        for key in expired:
            del self._entries[key]
        self._last_sweep = now

        if expired:
            logger.debug(f"Swept {len(expired)} expired cache entries")

    def get(self, key: str) -> Optional[Any]:
        """Get a value from the store.

        Args:
            key: Cache key to look up

        Returns:
            The cached value if present and not expired, None otherwise
        """
        with self._lock:
            now = self._clock()
            self._maybe_sweep(now)

            entry = self._entries.get(key)
            if entry is None:
                return None

            if self._is_expired(entry, now):
                del self._entries[key]
                return None

            return entry.value

    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any existing entry and its timestamp.

        Args:
            key: Cache key
            value: Value to cache (must not be None)
        """
        if value is None:
            raise ValueError("Cannot cache None")

        with self._lock:
            now = self._clock()
            self._maybe_sweep(now)
            self._entries[key] = CacheEntry(value=value, created_at=now)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.get(key) is not None

    def __len__(self) -> int:
        """Number of stored entries, including expired ones not yet swept."""
        with self._lock:
            return len(self._entries)
