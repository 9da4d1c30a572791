"""In-memory snapshot cache with time-based expiry."""

from collections.abc import Callable, Hashable
import threading
import time

from src.application.ports.snapshot_cache import SnapshotCachePort
from src.domain.models.finance import AccountSnapshot


class InMemorySnapshotCache(SnapshotCachePort):
    """SnapshotCachePort keeping entries for a fixed number of seconds."""

    def __init__(
        self,
        ttl_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: Lifetime of each entry; non-positive disables caching.
            clock: Monotonic time source in seconds.
        """
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[Hashable, tuple[float, AccountSnapshot]] = {}
        self._lock = threading.Lock()

    def get(self, key: Hashable) -> AccountSnapshot | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, snapshot = entry
            if self._clock() - stored_at >= self._ttl_seconds:
                del self._entries[key]
                return None
            return snapshot

    def put(self, key: Hashable, snapshot: AccountSnapshot) -> None:
        if self._ttl_seconds <= 0:
            return
        with self._lock:
            now = self._clock()
            expired = [
                stale_key
                for stale_key, (stored_at, _) in self._entries.items()
                if now - stored_at >= self._ttl_seconds
            ]
            for stale_key in expired:
                del self._entries[stale_key]
            self._entries[key] = (now, snapshot)

    def invalidate(self, key: Hashable | None = None) -> None:
        with self._lock:
            if key is None:
                self._entries.clear()
            else:
                self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["InMemorySnapshotCache"]
