"""Port for caching assembled snapshots in the calling layer."""

from collections.abc import Hashable
from typing import Protocol

from src.domain.models.finance import AccountSnapshot


class SnapshotCachePort(Protocol):
    """Port exposing an invalidatable snapshot cache."""

    def get(self, key: Hashable) -> AccountSnapshot | None:
        """Return the cached snapshot when still valid."""

    def put(self, key: Hashable, snapshot: AccountSnapshot) -> None:
        """Store a snapshot."""

    def invalidate(self, key: Hashable | None = None) -> None:
        """Drop one entry, or every entry when key is None."""


__all__ = ["SnapshotCachePort"]
