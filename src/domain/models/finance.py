"""Domain models for aggregated campus card snapshots."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from src.domain.models.accounts import LedgerEntry


@dataclass(frozen=True)
class AccountSnapshot:
    """Normalized result of one extraction pass.

    Attributes:
        meal_swipes: Remaining meal swipes.
        dining_dollars: Dining dollars balance.
        stored_value: Stored value (express) balance.
        last_updated: Most recent observation time of the balances used.
        recent_entries: Newest-first ledger entries, bounded.
    """

    meal_swipes: Decimal
    dining_dollars: Decimal
    stored_value: Decimal
    last_updated: datetime
    recent_entries: tuple[LedgerEntry, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls, now: datetime) -> "AccountSnapshot":
        """Return the all-zero snapshot used when nothing was extracted."""
        return cls(
            meal_swipes=Decimal("0"),
            dining_dollars=Decimal("0"),
            stored_value=Decimal("0"),
            last_updated=now,
            recent_entries=(),
        )


__all__ = ["AccountSnapshot"]
