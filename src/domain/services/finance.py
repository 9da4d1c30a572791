"""Domain services assembling campus card snapshots."""

from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal

from src.domain.constants import DEFAULT_RECENT_LIMIT
from src.domain.models import (
    AccountBalance,
    AccountSnapshot,
    BalanceCategory,
    LedgerEntry,
)

SNAPSHOT_CATEGORIES = (
    BalanceCategory.MEAL_SWIPES,
    BalanceCategory.DINING_DOLLARS,
    BalanceCategory.STORED_VALUE,
)


def select_balances(
    balances: Iterable[AccountBalance],
) -> dict[BalanceCategory, AccountBalance]:
    """Pick one balance per snapshot category.

    The first balance seen for a category wins; later duplicates are ignored
    rather than summed.

    Args:
        balances: Balances in extraction order.

    Returns:
        dict[BalanceCategory, AccountBalance]: Selected balance per category.
    """
    selected: dict[BalanceCategory, AccountBalance] = {}
    for balance in balances:
        if balance.category not in SNAPSHOT_CATEGORIES:
            continue
        selected.setdefault(balance.category, balance)
    return selected


def find_balance(
    balances: Iterable[AccountBalance],
    category: BalanceCategory,
) -> Decimal | None:
    """Return the first balance amount for a category, if any."""
    for balance in balances:
        if balance.category == category:
            return balance.amount
    return None


def order_recent_entries(
    entries: Sequence[LedgerEntry],
    limit: int = DEFAULT_RECENT_LIMIT,
) -> tuple[LedgerEntry, ...]:
    """Return the newest entries first, bounded by limit.

    Entries without a parsed date sort as oldest; ties keep document order.

    Args:
        entries: Ledger entries in document order.
        limit: Maximum number of entries to keep.

    Returns:
        tuple[LedgerEntry, ...]: Ordered, truncated entries.
    """
    if limit <= 0:
        return ()
    dated = [entry for entry in entries if entry.occurred_at is not None]
    undated = [entry for entry in entries if entry.occurred_at is None]
    dated = sorted(dated, key=lambda entry: entry.occurred_at, reverse=True)
    return tuple([*dated, *undated][:limit])


def assemble_snapshot(
    balances: Sequence[AccountBalance],
    transactions: Sequence[LedgerEntry],
    *,
    now: datetime,
    recent_limit: int = DEFAULT_RECENT_LIMIT,
) -> AccountSnapshot:
    """Merge extracted balances and transactions into one snapshot.

    Args:
        balances: Balances from the balance extractor.
        transactions: Entries from the transaction extractor.
        now: Fallback timestamp when no balance was selected.
        recent_limit: Maximum number of recent entries.

    Returns:
        AccountSnapshot: Fully populated snapshot with zero defaults.
    """
    selected = select_balances(balances)

    def _amount(category: BalanceCategory) -> Decimal:
        balance = selected.get(category)
        return balance.amount if balance is not None else Decimal("0")

    last_updated = max(
        (balance.observed_at for balance in selected.values()),
        default=now,
    )
    return AccountSnapshot(
        meal_swipes=_amount(BalanceCategory.MEAL_SWIPES),
        dining_dollars=_amount(BalanceCategory.DINING_DOLLARS),
        stored_value=_amount(BalanceCategory.STORED_VALUE),
        last_updated=last_updated,
        recent_entries=order_recent_entries(transactions, recent_limit),
    )


__all__ = [
    "SNAPSHOT_CATEGORIES",
    "select_balances",
    "find_balance",
    "order_recent_entries",
    "assemble_snapshot",
]
