"""Domain models for campus card accounts."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class BalanceCategory(str, Enum):
    """Semantic category of a campus card balance."""

    MEAL_SWIPES = "meal_swipes"
    DINING_DOLLARS = "dining_dollars"
    STORED_VALUE = "stored_value"
    OTHER = "other"


@dataclass(frozen=True)
class AccountBalance:
    """Current balance read from one balance-summary row.

    Attributes:
        account_label: Account name as printed on the page.
        amount: Non-negative balance amount.
        category: Category derived from the account label.
        observed_at: Timestamp printed next to the balance, or extraction time.
    """

    account_label: str
    amount: Decimal
    category: BalanceCategory
    observed_at: datetime


@dataclass(frozen=True)
class LedgerEntry:
    """One signed transaction row of an account ledger.

    Attributes:
        occurred_at_raw: Date text exactly as printed on the page.
        occurred_at: Parsed timestamp, None when the text is unparsable.
        description: Location or description of the transaction.
        amount: Signed amount; debits are negative.
        running_balance: Balance after the transaction when shown.
        account_label: Account the row belongs to.
    """

    occurred_at_raw: str
    occurred_at: datetime | None
    description: str
    amount: Decimal
    running_balance: Decimal | None
    account_label: str


__all__ = ["BalanceCategory", "AccountBalance", "LedgerEntry"]
