"""Domain models package."""

from .accounts import AccountBalance, BalanceCategory, LedgerEntry
from .finance import AccountSnapshot
from .insights import Insight, InsightReport
from .statement import (
    FETCH_FAILED,
    RawDocument,
    StatementScope,
    TransportError,
)

__all__ = [
    "AccountBalance",
    "BalanceCategory",
    "LedgerEntry",
    "AccountSnapshot",
    "Insight",
    "InsightReport",
    "FETCH_FAILED",
    "RawDocument",
    "StatementScope",
    "TransportError",
]
