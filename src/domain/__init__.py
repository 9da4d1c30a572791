"""Domain package for business rules and core models."""

from .constants import (
    CATEGORY_KEYWORDS,
    DEFAULT_RECENT_LIMIT,
    DEFAULT_TRUSTED_SUMMARY_MARKERS,
)
from .models import (
    AccountBalance,
    AccountSnapshot,
    BalanceCategory,
    Insight,
    InsightReport,
    LedgerEntry,
    RawDocument,
    StatementScope,
    TransportError,
)
from .policies import classify_account_label, is_trusted_summary_label
from .services import (
    assemble_snapshot,
    extract_amount,
    find_balance,
    parse_amount,
    parse_statement_datetime,
)

__all__ = [
    "CATEGORY_KEYWORDS",
    "DEFAULT_RECENT_LIMIT",
    "DEFAULT_TRUSTED_SUMMARY_MARKERS",
    "AccountBalance",
    "AccountSnapshot",
    "BalanceCategory",
    "Insight",
    "InsightReport",
    "LedgerEntry",
    "RawDocument",
    "StatementScope",
    "TransportError",
    "classify_account_label",
    "is_trusted_summary_label",
    "assemble_snapshot",
    "extract_amount",
    "find_balance",
    "parse_amount",
    "parse_statement_datetime",
]
