"""Domain services package."""

from .finance import (
    assemble_snapshot,
    find_balance,
    order_recent_entries,
    select_balances,
)
from .normalization import (
    collapse_whitespace,
    extract_amount,
    normalize_datetime_text,
    normalize_label,
    parse_amount,
    parse_statement_datetime,
    parse_statement_datetime_or,
)

__all__ = [
    "assemble_snapshot",
    "find_balance",
    "order_recent_entries",
    "select_balances",
    "collapse_whitespace",
    "extract_amount",
    "normalize_datetime_text",
    "normalize_label",
    "parse_amount",
    "parse_statement_datetime",
    "parse_statement_datetime_or",
]
