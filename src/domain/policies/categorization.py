"""Policies mapping account labels to balance categories."""

from collections.abc import Iterable

from src.domain.constants import CATEGORY_KEYWORDS
from src.domain.models.accounts import BalanceCategory
from src.domain.services.normalization import normalize_label


def classify_account_label(label: str) -> BalanceCategory:
    """Return the balance category for an account label.

    Keywords are matched as case-insensitive substrings in fixed precedence
    order (meal, dining, express/stored); unmatched labels are OTHER.

    Args:
        label: Account label as printed on the statement page.

    Returns:
        BalanceCategory: Category of the first matching keyword.
    """
    candidate = normalize_label(label)
    for keyword, category in CATEGORY_KEYWORDS:
        if keyword in candidate:
            return category
    return BalanceCategory.OTHER


def is_trusted_summary_label(label: str, markers: Iterable[str]) -> bool:
    """Return True when a summary-block label contains a trusted marker.

    Args:
        label: Account name read from the account summary block.
        markers: Case-insensitive substrings accepted for summary balances.
    """
    candidate = normalize_label(label)
    if not candidate:
        return False
    return any(
        normalize_label(marker) in candidate
        for marker in markers
        if normalize_label(marker)
    )


__all__ = ["classify_account_label", "is_trusted_summary_label"]
