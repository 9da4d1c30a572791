"""Domain constants for campus card classification."""

from src.domain.models.accounts import BalanceCategory

# Checked in order; the first keyword found in the account label wins.
CATEGORY_KEYWORDS = (
    ("meal", BalanceCategory.MEAL_SWIPES),
    ("dining", BalanceCategory.DINING_DOLLARS),
    ("express", BalanceCategory.STORED_VALUE),
    ("stored", BalanceCategory.STORED_VALUE),
)

DEFAULT_TRUSTED_SUMMARY_MARKERS = ("meal plan",)

DEFAULT_RECENT_LIMIT = 10


__all__ = [
    "CATEGORY_KEYWORDS",
    "DEFAULT_TRUSTED_SUMMARY_MARKERS",
    "DEFAULT_RECENT_LIMIT",
]
