"""Domain policies package."""

from .categorization import classify_account_label, is_trusted_summary_label

__all__ = ["classify_account_label", "is_trusted_summary_label"]
