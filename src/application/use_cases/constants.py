"""Structural markers of the campus card statement pages."""

SUMMARY_CLASS = "jsa_summary"
LEDGER_TABLE_CLASS = "jsa_transactions"
DATE_CELL_CLASS = "jsa_month"
DESCRIPTION_CELL_CLASS = "jsa_desc"
AMOUNT_CELL_CLASS = "jsa_amount"
POSITIVE_CLASS = "pos"
NEGATIVE_CLASS = "neg"
HEADER_CELL_CLASS = "jsa_table-headers"
BALANCE_AFTER_CLASS = "jsa_data-bal"
BALANCE_CELL_CLASSES = ("jsa_balance", "bal")

ACCOUNT_NAME_LABEL = "Account Name"
CURRENT_BALANCE_LABEL = "Current Balance"
DEPOSIT_KEYWORD = "deposit"


__all__ = [
    "SUMMARY_CLASS",
    "LEDGER_TABLE_CLASS",
    "DATE_CELL_CLASS",
    "DESCRIPTION_CELL_CLASS",
    "AMOUNT_CELL_CLASS",
    "POSITIVE_CLASS",
    "NEGATIVE_CLASS",
    "HEADER_CELL_CLASS",
    "BALANCE_AFTER_CLASS",
    "BALANCE_CELL_CLASSES",
    "ACCOUNT_NAME_LABEL",
    "CURRENT_BALANCE_LABEL",
    "DEPOSIT_KEYWORD",
]
