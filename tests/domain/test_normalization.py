"""Tests for statement text normalization helpers."""

from datetime import datetime
from decimal import Decimal

import pytest

from src.domain.services.normalization import (
    extract_amount,
    normalize_datetime_text,
    normalize_label,
    parse_amount,
    parse_statement_datetime,
    parse_statement_datetime_or,
)


@pytest.mark.parametrize("raw", ["$47.00", "47", " 47.00 "])
def test_parse_amount_normalizes_currency_text(raw: str) -> None:
    """Currency symbols and padding should not change the value."""
    assert parse_amount(raw) == Decimal("47.00")


def test_parse_amount_defaults_to_zero() -> None:
    assert parse_amount("N/A") == Decimal("0")
    assert parse_amount(None) == Decimal("0")


def test_extract_amount_reports_missing_numbers() -> None:
    """extract_amount should distinguish missing numbers from zero."""
    assert extract_amount("N/A") is None
    assert extract_amount("") is None
    assert extract_amount("0.00") == Decimal("0.00")


def test_extract_amount_handles_signs_and_thousands() -> None:
    assert extract_amount("-1") == Decimal("1")
    assert extract_amount("-$6.25") == Decimal("6.25")
    assert extract_amount("$1,047.50") == Decimal("1047.50")
    assert extract_amount("Balance .75") == Decimal(".75")


def test_extract_amount_takes_first_number() -> None:
    """Trailing numbers such as a nested balance should be ignored."""
    assert extract_amount("-1 Balance: 47") == Decimal("1")


def test_normalize_label_collapses_whitespace() -> None:
    assert normalize_label("  New  Brunswick\n- 150 MEAL Plan ") == (
        "new brunswick - 150 meal plan"
    )
    assert normalize_label(None) == ""


def test_normalize_datetime_text_inserts_meridiem_space() -> None:
    assert normalize_datetime_text("11/14/2025 02:52PM") == (
        "11/14/2025 02:52 PM"
    )
    assert normalize_datetime_text("11/14/2025 02:52 pm") == (
        "11/14/2025 02:52 PM"
    )


def test_parse_statement_datetime_reads_compact_meridiem() -> None:
    """Statement dates omit the space before AM/PM."""
    assert parse_statement_datetime("11/14/2025 02:52PM") == datetime(
        2025, 11, 14, 14, 52
    )
    assert parse_statement_datetime("11/01/2025 12:00AM") == datetime(
        2025, 11, 1, 0, 0
    )


def test_parse_statement_datetime_accepts_plain_dates() -> None:
    assert parse_statement_datetime("11/14/2025") == datetime(2025, 11, 14)
    assert parse_statement_datetime("2025-11-14") == datetime(2025, 11, 14)


def test_parse_statement_datetime_returns_none_for_garbage() -> None:
    assert parse_statement_datetime("whenever") is None
    assert parse_statement_datetime("") is None
    assert parse_statement_datetime("no transactions yet") is None


def test_parse_statement_datetime_or_uses_fallback(fixed_now) -> None:
    assert parse_statement_datetime_or("whenever", fixed_now) == fixed_now
    assert parse_statement_datetime_or(
        "11/14/2025 02:52PM",
        fixed_now,
    ) == datetime(2025, 11, 14, 14, 52)


def test_parse_statement_datetime_accepts_month_names() -> None:
    assert parse_statement_datetime("Nov 14, 2025 02:52PM") == datetime(
        2025, 11, 14, 14, 52
    )
    assert parse_statement_datetime("November 14, 2025") == datetime(
        2025, 11, 14
    )
    assert parse_statement_datetime("2025/11/14 14:52") == datetime(
        2025, 11, 14, 14, 52
    )


def test_parse_statement_datetime_drops_timezone() -> None:
    parsed = parse_statement_datetime("2025-11-14T14:52:00Z")

    assert parsed == datetime(2025, 11, 14, 14, 52)
    assert parsed.tzinfo is None
