"""Domain normalization helpers for scraped statement text."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
import re

from dateutil import parser as dtparse

_AMOUNT_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+")
_THOUSANDS_RE = re.compile(r"(?<=\d),(?=\d{3}(?!\d))")
_MERIDIEM_RE = re.compile(r"(?<=\d)\s*([AaPp][Mm])\b")


def collapse_whitespace(value: str | None) -> str:
    """Collapse runs of whitespace and strip the result."""
    return " ".join((value or "").split())


def normalize_label(label: str | None) -> str:
    """Return a comparison key for account labels.

    Args:
        label: Raw account label.

    Returns:
        str: Lowercased label with collapsed whitespace.
    """
    return collapse_whitespace(label).lower()


def extract_amount(text: str | None) -> Decimal | None:
    """Extract the first numeric run from a text fragment.

    Currency symbols, signs and stray characters are ignored; thousands
    separators are removed before matching.

    Args:
        text: Raw cell text such as "$1,047.50" or "-1".

    Returns:
        Decimal | None: Absolute amount, None when no number is present.
    """
    if not text:
        return None
    cleaned = _THOUSANDS_RE.sub("", text)
    match = _AMOUNT_RE.search(cleaned)
    if match is None:
        return None
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None


def parse_amount(text: str | None) -> Decimal:
    """Extract an amount, falling back to zero when none is present.

    Args:
        text: Raw cell text.

    Returns:
        Decimal: Parsed absolute amount or Decimal("0").
    """
    amount = extract_amount(text)
    return amount if amount is not None else Decimal("0")


def normalize_datetime_text(text: str | None) -> str:
    """Insert the space the statement pages omit before AM/PM markers.

    "11/14/2025 02:52PM" becomes "11/14/2025 02:52 PM".
    """
    cleaned = collapse_whitespace(text)
    return _MERIDIEM_RE.sub(lambda m: f" {m.group(1).upper()}", cleaned)


def parse_statement_datetime(text: str | None) -> datetime | None:
    """Parse a free-text statement date.

    Month-first numeric dates, month names and ISO timestamps are all
    accepted. Any timezone is dropped so entries compare as naive local time.

    Args:
        text: Raw date text, e.g. "11/14/2025 02:52PM".

    Returns:
        datetime | None: Naive local timestamp, None when unparsable.
    """
    candidate = normalize_datetime_text(text)
    if not candidate:
        return None
    try:
        parsed = dtparse.parse(candidate)
    except (ValueError, OverflowError):
        return None
    return parsed.replace(tzinfo=None)


def parse_statement_datetime_or(
    text: str | None,
    fallback: datetime,
) -> datetime:
    """Parse a statement date, substituting the fallback on failure."""
    parsed = parse_statement_datetime(text)
    return parsed if parsed is not None else fallback


__all__ = [
    "collapse_whitespace",
    "normalize_label",
    "extract_amount",
    "parse_amount",
    "normalize_datetime_text",
    "parse_statement_datetime",
    "parse_statement_datetime_or",
]
