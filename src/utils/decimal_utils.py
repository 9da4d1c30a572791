"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

_ZERO = Decimal("0")


def coerce_decimal(value, default: Decimal | None = _ZERO) -> Decimal | None:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from JSON payloads or adapters.
        default: Value returned for None or non-numeric input.

    Returns:
        Decimal | None: Normalized numeric value or the default.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, Decimal):
        return value
    try:
        result = Decimal(str(value).strip())
    except InvalidOperation:
        return default
    return result if result.is_finite() else default


__all__ = ["coerce_decimal"]
