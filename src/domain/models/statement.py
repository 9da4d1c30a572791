"""Domain models for fetched statement documents."""

from dataclasses import dataclass
from datetime import date, datetime


FETCH_FAILED = "fetch_failed"


@dataclass(frozen=True)
class RawDocument:
    """HTML page fetched from the campus card system."""

    text: str
    source_url: str
    retrieved_at: datetime


@dataclass(frozen=True)
class TransportError:
    """Failure value returned when a statement page could not be fetched.

    Attributes:
        message: Human readable reason.
        status_code: HTTP status when the relay answered, None otherwise.
        source_url: URL that was requested.
        kind: Failure kind; only fetch failures exist today.
    """

    message: str
    status_code: int | None = None
    source_url: str = ""
    kind: str = FETCH_FAILED


@dataclass(frozen=True)
class StatementScope:
    """Scope hint selecting the statement detail page of one account."""

    account_id: str
    start_date: date | None = None
    end_date: date | None = None


__all__ = [
    "FETCH_FAILED",
    "RawDocument",
    "TransportError",
    "StatementScope",
]
