"""Configuration flags shared by the statement extractors."""

from dataclasses import dataclass

from src.domain.constants import (
    DEFAULT_RECENT_LIMIT,
    DEFAULT_TRUSTED_SUMMARY_MARKERS,
)


@dataclass(frozen=True)
class ExtractionOptions:
    """Options selecting extractor behavior variants.

    Attributes:
        trusted_summary_markers: Label substrings under which a balance from
            the account summary block is accepted.
        include_deposits: Keep positive "deposit" rows of the statement
            ledger alongside debits.
        recent_limit: Maximum number of entries kept in a snapshot.
    """

    trusted_summary_markers: tuple[str, ...] = DEFAULT_TRUSTED_SUMMARY_MARKERS
    include_deposits: bool = True
    recent_limit: int = DEFAULT_RECENT_LIMIT


__all__ = ["ExtractionOptions"]
