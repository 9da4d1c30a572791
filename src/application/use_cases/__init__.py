"""Application use cases package."""

from .extract_balances import ExtractBalancesUseCase
from .extract_transactions import ExtractTransactionsUseCase
from .extraction_options import ExtractionOptions
from .get_account_snapshot import GetAccountSnapshotUseCase, SnapshotResult
from .get_snapshot_insights import GetSnapshotInsightsUseCase

__all__ = [
    "ExtractBalancesUseCase",
    "ExtractTransactionsUseCase",
    "ExtractionOptions",
    "GetAccountSnapshotUseCase",
    "SnapshotResult",
    "GetSnapshotInsightsUseCase",
]
