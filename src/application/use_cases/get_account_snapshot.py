"""Use case producing an account snapshot from the campus card pages.

The pipeline fetches one document, runs both extractors over it and merges
their output. It always answers with a well-formed snapshot; callers that
need to tell "no data" from "connection failed" read the transport error
carried next to it.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from src.application.ports.document_loader import DocumentLoaderPort
from src.application.ports.html_tree import HtmlParserPort
from src.application.ports.snapshot_cache import SnapshotCachePort
from src.application.use_cases.extract_balances import ExtractBalancesUseCase
from src.application.use_cases.extract_transactions import (
    ExtractTransactionsUseCase,
)
from src.application.use_cases.extraction_options import ExtractionOptions
from src.domain.models import (
    AccountBalance,
    AccountSnapshot,
    LedgerEntry,
    RawDocument,
    StatementScope,
    TransportError,
)
from src.domain.services.finance import assemble_snapshot
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class SnapshotResult:
    """Snapshot together with the outcome of the fetch.

    Attributes:
        snapshot: Assembled snapshot, all-zero when nothing was extracted.
        error: Transport failure, None when the page was fetched.
        source_url: URL of the fetched page when known.
        from_cache: True when the snapshot came from the cache.
    """

    snapshot: AccountSnapshot
    error: TransportError | None = None
    source_url: str | None = None
    from_cache: bool = False

    @property
    def ok(self) -> bool:
        """Return True when the page was fetched successfully."""
        return self.error is None


class GetAccountSnapshotUseCase:
    """Fetch, extract and assemble a campus card snapshot."""

    def __init__(
        self,
        loader: DocumentLoaderPort,
        parser: HtmlParserPort,
        options: ExtractionOptions | None = None,
        cache: SnapshotCachePort | None = None,
        clock: Callable[[], datetime] = datetime.now,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            loader: Port fetching raw statement pages.
            parser: Port turning markup into a queryable tree.
            options: Extraction flags shared by both extractors.
            cache: Optional cache consulted before fetching.
            clock: Source of "now" for fallback timestamps.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._loader = loader
        self._options = options or ExtractionOptions()
        self._cache = cache
        self._clock = clock
        self._logger = logger or get_app_logger()
        self._balances = ExtractBalancesUseCase(
            parser,
            options=self._options,
            clock=clock,
            logger=self._logger,
        )
        self._transactions = ExtractTransactionsUseCase(
            parser,
            options=self._options,
            logger=self._logger,
        )

    def execute(
        self,
        session_key: str,
        scope: StatementScope | None = None,
    ) -> SnapshotResult:
        """Return the snapshot for a session.

        A failed statement detail fetch falls back to the main balance page.

        Args:
            session_key: Opaque campus card session credential.
            scope: Optional statement page selection.

        Returns:
            SnapshotResult: Snapshot plus fetch outcome.
        """
        cache_key = (session_key, scope)
        if self._cache is not None:
            cached = self._cache.get(cache_key)
            if cached is not None:
                self._logger.debug("Serving account snapshot from cache")
                return SnapshotResult(snapshot=cached, from_cache=True)

        fetched = self._loader.fetch(session_key, scope)
        if isinstance(fetched, TransportError) and scope is not None:
            self._logger.warning(
                f"Statement detail fetch failed ({fetched.status_code}); "
                "falling back to the main balance page"
            )
            fetched = self._loader.fetch(session_key, None)
        if isinstance(fetched, TransportError):
            self._logger.warning(
                f"Statement fetch failed ({fetched.status_code}): "
                f"{fetched.message}"
            )
            return SnapshotResult(
                snapshot=AccountSnapshot.empty(self._clock()),
                error=fetched,
                source_url=fetched.source_url or None,
            )

        snapshot = self.from_document(fetched)
        if self._cache is not None:
            self._cache.put(cache_key, snapshot)
        return SnapshotResult(
            snapshot=snapshot,
            source_url=fetched.source_url,
        )

    def from_document(self, document: RawDocument) -> AccountSnapshot:
        """Extract and assemble a snapshot from an already fetched page.

        Args:
            document: Raw statement page.

        Returns:
            AccountSnapshot: Assembled snapshot.
        """
        balances = self._extract_balances(document)
        transactions = self._extract_transactions(document)
        snapshot = assemble_snapshot(
            balances,
            transactions,
            now=self._clock(),
            recent_limit=self._options.recent_limit,
        )
        self._logger.info(
            f"Assembled snapshot: meal_swipes={snapshot.meal_swipes}, "
            f"dining_dollars={snapshot.dining_dollars}, "
            f"stored_value={snapshot.stored_value}, "
            f"entries={len(snapshot.recent_entries)}"
        )
        return snapshot

    def _extract_balances(self, document: RawDocument) -> list[AccountBalance]:
        """Run the balance extractor, degrading to an empty list."""
        try:
            return self._balances.execute(document)
        except Exception as exc:
            self._logger.error(f"Balance extraction failed: {exc}")
            return []

    def _extract_transactions(
        self,
        document: RawDocument,
    ) -> list[LedgerEntry]:
        """Run the transaction extractor, degrading to an empty list."""
        try:
            return self._transactions.execute(document)
        except Exception as exc:
            self._logger.error(f"Transaction extraction failed: {exc}")
            return []


__all__ = ["GetAccountSnapshotUseCase", "SnapshotResult"]
