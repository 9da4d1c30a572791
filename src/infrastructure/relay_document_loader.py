"""Document loader fetching campus card pages through the local relay.

The relay forwards a GET to the campus card site and returns the raw HTML
with permissive CORS headers. Nothing here parses HTML or retries; a
non-success answer becomes a TransportError value.
"""

from collections.abc import Callable
from datetime import datetime
from urllib.parse import urlencode

import httpx

from src.application.ports.document_loader import DocumentLoaderPort
from src.domain.models.statement import (
    RawDocument,
    StatementScope,
    TransportError,
)
from src.infrastructure.logging.logger import get_app_logger

RELAY_BALANCE_PATH = "/api/rutgers-balance"
CAMPUS_CARD_BASE_URL = "https://services.jsatech.com"
CAMPUS_CARD_CID = "52"


def build_statement_url(
    session_key: str,
    scope: StatementScope,
    base_url: str = CAMPUS_CARD_BASE_URL,
) -> str:
    """Return the statement detail page URL for a scope.

    Args:
        session_key: Campus card session credential.
        scope: Account and optional date range.
        base_url: Campus card site root.

    Returns:
        str: Fully qualified statement detail URL.
    """
    params = {"skey": session_key, "cid": CAMPUS_CARD_CID}
    params["acct"] = scope.account_id
    if scope.start_date is not None:
        params["startdate"] = scope.start_date.isoformat()
    if scope.end_date is not None:
        params["enddate"] = scope.end_date.isoformat()
    return f"{base_url.rstrip('/')}/statementdetail.php?{urlencode(params)}"


class RelayDocumentLoader(DocumentLoaderPort):
    """DocumentLoaderPort implementation backed by httpx."""

    def __init__(
        self,
        relay_url: str,
        timeout_seconds: float = 15.0,
        client: httpx.Client | None = None,
        clock: Callable[[], datetime] = datetime.now,
        logger=None,
    ) -> None:
        """Initialize the loader.

        Args:
            relay_url: Base URL of the pass-through relay.
            timeout_seconds: Request timeout applied to the default client.
            client: Optional preconfigured httpx client.
            clock: Source of retrieval timestamps.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._relay_url = relay_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout_seconds)
        self._clock = clock
        self._logger = logger or get_app_logger()

    def fetch(
        self,
        session_key: str,
        scope: StatementScope | None = None,
    ) -> RawDocument | TransportError:
        """Fetch one statement page.

        Args:
            session_key: Campus card session credential.
            scope: Optional statement page selection.

        Returns:
            RawDocument | TransportError: Page text or failure value.

        Raises:
            ValueError: If the session key is empty.
        """
        if not session_key or not session_key.strip():
            raise ValueError("A campus card session key is required.")

        params = {"skey": session_key}
        if scope is not None:
            params["url"] = build_statement_url(session_key, scope)
        url = f"{self._relay_url}{RELAY_BALANCE_PATH}"
        self._logger.info(
            f"Fetching statement page via relay {self._relay_url} "
            f"(session {session_key[:6]}...)"
        )

        try:
            response = self._client.get(
                url,
                params=params,
                headers={"Accept": "text/html"},
            )
        except httpx.HTTPError as exc:
            self._logger.error(f"Relay request failed: {exc}")
            return TransportError(message=str(exc), source_url=url)

        if not response.is_success:
            self._logger.error(
                f"Relay returned HTTP {response.status_code}"
            )
            return TransportError(
                message=f"Relay returned HTTP {response.status_code}",
                status_code=response.status_code,
                source_url=url,
            )

        text = response.text
        self._logger.info(f"Received statement page ({len(text)} chars)")
        return RawDocument(
            text=text,
            source_url=str(response.request.url),
            retrieved_at=self._clock(),
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()


__all__ = [
    "RelayDocumentLoader",
    "build_statement_url",
    "RELAY_BALANCE_PATH",
]
