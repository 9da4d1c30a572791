"""Port for fetching campus card statement pages."""

from typing import Protocol

from src.domain.models.statement import (
    RawDocument,
    StatementScope,
    TransportError,
)


class DocumentLoaderPort(Protocol):
    """Port exposing read access to raw statement documents."""

    def fetch(
        self,
        session_key: str,
        scope: StatementScope | None = None,
    ) -> RawDocument | TransportError:
        """Return the fetched page or a transport failure value."""


__all__ = ["DocumentLoaderPort"]
