"""Document loader reading a saved statement page from disk."""

from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from src.application.ports.document_loader import DocumentLoaderPort
from src.domain.models.statement import (
    RawDocument,
    StatementScope,
    TransportError,
)
from src.infrastructure.logging.logger import get_app_logger


class FileDocumentLoader(DocumentLoaderPort):
    """DocumentLoaderPort implementation for offline HTML captures.

    The session key and scope are accepted for interface compatibility but
    do not select anything; the configured file is always returned.
    """

    def __init__(
        self,
        path: Path | str,
        clock: Callable[[], datetime] = datetime.now,
        logger=None,
    ) -> None:
        self._path = Path(path).expanduser()
        self._clock = clock
        self._logger = logger or get_app_logger()

    def fetch(
        self,
        session_key: str,
        scope: StatementScope | None = None,
    ) -> RawDocument | TransportError:
        """Return the saved page, or a failure value when unreadable."""
        source_url = self._path.resolve().as_uri()
        try:
            text = self._path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            self._logger.error(f"Could not read {self._path}: {exc}")
            return TransportError(message=str(exc), source_url=source_url)
        return RawDocument(
            text=text,
            source_url=source_url,
            retrieved_at=self._clock(),
        )


__all__ = ["FileDocumentLoader"]
