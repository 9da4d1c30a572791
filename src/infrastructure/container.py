"""Composition root for wiring infrastructure adapters."""

from src.application.ports.document_loader import DocumentLoaderPort
from src.application.ports.html_tree import HtmlParserPort
from src.application.ports.snapshot_cache import SnapshotCachePort
from src.application.ports.text_generator import TextGeneratorPort
from src.application.use_cases.extraction_options import ExtractionOptions
from src.application.use_cases.get_account_snapshot import (
    GetAccountSnapshotUseCase,
)
from src.application.use_cases.get_snapshot_insights import (
    GetSnapshotInsightsUseCase,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.relay_document_loader import RelayDocumentLoader
from src.infrastructure.settings import CampusCardSettings
from src.infrastructure.snapshot_cache import InMemorySnapshotCache
from src.infrastructure.soup_html_parser import SoupHtmlParser


def build_html_parser() -> HtmlParserPort:
    """Return the HTML parser adapter."""
    return SoupHtmlParser()


def build_document_loader(
    settings: CampusCardSettings | None = None,
) -> DocumentLoaderPort:
    """Return the relay document loader."""
    resolved = settings or CampusCardSettings.from_env()
    return RelayDocumentLoader(
        resolved.relay_url,
        timeout_seconds=resolved.timeout_seconds,
        logger=get_app_logger(),
    )


def build_extraction_options(
    settings: CampusCardSettings | None = None,
) -> ExtractionOptions:
    """Return extractor flags from settings."""
    resolved = settings or CampusCardSettings.from_env()
    return ExtractionOptions(
        trusted_summary_markers=resolved.trusted_summary_markers,
        include_deposits=resolved.include_deposits,
    )


def build_snapshot_cache(
    settings: CampusCardSettings | None = None,
) -> SnapshotCachePort | None:
    """Return the snapshot cache, or None when caching is disabled."""
    resolved = settings or CampusCardSettings.from_env()
    if resolved.cache_ttl_seconds <= 0:
        return None
    return InMemorySnapshotCache(resolved.cache_ttl_seconds)


def build_text_generator(
    settings: CampusCardSettings | None = None,
) -> TextGeneratorPort | None:
    """Return the Gemini generator, or None without an API key."""
    resolved = settings or CampusCardSettings.from_env()
    if not resolved.gemini_api_key:
        return None
    # Imported lazily so the SDK is only loaded when insights are enabled.
    from src.infrastructure.gemini_text_generator import GeminiTextGenerator

    return GeminiTextGenerator(
        resolved.gemini_api_key,
        model_name=resolved.gemini_model,
        logger=get_app_logger(),
    )


def build_snapshot_use_case(
    settings: CampusCardSettings | None = None,
    loader: DocumentLoaderPort | None = None,
) -> GetAccountSnapshotUseCase:
    """Return the snapshot pipeline wired to concrete adapters."""
    resolved = settings or CampusCardSettings.from_env()
    return GetAccountSnapshotUseCase(
        loader=loader or build_document_loader(resolved),
        parser=build_html_parser(),
        options=build_extraction_options(resolved),
        cache=build_snapshot_cache(resolved),
        logger=get_app_logger(),
    )


def build_insights_use_case(
    settings: CampusCardSettings | None = None,
) -> GetSnapshotInsightsUseCase:
    """Return the insights use case wired to the configured generator."""
    resolved = settings or CampusCardSettings.from_env()
    return GetSnapshotInsightsUseCase(
        build_text_generator(resolved),
        logger=get_app_logger(),
    )


__all__ = [
    "build_html_parser",
    "build_document_loader",
    "build_extraction_options",
    "build_snapshot_cache",
    "build_text_generator",
    "build_snapshot_use_case",
    "build_insights_use_case",
]
