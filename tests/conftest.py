"""Shared fixtures for the test suite."""

from datetime import datetime
from pathlib import Path

import pytest

from src.domain.models import RawDocument

FIXTURES_DIR = Path(__file__).parent / "fixtures"
FIXED_NOW = datetime(2025, 11, 20, 8, 0)


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def load_fixture():
    """Return a loader building RawDocument objects from fixture files."""

    def _load(name: str) -> RawDocument:
        path = FIXTURES_DIR / name
        return RawDocument(
            text=path.read_text(encoding="utf-8"),
            source_url=path.as_uri(),
            retrieved_at=FIXED_NOW,
        )

    return _load
