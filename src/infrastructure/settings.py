"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from datetime import date
import os

from src.domain.constants import DEFAULT_TRUSTED_SUMMARY_MARKERS
from src.domain.models.statement import StatementScope
from src.infrastructure.logging.logger import get_app_logger

DEFAULT_RELAY_URL = "http://localhost:3001"
DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CampusCardSettings:
    """Settings for fetching and interpreting campus card pages.

    Attributes:
        relay_url: Base URL of the pass-through relay.
        session_key: Campus card session credential, if configured.
        timeout_seconds: HTTP timeout for relay requests.
        trusted_summary_markers: Labels trusted in the account summary block.
        include_deposits: Keep deposit rows of the statement ledger.
        cache_ttl_seconds: Snapshot cache lifetime; 0 disables the cache.
        scope: Optional statement detail page selection.
        html_file: Saved page parsed instead of fetching, if set.
        gemini_api_key: API key for insights, if configured.
        gemini_model: Gemini model name.
    """

    relay_url: str = DEFAULT_RELAY_URL
    session_key: str | None = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    trusted_summary_markers: tuple[str, ...] = DEFAULT_TRUSTED_SUMMARY_MARKERS
    include_deposits: bool = True
    cache_ttl_seconds: float = 0.0
    scope: StatementScope | None = None
    html_file: str | None = None
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_GEMINI_MODEL

    @classmethod
    def from_env(cls) -> "CampusCardSettings":
        """Build settings from environment variables.

        Returns:
            CampusCardSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        relay_url = (
            os.getenv("CAMPUS_CARD_RELAY_URL", DEFAULT_RELAY_URL).strip()
            or DEFAULT_RELAY_URL
        )
        return cls(
            relay_url=relay_url,
            session_key=_optional(os.getenv("CAMPUS_CARD_SESSION_KEY")),
            timeout_seconds=cls._parse_seconds(
                "CAMPUS_CARD_TIMEOUT_SECONDS",
                DEFAULT_TIMEOUT_SECONDS,
                logger,
            ),
            trusted_summary_markers=cls._parse_markers(
                os.getenv("CAMPUS_CARD_SUMMARY_MARKERS")
            ),
            include_deposits=cls._parse_flag(
                "CAMPUS_CARD_INCLUDE_DEPOSITS",
                True,
                logger,
            ),
            cache_ttl_seconds=cls._parse_seconds(
                "CAMPUS_CARD_CACHE_TTL_SECONDS",
                0.0,
                logger,
            ),
            scope=cls._parse_scope(logger),
            html_file=_optional(os.getenv("CAMPUS_CARD_HTML_FILE")),
            gemini_api_key=_optional(os.getenv("GEMINI_API_KEY")),
            gemini_model=(
                _optional(os.getenv("GEMINI_MODEL")) or DEFAULT_GEMINI_MODEL
            ),
        )

    @staticmethod
    def _parse_seconds(name: str, default: float, logger) -> float:
        """Parse a non-negative number of seconds.

        Args:
            name: Environment variable to read.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            float: Parsed value or the default.
        """
        raw = _optional(os.getenv(name))
        if raw is None:
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid {name} '{raw}'. Using {default}.")
            return default
        if value < 0:
            logger.warning(f"Negative {name} '{raw}'. Using {default}.")
            return default
        return value

    @staticmethod
    def _parse_flag(name: str, default: bool, logger) -> bool:
        raw = _optional(os.getenv(name))
        if raw is None:
            return default
        lowered = raw.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        logger.warning(f"Invalid {name} '{raw}'. Using {default}.")
        return default

    @staticmethod
    def _parse_markers(raw: str | None) -> tuple[str, ...]:
        if raw is None:
            return DEFAULT_TRUSTED_SUMMARY_MARKERS
        markers = tuple(
            marker.strip() for marker in raw.split(",") if marker.strip()
        )
        return markers or DEFAULT_TRUSTED_SUMMARY_MARKERS

    @staticmethod
    def _parse_scope(logger) -> StatementScope | None:
        """Build the statement scope from account and date variables.

        Args:
            logger: Logger used for warnings.

        Returns:
            StatementScope | None: Scope when an account id is configured.
        """
        account_id = _optional(os.getenv("CAMPUS_CARD_ACCOUNT_ID"))
        if account_id is None:
            return None
        return StatementScope(
            account_id=account_id,
            start_date=_parse_date(
                os.getenv("CAMPUS_CARD_START_DATE"),
                logger,
            ),
            end_date=_parse_date(os.getenv("CAMPUS_CARD_END_DATE"), logger),
        )


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


__all__ = [
    "CampusCardSettings",
    "DEFAULT_RELAY_URL",
    "DEFAULT_GEMINI_MODEL",
]
