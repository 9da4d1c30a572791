"""CLI adapter printing the campus card snapshot.

The page is fetched through the relay using ``CAMPUS_CARD_SESSION_KEY``, or
read from ``CAMPUS_CARD_HTML_FILE`` when that variable is set.
"""

from src.domain.models import AccountSnapshot, InsightReport
from src.infrastructure.container import (
    build_insights_use_case,
    build_snapshot_use_case,
)
from src.infrastructure.file_document_loader import FileDocumentLoader
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import CampusCardSettings

OFFLINE_SESSION_KEY = "offline"


def format_snapshot(snapshot: AccountSnapshot) -> list[str]:
    """Return printable lines describing a snapshot."""
    lines = [
        f"Meal swipes:    {snapshot.meal_swipes}",
        f"Dining dollars: ${snapshot.dining_dollars:,.2f}",
        f"Stored value:   ${snapshot.stored_value:,.2f}",
        f"Last updated:   {snapshot.last_updated:%Y-%m-%d %H:%M}",
        f"Recent entries: {len(snapshot.recent_entries)}",
    ]
    for entry in snapshot.recent_entries:
        lines.append(
            f"  {entry.occurred_at_raw:<20} {entry.description:<32} "
            f"{entry.amount:>8}  [{entry.account_label}]"
        )
    return lines


def format_insights(report: InsightReport) -> list[str]:
    """Return printable lines describing an insight report."""
    lines = [f"Insights: {report.summary}"]
    for insight in report.insights:
        lines.append(f"  [{insight.priority}] {insight.title}: {insight.message}")
    return lines


def main() -> None:
    """Fetch or read a statement page and print its snapshot."""
    logger = get_app_logger()
    settings = CampusCardSettings.from_env()

    if settings.html_file:
        loader = FileDocumentLoader(settings.html_file, logger=logger)
        session_key = settings.session_key or OFFLINE_SESSION_KEY
    elif settings.session_key:
        loader = None
        session_key = settings.session_key
    else:
        logger.warning(
            "CAMPUS_CARD_SESSION_KEY or CAMPUS_CARD_HTML_FILE is required."
        )
        return

    use_case = build_snapshot_use_case(settings, loader=loader)
    result = use_case.execute(session_key, settings.scope)
    get_usage_logger().info(
        f"snapshot source={result.source_url} ok={result.ok} "
        f"cached={result.from_cache}"
    )

    for line in format_snapshot(result.snapshot):
        print(line)
    if not result.ok:
        print(f"Fetch failed: {result.error.message}")
        raise SystemExit(1)

    if settings.gemini_api_key:
        report = build_insights_use_case(settings).execute(result.snapshot)
        for line in format_insights(report):
            print(line)


if __name__ == "__main__":  # pragma: no cover
    main()
