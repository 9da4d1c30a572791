"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import streamlit as st

from src.application.use_cases.get_account_snapshot import SnapshotResult
from src.domain.models import AccountSnapshot, InsightReport, LedgerEntry
from src.infrastructure.container import (
    build_insights_use_case,
    build_snapshot_use_case,
)
from src.infrastructure.settings import CampusCardSettings

REFRESH_SECONDS = 60


def _fetch_snapshot() -> SnapshotResult | None:
    """Fetch the snapshot using the configured relay session."""
    settings = CampusCardSettings.from_env()
    if not settings.session_key:
        return None
    use_case = build_snapshot_use_case(settings)
    return use_case.execute(settings.session_key, settings.scope)


@st.cache_data(show_spinner=False, ttl=REFRESH_SECONDS)
def _load_snapshot(schema_version: int = 1) -> SnapshotResult | None:
    """Cached wrapper around _fetch_snapshot for Streamlit sessions."""
    _ = schema_version
    return _fetch_snapshot()


def _fetch_insights(snapshot: AccountSnapshot) -> InsightReport:
    """Ask the configured text generator for insights."""
    use_case = build_insights_use_case()
    return use_case.execute(snapshot)


def _format_currency(value: Decimal) -> str:
    """Format currency values for display."""
    return f"${value:,.2f}"


def _format_swipes(value: Decimal) -> str:
    """Format meal swipe counts without trailing zeros."""
    return f"{value.normalize():f}" if value == value.to_integral() else (
        f"{value:,.2f}"
    )


def _entries_table(entries: Sequence[LedgerEntry]) -> list[dict[str, str]]:
    """Prepare ledger entries for st.dataframe."""
    return [
        {
            "Date": entry.occurred_at_raw,
            "Location": entry.description,
            "Amount": f"{entry.amount}",
            "Balance After": (
                f"{entry.running_balance}"
                if entry.running_balance is not None
                else "n/a"
            ),
            "Account": entry.account_label,
        }
        for entry in entries
    ]


def _render_balances(snapshot: AccountSnapshot) -> None:
    """Render the three balance metrics."""
    swipes_col, dining_col, stored_col = st.columns(3)
    swipes_col.metric("Meal Swipes", _format_swipes(snapshot.meal_swipes))
    dining_col.metric(
        "Dining Dollars",
        _format_currency(snapshot.dining_dollars),
    )
    stored_col.metric(
        "Stored Value",
        _format_currency(snapshot.stored_value),
    )
    st.caption(f"Last updated {snapshot.last_updated:%Y-%m-%d %H:%M}")


def _render_entries(entries: Sequence[LedgerEntry]) -> None:
    """Render the recent ledger entries."""
    st.subheader("Recent Transactions")
    if not entries:
        st.info("No recent transactions found.")
        return
    st.dataframe(_entries_table(entries), width="stretch", hide_index=True)


def _render_insights(report: InsightReport) -> None:
    """Render generated insights."""
    st.subheader("Insights")
    if not report.available:
        st.info(report.summary)
        return
    st.write(report.summary)
    for insight in report.insights:
        st.markdown(f"**{insight.title}** ({insight.priority})")
        st.write(insight.message)
    if report.habit_story:
        st.caption(report.habit_story)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Campus Card Dashboard", layout="wide")
    st.title("Campus Card Dashboard")

    result = _load_snapshot(schema_version=1)
    if result is None:
        st.warning("Set CAMPUS_CARD_SESSION_KEY to load your balances.")
        return
    if not result.ok:
        st.warning(
            "Could not reach the campus card page: "
            f"{result.error.message}"
        )

    _render_balances(result.snapshot)
    _render_entries(result.snapshot.recent_entries)

    if st.button("Generate insights"):
        _render_insights(_fetch_insights(result.snapshot))


if __name__ == "__main__":  # pragma: no cover
    main()
