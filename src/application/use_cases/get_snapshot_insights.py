"""Use case asking the text generator for insights on a snapshot."""

import json
import re
from typing import Any

from src.application.ports.text_generator import TextGeneratorPort
from src.domain.models import AccountSnapshot, Insight, InsightReport
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal

NO_GENERATOR_MESSAGE = "Insights unavailable (no API key)."
UNPARSABLE_MESSAGE = "Unable to parse model response."

_FENCE_RE = re.compile(r"^```(?:json)?\s*|\s*```$")
_TRAILING_COMMA_RE = re.compile(r",\s*([\]}])")


def build_insight_prompt(snapshot: AccountSnapshot) -> str:
    """Render snapshot values into a natural-language request.

    Args:
        snapshot: Snapshot to describe.

    Returns:
        str: Prompt text.
    """
    lines = [
        "Provide positive, supportive financial insights for a college "
        "student based on their campus card balances.",
        f"Meal swipes remaining: {snapshot.meal_swipes}.",
        f"Dining dollars remaining: ${snapshot.dining_dollars:.2f}.",
        f"Stored value remaining: ${snapshot.stored_value:.2f}.",
        f"Balances last updated {snapshot.last_updated:%Y-%m-%d %H:%M}.",
    ]
    if snapshot.recent_entries:
        lines.append("Recent transactions:")
        for entry in snapshot.recent_entries:
            lines.append(
                f"- {entry.occurred_at_raw or 'unknown date'}: "
                f"{entry.description} ({entry.amount}) "
                f"on {entry.account_label or 'unknown account'}"
            )
    else:
        lines.append("No recent transactions were found.")
    lines.append(
        "Return JSON only with fields: insights[] (type, title, message, "
        "priority, actionItems, predictedSavings), summary, habitStory."
    )
    return "\n".join(lines)


def parse_insight_reply(text: str) -> InsightReport:
    """Parse the model's JSON reply into an InsightReport.

    Markdown code fences and trailing commas are removed before decoding.

    Args:
        text: Raw model reply.

    Returns:
        InsightReport: Parsed report.

    Raises:
        ValueError: If the reply is not a JSON object or a list field
            holds another type.
    """
    cleaned = _FENCE_RE.sub("", text.strip())
    cleaned = _TRAILING_COMMA_RE.sub(r"\1", cleaned)
    data = json.loads(cleaned, strict=False)
    if not isinstance(data, dict):
        raise ValueError("Model reply is not a JSON object")

    insights = tuple(
        _build_insight(item)
        for item in _as_list(data, "insights")
        if isinstance(item, dict)
    )
    habit_story = data.get("habitStory")
    return InsightReport(
        summary=str(data.get("summary") or ""),
        insights=insights,
        habit_story=str(habit_story) if habit_story else None,
    )


def _as_list(data: dict[str, Any], key: str) -> list[Any]:
    """Return a list field, raising ValueError when it has another type."""
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"Field '{key}' is not a list")
    return value


def _build_insight(item: dict[str, Any]) -> Insight:
    savings = item.get("predictedSavings")
    return Insight(
        kind=str(item.get("type") or "suggestion"),
        title=str(item.get("title") or ""),
        message=str(item.get("message") or ""),
        priority=str(item.get("priority") or "medium"),
        action_items=tuple(str(a) for a in _as_list(item, "actionItems")),
        predicted_savings=(
            coerce_decimal(savings, default=None)
            if savings is not None
            else None
        ),
    )


class GetSnapshotInsightsUseCase:
    """Generate spending insights for an account snapshot."""

    def __init__(
        self,
        generator: TextGeneratorPort | None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            generator: Text generation port, None when not configured.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._generator = generator
        self._logger = logger or get_app_logger()

    def execute(self, snapshot: AccountSnapshot) -> InsightReport:
        """Return insights for the snapshot.

        Args:
            snapshot: Snapshot rendered into the request.

        Returns:
            InsightReport: Parsed report, or an unavailable report.
        """
        if self._generator is None:
            return InsightReport.unavailable(NO_GENERATOR_MESSAGE)

        prompt = build_insight_prompt(snapshot)
        try:
            reply = self._generator.generate(prompt)
        except RuntimeError as exc:
            self._logger.warning(f"Insight generation failed: {exc}")
            return InsightReport.unavailable(str(exc))

        try:
            report = parse_insight_reply(reply)
        except ValueError as exc:
            self._logger.warning(
                f"Could not parse insight reply: {exc}. "
                f"Raw reply (first 100 chars): {reply[:100]}"
            )
            return InsightReport.unavailable(UNPARSABLE_MESSAGE)

        self._logger.info(f"Generated {len(report.insights)} insights")
        return report


__all__ = [
    "GetSnapshotInsightsUseCase",
    "build_insight_prompt",
    "parse_insight_reply",
    "NO_GENERATOR_MESSAGE",
    "UNPARSABLE_MESSAGE",
]

