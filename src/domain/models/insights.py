"""Domain models for generated spending insights."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Insight:
    """Single insight card returned by the text generator."""

    kind: str
    title: str
    message: str
    priority: str = "medium"
    action_items: tuple[str, ...] = field(default_factory=tuple)
    predicted_savings: Decimal | None = None


@dataclass(frozen=True)
class InsightReport:
    """Insights produced for one account snapshot.

    Attributes:
        summary: Short natural-language summary.
        insights: Individual insight cards.
        habit_story: Optional narrative of spending habits.
        available: False when no insights could be generated.
    """

    summary: str
    insights: tuple[Insight, ...] = field(default_factory=tuple)
    habit_story: str | None = None
    available: bool = True

    @classmethod
    def unavailable(cls, reason: str) -> "InsightReport":
        """Return an empty report explaining why insights are missing."""
        return cls(summary=reason, insights=(), available=False)


__all__ = ["Insight", "InsightReport"]
