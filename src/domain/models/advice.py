"""Domain models for advisor suggestions."""

from dataclasses import dataclass, field

from src.domain.models.currency import CurrencyCode


@dataclass(frozen=True)
class BudgetSuggestion:
    """Suggested limit for a spending category."""

    category: str
    limit: float
    reason: str
    currency: CurrencyCode


@dataclass(frozen=True)
class SpendingInsight:
    """Single observation about spending habits."""

    title: str
    description: str
    kind: str = "info"
    amount: float | None = None


@dataclass(frozen=True)
class SpendingAnalysis:
    """Advisor assessment of recent spending."""

    score: float
    summary: str
    insights: list[SpendingInsight] = field(default_factory=list)


@dataclass(frozen=True)
class PortfolioAction:
    """Suggested buy, sell or hold action for a holding."""

    asset: str
    action: str
    reason: str


@dataclass(frozen=True)
class PortfolioAnalysis:
    """Advisor assessment of the portfolio risk."""

    current_risk: str
    target_risk: str
    summary: str
    suggestions: list[PortfolioAction] = field(default_factory=list)


__all__ = [
    "BudgetSuggestion",
    "SpendingInsight",
    "SpendingAnalysis",
    "PortfolioAction",
    "PortfolioAnalysis",
]
