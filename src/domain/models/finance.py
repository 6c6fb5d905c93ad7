"""Domain models for dashboard aggregates."""

from dataclasses import dataclass, field

from src.domain.constants import BUDGET_LIMIT_PCT, BUDGET_WARN_PCT
from src.domain.models.currency import CurrencyCode
from src.domain.models.records import Asset, AssetType, Transaction


@dataclass(frozen=True)
class UsageRatio:
    """Usage of a limit as a percentage.

    Attributes:
        raw_percent: Unclamped ratio, may exceed 100.
        clamped_percent: Ratio clamped to [0, 100] for progress bars.
        warn_threshold: Percentage above which usage is near the limit.
        limit_threshold: Percentage at which the limit is reached.
    """

    raw_percent: float
    clamped_percent: float
    warn_threshold: float = BUDGET_WARN_PCT
    limit_threshold: float = BUDGET_LIMIT_PCT

    @property
    def is_near_limit(self) -> bool:
        return self.raw_percent > self.warn_threshold

    @property
    def is_at_or_over_limit(self) -> bool:
        return self.raw_percent >= self.limit_threshold

    @property
    def is_over_limit(self) -> bool:
        return self.raw_percent > self.limit_threshold

    @property
    def status(self) -> str:
        """Return ``ok``, ``warning`` or ``exceeded``."""
        if self.is_at_or_over_limit:
            return "exceeded"
        if self.is_near_limit:
            return "warning"
        return "ok"


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures in the display currency."""

    net_worth: float
    liquidity: float
    invested: float
    income: float
    expense: float
    savings_rate: float
    currency_code: CurrencyCode


@dataclass(frozen=True)
class AllocationSlice:
    """Converted amount and share for one asset type."""

    asset_type: AssetType
    amount: float
    share_percent: float


@dataclass(frozen=True)
class AssetAllocation:
    """Allocation of holdings by asset type."""

    currency_code: CurrencyCode
    total: float
    slices: list[AllocationSlice]


@dataclass(frozen=True)
class AccountBalanceView:
    """Account balance converted to the display currency."""

    account_id: str
    name: str
    account_type: str
    balance: float
    currency_code: CurrencyCode
    institution: str | None = None


@dataclass(frozen=True)
class AccountBalances:
    """Converted account balances and their total."""

    currency_code: CurrencyCode
    total: float
    accounts: list[AccountBalanceView]


@dataclass(frozen=True)
class AccountDetail:
    """Per-account analytics in the display currency.

    Attributes:
        balance: Converted account balance.
        income: Converted income booked on the account (bank accounts).
        expense: Converted expenses booked on the account (bank accounts).
        holdings: Assets linked to the account (investment accounts).
        top_performer: Linked asset with the best daily change, if any.
    """

    account_id: str
    name: str
    account_type: str
    balance: float
    currency_code: CurrencyCode
    income: float = 0.0
    expense: float = 0.0
    holdings: list[Asset] = field(default_factory=list)
    top_performer: Asset | None = None


@dataclass(frozen=True)
class SpendingBreakdown:
    """Spending figures for the spending view."""

    currency_code: CurrencyCode
    total_spent: float
    total_budget: float
    remaining_budget: float
    budget_usage: UsageRatio
    by_category: dict[str, float] = field(default_factory=dict)
    by_day: dict[int, float] = field(default_factory=dict)
    largest_expense: Transaction | None = None


@dataclass(frozen=True)
class BudgetStatusView:
    """Budget limit and spending converted to the display currency."""

    budget_id: str
    category: str
    limit: float
    spent: float
    usage: UsageRatio
    currency_code: CurrencyCode


@dataclass(frozen=True)
class GoalProgressView:
    """Goal progress converted to the display currency."""

    goal_id: str
    name: str
    target_amount: float
    current_amount: float
    progress: UsageRatio
    currency_code: CurrencyCode


@dataclass(frozen=True)
class BudgetOverview:
    """Budgets and goals for the budgets view."""

    currency_code: CurrencyCode
    budgets: list[BudgetStatusView]
    goals: list[GoalProgressView]


__all__ = [
    "UsageRatio",
    "DashboardSummary",
    "AllocationSlice",
    "AssetAllocation",
    "AccountBalanceView",
    "AccountBalances",
    "AccountDetail",
    "SpendingBreakdown",
    "BudgetStatusView",
    "GoalProgressView",
    "BudgetOverview",
]
