"""Domain models package."""

from .advice import (
    BudgetSuggestion,
    PortfolioAction,
    PortfolioAnalysis,
    SpendingAnalysis,
    SpendingInsight,
)
from .currency import CurrencyCode, ExchangeRateTable, MonetaryValue
from .finance import (
    AccountBalances,
    AccountBalanceView,
    AccountDetail,
    AllocationSlice,
    AssetAllocation,
    BudgetOverview,
    BudgetStatusView,
    DashboardSummary,
    GoalProgressView,
    SpendingBreakdown,
    UsageRatio,
)
from .records import (
    Account,
    AccountType,
    Asset,
    AssetType,
    Budget,
    Goal,
    Transaction,
    TransactionType,
)

__all__ = [
    "BudgetSuggestion",
    "PortfolioAction",
    "PortfolioAnalysis",
    "SpendingAnalysis",
    "SpendingInsight",
    "CurrencyCode",
    "ExchangeRateTable",
    "MonetaryValue",
    "Account",
    "AccountType",
    "Asset",
    "AssetType",
    "Budget",
    "Goal",
    "Transaction",
    "TransactionType",
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
