"""Application use cases package."""

from .advisor_utils import AdvisorOutcome
from .extract_transaction import ExtractTransactionUseCase
from .get_account_balances import GetAccountBalancesUseCase
from .get_account_detail import GetAccountDetailUseCase
from .get_asset_allocation import GetAssetAllocationUseCase
from .get_budget_overview import GetBudgetOverviewUseCase
from .get_dashboard_summary import GetDashboardSummaryUseCase
from .get_spending_breakdown import GetSpendingBreakdownUseCase
from .request_budget_plan import RequestBudgetPlanUseCase
from .request_portfolio_analysis import RequestPortfolioAnalysisUseCase
from .request_spending_analysis import RequestSpendingAnalysisUseCase

__all__ = [
    "AdvisorOutcome",
    "ExtractTransactionUseCase",
    "GetAccountBalancesUseCase",
    "GetAccountDetailUseCase",
    "GetAssetAllocationUseCase",
    "GetBudgetOverviewUseCase",
    "GetDashboardSummaryUseCase",
    "GetSpendingBreakdownUseCase",
    "RequestBudgetPlanUseCase",
    "RequestPortfolioAnalysisUseCase",
    "RequestSpendingAnalysisUseCase",
]
