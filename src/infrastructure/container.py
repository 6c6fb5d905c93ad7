"""Composition root for wiring dashboard use cases."""

from src.application.ports.advisor import AdvisorPort
from src.application.use_cases import (
    ExtractTransactionUseCase,
    GetAccountBalancesUseCase,
    GetAccountDetailUseCase,
    GetAssetAllocationUseCase,
    GetBudgetOverviewUseCase,
    GetDashboardSummaryUseCase,
    GetSpendingBreakdownUseCase,
    RequestBudgetPlanUseCase,
    RequestPortfolioAnalysisUseCase,
    RequestSpendingAnalysisUseCase,
)
from src.domain.models import CurrencyCode, ExchangeRateTable
from src.domain.services import CurrencyConverter, build_default_rate_table
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings

_RATE_TABLE: ExchangeRateTable | None = None


def get_rate_table() -> ExchangeRateTable:
    """Return the process-wide static rate table."""
    global _RATE_TABLE
    if _RATE_TABLE is None:
        _RATE_TABLE = build_default_rate_table()
    return _RATE_TABLE


def build_currency_converter(
    display_currency: CurrencyCode | str | None = None,
    settings: DashboardSettings | None = None,
) -> CurrencyConverter:
    """Return a new converter for one dashboard session.

    Args:
        display_currency: Explicit display currency; overrides settings.
        settings: Settings providing the default display currency.
    """
    resolved = settings or DashboardSettings.from_env()
    return CurrencyConverter(
        get_rate_table(),
        display_currency=display_currency or resolved.display_currency,
    )


def build_dashboard_summary_use_case(
    converter: CurrencyConverter,
) -> GetDashboardSummaryUseCase:
    """Return the dashboard summary use case."""
    return GetDashboardSummaryUseCase(converter, logger=get_app_logger())


def build_asset_allocation_use_case(
    converter: CurrencyConverter,
) -> GetAssetAllocationUseCase:
    """Return the asset allocation use case."""
    return GetAssetAllocationUseCase(converter, logger=get_app_logger())


def build_account_balances_use_case(
    converter: CurrencyConverter,
) -> GetAccountBalancesUseCase:
    """Return the account balances use case."""
    return GetAccountBalancesUseCase(converter, logger=get_app_logger())


def build_account_detail_use_case(
    converter: CurrencyConverter,
) -> GetAccountDetailUseCase:
    """Return the account detail use case."""
    return GetAccountDetailUseCase(converter, logger=get_app_logger())


def build_spending_breakdown_use_case(
    converter: CurrencyConverter,
    settings: DashboardSettings | None = None,
) -> GetSpendingBreakdownUseCase:
    """Return the spending breakdown use case with configured thresholds."""
    resolved = settings or DashboardSettings.from_env()
    return GetSpendingBreakdownUseCase(
        converter,
        logger=get_app_logger(),
        warn_threshold=resolved.budget_warn_pct,
        limit_threshold=resolved.budget_limit_pct,
    )


def build_budget_overview_use_case(
    converter: CurrencyConverter,
    settings: DashboardSettings | None = None,
) -> GetBudgetOverviewUseCase:
    """Return the budget overview use case with configured thresholds."""
    resolved = settings or DashboardSettings.from_env()
    return GetBudgetOverviewUseCase(
        converter,
        logger=get_app_logger(),
        warn_threshold=resolved.budget_warn_pct,
        limit_threshold=resolved.budget_limit_pct,
    )


def build_advisor_use_cases(
    advisor: AdvisorPort,
    converter: CurrencyConverter,
) -> dict[str, object]:
    """Return the advisor-backed use cases keyed by name.

    The advisor adapter is supplied by the host application.
    """
    logger = get_app_logger()
    return {
        "budget_plan": RequestBudgetPlanUseCase(advisor, converter, logger=logger),
        "spending_analysis": RequestSpendingAnalysisUseCase(
            advisor,
            converter,
            logger=logger,
        ),
        "portfolio_analysis": RequestPortfolioAnalysisUseCase(
            advisor,
            converter,
            logger=logger,
        ),
        "extract_transaction": ExtractTransactionUseCase(
            advisor,
            converter,
            logger=logger,
        ),
    }


__all__ = [
    "get_rate_table",
    "build_currency_converter",
    "build_dashboard_summary_use_case",
    "build_asset_allocation_use_case",
    "build_account_balances_use_case",
    "build_account_detail_use_case",
    "build_spending_breakdown_use_case",
    "build_budget_overview_use_case",
    "build_advisor_use_cases",
]
