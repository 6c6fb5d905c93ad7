"""CLI adapter printing the dashboard summary for the demo portfolio.

The display currency comes from ``DASHBOARD_DISPLAY_CURRENCY``.
"""

from src.domain.errors import UnknownCurrencyError
from src.infrastructure.container import (
    build_budget_overview_use_case,
    build_currency_converter,
    build_dashboard_summary_use_case,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sample_data import build_demo_portfolio
from src.infrastructure.settings import DashboardSettings


def main() -> None:
    """Compute and print the dashboard summary."""
    logger = get_app_logger()
    try:
        settings = DashboardSettings.from_env()
    except UnknownCurrencyError as exc:
        logger.error(str(exc))
        return

    converter = build_currency_converter(settings=settings)
    portfolio = build_demo_portfolio()
    summary = build_dashboard_summary_use_case(converter).execute(
        portfolio.assets,
        portfolio.transactions,
    )
    overview = build_budget_overview_use_case(converter, settings).execute(
        portfolio.budgets,
        portfolio.goals,
    )

    fmt = converter.format
    currency = summary.currency_code
    print(f"Dashboard summary (currency={currency.value})")
    print(f"Net worth: {fmt(summary.net_worth, currency)}")
    print(f"Liquidity: {fmt(summary.liquidity, currency)}")
    print(f"Invested: {fmt(summary.invested, currency)}")
    print(f"Income: {fmt(summary.income, currency)}")
    print(f"Expenses: {fmt(summary.expense, currency)}")
    print(f"Savings rate: {summary.savings_rate:.1f}%")
    for status in overview.budgets:
        print(
            f"Budget {status.category}: {fmt(status.spent, currency)} of "
            f"{fmt(status.limit, currency)} "
            f"({status.usage.raw_percent:.0f}%, {status.usage.status})"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
