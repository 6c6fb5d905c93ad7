"""Use case to compute the headline dashboard figures."""

from collections.abc import Sequence

from src.domain.models import Asset, DashboardSummary, Transaction, TransactionType
from src.domain.policies import is_invested, is_liquid
from src.domain.services import (
    CurrencyConverter,
    savings_rate,
    total_by_type,
    total_value,
    validate_asset_values,
)
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardSummaryUseCase:
    """Compute net worth, liquidity, cashflow totals and savings rate."""

    def __init__(
        self,
        converter: CurrencyConverter,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            converter: Session converter targeting the display currency.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._converter = converter
        self._logger = logger or get_app_logger()

    def execute(
        self,
        assets: Sequence[Asset],
        transactions: Sequence[Transaction],
    ) -> DashboardSummary:
        """Return the dashboard summary in the display currency.

        Args:
            assets: Current holdings.
            transactions: Transactions for the selected period.

        Returns:
            DashboardSummary: Headline figures.
        """
        validate_asset_values(assets, self._logger)
        converter = self._converter
        net_worth = total_value(assets, converter)
        liquidity = total_value(assets, converter, predicate=is_liquid)
        invested = total_value(assets, converter, predicate=is_invested)
        income = total_by_type(transactions, TransactionType.INCOME, converter)
        expense = total_by_type(transactions, TransactionType.EXPENSE, converter)
        rate = savings_rate(income, expense)

        self._logger.info(
            f"Dashboard summary computed: net_worth={net_worth}, "
            f"income={income}, expense={expense}, "
            f"currency={converter.display_currency.value}"
        )
        return DashboardSummary(
            net_worth=net_worth,
            liquidity=liquidity,
            invested=invested,
            income=income,
            expense=expense,
            savings_rate=rate,
            currency_code=converter.display_currency,
        )


__all__ = ["GetDashboardSummaryUseCase", "DashboardSummary"]
