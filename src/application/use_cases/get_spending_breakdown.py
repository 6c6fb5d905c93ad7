"""Use case to compute spending figures for a period."""

from collections.abc import Sequence

from src.domain.constants import BUDGET_LIMIT_PCT, BUDGET_WARN_PCT
from src.domain.models import (
    Budget,
    MonetaryValue,
    SpendingBreakdown,
    Transaction,
    TransactionType,
)
from src.domain.services import (
    CurrencyConverter,
    budget_usage_percent,
    by_category,
    by_day_of_month,
    group_sum,
    largest_expense,
    sum_converted,
    total_by_type,
    validate_budget_limits,
)
from src.infrastructure.logging.logger import get_app_logger


class GetSpendingBreakdownUseCase:
    """Compute spending totals, budget headroom and chart buckets."""

    def __init__(
        self,
        converter: CurrencyConverter,
        logger=None,
        warn_threshold: float = BUDGET_WARN_PCT,
        limit_threshold: float = BUDGET_LIMIT_PCT,
    ) -> None:
        """Initialize the use case.

        Args:
            converter: Session converter targeting the display currency.
            logger: Optional logger compatible with logging.Logger-like API.
            warn_threshold: Usage percentage flagged as near the limit.
            limit_threshold: Usage percentage flagged as exceeded.
        """
        self._converter = converter
        self._logger = logger or get_app_logger()
        self._warn_threshold = warn_threshold
        self._limit_threshold = limit_threshold

    def execute(
        self,
        transactions: Sequence[Transaction],
        budgets: Sequence[Budget] = (),
    ) -> SpendingBreakdown:
        """Return spending figures in the display currency.

        Args:
            transactions: Transactions for the selected period.
            budgets: Budgets whose converted limits form the total budget.

        Returns:
            SpendingBreakdown: Totals, usage and per-category/per-day sums.
        """
        validate_budget_limits(budgets, self._logger)
        converter = self._converter
        total_spent = total_by_type(
            transactions,
            TransactionType.EXPENSE,
            converter,
        )
        total_budget = sum_converted(
            (MonetaryValue(budget.limit, budget.currency) for budget in budgets),
            converter,
        )
        usage = budget_usage_percent(
            total_spent,
            total_budget,
            warn_threshold=self._warn_threshold,
            limit_threshold=self._limit_threshold,
        )
        breakdown = SpendingBreakdown(
            currency_code=converter.display_currency,
            total_spent=total_spent,
            total_budget=total_budget,
            remaining_budget=max(0.0, total_budget - total_spent),
            budget_usage=usage,
            by_category=group_sum(transactions, by_category, converter),
            by_day=group_sum(transactions, by_day_of_month, converter),
            largest_expense=largest_expense(transactions, converter),
        )
        self._logger.info(
            f"Spending breakdown computed: spent={total_spent}, "
            f"budget={total_budget}, status={usage.status}"
        )
        return breakdown


__all__ = ["GetSpendingBreakdownUseCase", "SpendingBreakdown"]
