"""Use case to compute budget usage and goal progress."""

from collections.abc import Sequence

from src.domain.constants import BUDGET_LIMIT_PCT, BUDGET_WARN_PCT
from src.domain.models import (
    Budget,
    BudgetOverview,
    BudgetStatusView,
    Goal,
    GoalProgressView,
    Transaction,
)
from src.domain.services import (
    CurrencyConverter,
    budget_usage_percent,
    category_spent,
    goal_progress_percent,
    validate_budget_limits,
    validate_goal_targets,
)
from src.infrastructure.logging.logger import get_app_logger


class GetBudgetOverviewUseCase:
    """Compute budget statuses and goal progress in the display currency."""

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
        budgets: Sequence[Budget],
        goals: Sequence[Goal] = (),
        transactions: Sequence[Transaction] | None = None,
    ) -> BudgetOverview:
        """Return budget statuses and goal progress.

        Args:
            budgets: Budgets to evaluate.
            goals: Savings goals to evaluate.
            transactions: When given, each budget's spent amount is
                recomputed from expenses with a matching category instead of
                using the stored ``spent`` field.

        Returns:
            BudgetOverview: Budget statuses and goal progress, input order.
        """
        validate_budget_limits(budgets, self._logger)
        validate_goal_targets(goals, self._logger)
        converter = self._converter

        statuses: list[BudgetStatusView] = []
        for budget in budgets:
            limit = converter.convert(budget.limit, budget.currency)
            if transactions is None:
                spent = converter.convert(budget.spent, budget.currency)
            else:
                spent = category_spent(transactions, budget.category, converter)
            usage = budget_usage_percent(
                spent,
                limit,
                warn_threshold=self._warn_threshold,
                limit_threshold=self._limit_threshold,
            )
            if usage.is_near_limit:
                self._logger.info(
                    f"Budget {budget.category} at {usage.raw_percent:.1f}% "
                    f"({usage.status})"
                )
            statuses.append(
                BudgetStatusView(
                    budget_id=budget.id,
                    category=budget.category,
                    limit=limit,
                    spent=spent,
                    usage=usage,
                    currency_code=converter.display_currency,
                )
            )

        progress = [
            GoalProgressView(
                goal_id=goal.id,
                name=goal.name,
                target_amount=converter.convert(goal.target_amount, goal.currency),
                current_amount=converter.convert(goal.current_amount, goal.currency),
                progress=goal_progress_percent(
                    goal.current_amount,
                    goal.target_amount,
                ),
                currency_code=converter.display_currency,
            )
            for goal in goals
        ]
        return BudgetOverview(
            currency_code=converter.display_currency,
            budgets=statuses,
            goals=progress,
        )


__all__ = ["GetBudgetOverviewUseCase", "BudgetOverview"]
