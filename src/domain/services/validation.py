"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger

from src.domain.models.records import Asset, Budget, Goal


def validate_asset_values(assets: Iterable[Asset], logger: Logger) -> None:
    """Warn when asset values are negative.

    Args:
        assets: Assets about to be aggregated.
        logger: Logger used for warnings.
    """
    for asset in assets:
        if asset.value < 0:
            logger.warning(
                f"Asset value is negative for asset_id={asset.id}: {asset.value}"
            )


def validate_budget_limits(budgets: Iterable[Budget], logger: Logger) -> None:
    """Warn when budgets carry a non-positive limit.

    Args:
        budgets: Budgets about to be evaluated.
        logger: Logger used for warnings.
    """
    for budget in budgets:
        if budget.limit <= 0:
            logger.warning(
                f"Budget limit is not positive for category={budget.category}: "
                f"{budget.limit}"
            )


def validate_goal_targets(goals: Iterable[Goal], logger: Logger) -> None:
    """Warn when goals carry a non-positive target."""
    for goal in goals:
        if goal.target_amount <= 0:
            logger.warning(
                f"Goal target is not positive for goal={goal.name}: "
                f"{goal.target_amount}"
            )


__all__ = [
    "validate_asset_values",
    "validate_budget_limits",
    "validate_goal_targets",
]
