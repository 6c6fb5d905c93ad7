"""Tests for domain validation helpers."""

from unittest.mock import MagicMock

from src.domain.models import Asset, AssetType, Budget, CurrencyCode, Goal
from src.domain.services import (
    validate_asset_values,
    validate_budget_limits,
    validate_goal_targets,
)

USD = CurrencyCode.USD


def test_validate_asset_values_logs_negative_values() -> None:
    logger = MagicMock()
    assets = [
        Asset("1", "acc-3", "ETF", AssetType.STOCK, 100, USD),
        Asset("2", "acc-3", "Margin", AssetType.STOCK, -50, USD),
    ]

    validate_asset_values(assets, logger)

    logger.warning.assert_called_once()
    assert "asset_id=2" in logger.warning.call_args.args[0]


def test_validate_budget_limits_logs_non_positive_limits() -> None:
    logger = MagicMock()
    budgets = [
        Budget("1", "Food", 600, 100, USD),
        Budget("2", "Travel", 0, 10, USD),
    ]

    validate_budget_limits(budgets, logger)

    logger.warning.assert_called_once()
    assert "Travel" in logger.warning.call_args.args[0]


def test_validate_goal_targets_logs_non_positive_targets() -> None:
    logger = MagicMock()
    goals = [Goal("1", "Car", -1, 0, USD), Goal("2", "Home", 100, 0, USD)]

    validate_goal_targets(goals, logger)

    logger.warning.assert_called_once()
    assert "Car" in logger.warning.call_args.args[0]


def test_validation_is_silent_for_valid_records() -> None:
    logger = MagicMock()

    validate_asset_values([], logger)
    validate_budget_limits([Budget("1", "Food", 1, 0, USD)], logger)

    logger.warning.assert_not_called()
