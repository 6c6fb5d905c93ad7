"""Tests for the GetBudgetOverviewUseCase."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_budget_overview import (
    GetBudgetOverviewUseCase,
)
from src.domain.models import (
    Budget,
    CurrencyCode,
    Goal,
    Transaction,
    TransactionType,
)
from src.domain.services import CurrencyConverter

USD = CurrencyCode.USD
EUR = CurrencyCode.EUR


def test_execute_uses_stored_spent_amounts() -> None:
    logger = MagicMock()
    use_case = GetBudgetOverviewUseCase(CurrencyConverter(), logger=logger)
    budgets = [
        Budget("1", "Food", 600, 350, USD),
        Budget("2", "Travel", 100, 120, USD),
    ]

    result = use_case.execute(budgets)

    food, travel = result.budgets
    assert food.usage.raw_percent == pytest.approx(350 / 600 * 100)
    assert food.usage.status == "ok"
    assert travel.usage.raw_percent == pytest.approx(120)
    assert travel.usage.clamped_percent == 100
    assert travel.usage.status == "exceeded"
    assert result.goals == []
    # Only the exceeded budget is reported.
    logger.info.assert_called_once()


def test_execute_converts_limits_into_display_currency() -> None:
    converter = CurrencyConverter(display_currency=EUR)
    use_case = GetBudgetOverviewUseCase(converter, logger=MagicMock())

    result = use_case.execute([Budget("1", "Food", 100, 50, USD)])

    status = result.budgets[0]
    assert status.limit == pytest.approx(92)
    assert status.spent == pytest.approx(46)
    assert status.usage.raw_percent == pytest.approx(50)
    assert status.currency_code == EUR


def test_execute_recomputes_spent_from_transactions() -> None:
    use_case = GetBudgetOverviewUseCase(CurrencyConverter(), logger=MagicMock())
    day = date(2024, 3, 1)
    transactions = [
        Transaction("1", 120, USD, "food", "Groceries", day, TransactionType.EXPENSE),
        Transaction("2", 92, EUR, "Food", "Dinner", day, TransactionType.EXPENSE),
        Transaction("3", 45, USD, "Transport", "Taxi", day, TransactionType.EXPENSE),
    ]

    result = use_case.execute(
        [Budget("1", "Food", 600, 0, USD)],
        transactions=transactions,
    )

    assert result.budgets[0].spent == pytest.approx(220)


def test_execute_reports_goal_progress() -> None:
    logger = MagicMock()
    use_case = GetBudgetOverviewUseCase(CurrencyConverter(), logger=logger)
    goals = [
        Goal("1", "Travel", 4000, 1500, USD),
        Goal("2", "Car", 0, 100, USD),
    ]

    result = use_case.execute([], goals)

    travel, car = result.goals
    assert travel.progress.clamped_percent == pytest.approx(37.5)
    assert car.progress.raw_percent == 0
    logger.warning.assert_called_once()


def test_execute_honours_thresholds() -> None:
    use_case = GetBudgetOverviewUseCase(
        CurrencyConverter(),
        logger=MagicMock(),
        warn_threshold=50,
        limit_threshold=90,
    )

    result = use_case.execute([Budget("1", "Food", 100, 60, USD)])

    assert result.budgets[0].usage.status == "warning"
