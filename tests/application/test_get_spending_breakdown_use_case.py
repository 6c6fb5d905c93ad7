"""Tests for the GetSpendingBreakdownUseCase."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_spending_breakdown import (
    GetSpendingBreakdownUseCase,
)
from src.domain.models import Budget, CurrencyCode, Transaction, TransactionType
from src.domain.services import CurrencyConverter

USD = CurrencyCode.USD
EUR = CurrencyCode.EUR


def _transactions() -> list[Transaction]:
    return [
        Transaction(
            "1", 120, USD, "Food", "Groceries", date(2024, 3, 2),
            TransactionType.EXPENSE,
        ),
        Transaction(
            "2", 45, USD, "Transport", "Taxi", date(2024, 3, 5),
            TransactionType.EXPENSE,
        ),
        Transaction(
            "3", 92, EUR, "Food", "Dinner", date(2024, 3, 5),
            TransactionType.EXPENSE,
        ),
        Transaction(
            "4", 5500, USD, "Income", "Salary", date(2024, 3, 1),
            TransactionType.INCOME,
        ),
    ]


def test_execute_returns_breakdown() -> None:
    logger = MagicMock()
    use_case = GetSpendingBreakdownUseCase(CurrencyConverter(), logger=logger)
    budgets = [
        Budget("1", "Food", 600, 0, USD),
        Budget("2", "Transport", 276, 0, EUR),
    ]

    result = use_case.execute(_transactions(), budgets)

    assert result.total_spent == pytest.approx(265)
    assert result.total_budget == pytest.approx(900)
    assert result.remaining_budget == pytest.approx(635)
    assert result.budget_usage.raw_percent == pytest.approx(265 / 900 * 100)
    assert result.budget_usage.status == "ok"
    assert result.by_category == {
        "Food": pytest.approx(220),
        "Transport": pytest.approx(45),
    }
    assert result.by_day == {2: pytest.approx(120), 5: pytest.approx(145)}
    assert result.largest_expense.id == "1"
    assert result.currency_code == USD
    logger.info.assert_called_once()


def test_execute_overspent_budget_keeps_raw_usage() -> None:
    use_case = GetSpendingBreakdownUseCase(CurrencyConverter(), logger=MagicMock())
    budgets = [Budget("1", "Food", 200, 0, USD)]

    result = use_case.execute(_transactions(), budgets)

    assert result.remaining_budget == 0
    assert result.budget_usage.raw_percent == pytest.approx(132.5)
    assert result.budget_usage.clamped_percent == 100
    assert result.budget_usage.is_over_limit


def test_execute_without_budgets_is_neutral() -> None:
    use_case = GetSpendingBreakdownUseCase(CurrencyConverter(), logger=MagicMock())

    result = use_case.execute([])

    assert result.total_spent == 0
    assert result.total_budget == 0
    assert result.budget_usage.raw_percent == 0
    assert result.by_category == {}
    assert result.largest_expense is None


def test_execute_uses_configured_thresholds() -> None:
    use_case = GetSpendingBreakdownUseCase(
        CurrencyConverter(),
        logger=MagicMock(),
        warn_threshold=20,
        limit_threshold=50,
    )
    budgets = [Budget("1", "Food", 1000, 0, USD)]

    result = use_case.execute(_transactions(), budgets)

    assert result.budget_usage.status == "warning"
