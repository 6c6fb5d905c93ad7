"""Tests for the GetAccountBalancesUseCase."""

from unittest.mock import MagicMock

import pytest

from src.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from src.domain.models import Account, AccountType, Asset, AssetType, CurrencyCode
from src.domain.services import CurrencyConverter

USD = CurrencyCode.USD
EUR = CurrencyCode.EUR


def _converter(display: CurrencyCode = USD) -> CurrencyConverter:
    return CurrencyConverter(display_currency=display)


def _accounts() -> list[Account]:
    return [
        Account("acc-2", "savings", AccountType.BANK, USD, 8000, "Ally"),
        Account("acc-1", "Main Checking", AccountType.BANK, EUR, 920, "Chase"),
        Account("acc-3", "Investment Port", AccountType.INVESTMENT, USD, 0),
    ]


def _assets() -> list[Asset]:
    return [
        Asset("1", "acc-3", "Tech ETF", AssetType.STOCK, 15000, USD),
        Asset("2", "acc-3", "Tesla", AssetType.STOCK, 3500, USD),
    ]


def test_execute_returns_sorted_converted_balances() -> None:
    """Balances should be converted once and sorted by name."""
    logger = MagicMock()
    use_case = GetAccountBalancesUseCase(_converter(), logger=logger)

    result = use_case.execute(_accounts(), _assets())

    assert [item.name for item in result.accounts] == [
        "Investment Port",
        "Main Checking",
        "savings",
    ]
    balances = {item.account_id: item.balance for item in result.accounts}
    assert balances["acc-1"] == pytest.approx(1000)
    assert balances["acc-2"] == pytest.approx(8000)
    assert balances["acc-3"] == pytest.approx(18500)
    assert result.total == pytest.approx(27500)
    assert result.currency_code == USD
    assert result.accounts[1].institution == "Chase"
    logger.info.assert_called_once_with("Fetched 3 account balances for USD")


def test_execute_in_other_display_currency() -> None:
    use_case = GetAccountBalancesUseCase(_converter(EUR), logger=MagicMock())

    result = use_case.execute(_accounts(), _assets())

    balances = {item.account_id: item.balance for item in result.accounts}
    assert balances["acc-1"] == pytest.approx(920)
    assert balances["acc-3"] == pytest.approx(18500 * 0.92)
    assert result.currency_code == EUR


def test_execute_warns_about_assets_of_unknown_accounts() -> None:
    logger = MagicMock()
    use_case = GetAccountBalancesUseCase(_converter(), logger=logger)
    assets = _assets() + [
        Asset("3", "acc-9", "Orphan", AssetType.CRYPTO, 10, USD),
    ]

    result = use_case.execute(_accounts(), assets)

    assert result.total == pytest.approx(27500)
    logger.warning.assert_called_once()


def test_execute_without_accounts_returns_empty_list() -> None:
    use_case = GetAccountBalancesUseCase(_converter(), logger=MagicMock())

    result = use_case.execute([], [])

    assert result.accounts == []
    assert result.total == 0
