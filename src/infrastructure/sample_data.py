"""In-memory demo portfolio used by the CLI and Streamlit adapters."""

from dataclasses import dataclass, field
from datetime import date

from src.domain.models import (
    Account,
    AccountType,
    Asset,
    AssetType,
    Budget,
    CurrencyCode,
    Goal,
    Transaction,
    TransactionType,
)


@dataclass(frozen=True)
class DemoPortfolio:
    """Caller-owned collections of dashboard records."""

    accounts: list[Account] = field(default_factory=list)
    assets: list[Asset] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)
    goals: list[Goal] = field(default_factory=list)


def build_demo_portfolio(today: date | None = None) -> DemoPortfolio:
    """Return the demo accounts, holdings, transactions, budgets and goals.

    Args:
        today: Date stamped on the demo transactions.
    """
    day = today or date.today()
    usd = CurrencyCode.USD
    accounts = [
        Account("acc-1", "Main Checking", AccountType.BANK, usd, 12450, "Chase"),
        Account("acc-2", "Savings", AccountType.BANK, usd, 8000, "Ally"),
        Account("acc-3", "Investment Port", AccountType.INVESTMENT, usd, 0, "Fidelity"),
        Account("acc-4", "Crypto Wallet", AccountType.INVESTMENT, usd, 0, "Coinbase"),
    ]
    assets = [
        Asset("1", "acc-3", "Tech ETF", AssetType.STOCK, 15000, usd, 1.2),
        Asset("2", "acc-3", "Tesla", AssetType.STOCK, 3500, usd, -0.5),
        Asset("3", "acc-4", "Bitcoin", AssetType.CRYPTO, 5000, usd, -2.5),
    ]
    transactions = [
        Transaction(
            "1", 120, usd, "Food", "Grocery Run", day,
            TransactionType.EXPENSE, "acc-1",
        ),
        Transaction(
            "2", 45, usd, "Transport", "Uber", day,
            TransactionType.EXPENSE, "acc-1",
        ),
        Transaction(
            "3", 5500, usd, "Income", "Salary", day,
            TransactionType.INCOME, "acc-1",
        ),
    ]
    budgets = [
        Budget("1", "Food", 600, 350, usd),
        Budget("2", "Transport", 300, 120, usd),
    ]
    goals = [
        Goal("1", "Retirement", 500000, 42000, usd, "#3B82F6"),
        Goal("2", "Travel", 4000, 1500, usd, "#34D399"),
    ]
    return DemoPortfolio(
        accounts=accounts,
        assets=assets,
        transactions=transactions,
        budgets=budgets,
        goals=goals,
    )


__all__ = ["DemoPortfolio", "build_demo_portfolio"]
