"""Domain records read by the dashboard computations."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from src.domain.models.currency import CurrencyCode, MonetaryValue


class TransactionType(str, Enum):
    """Direction of a transaction."""

    INCOME = "income"
    EXPENSE = "expense"


class AssetType(str, Enum):
    """Kinds of holdings tracked in the portfolio."""

    STOCK = "Stock"
    CRYPTO = "Crypto"
    REAL_ESTATE = "Real Estate"
    CASH = "Cash"


class AccountType(str, Enum):
    """Kinds of accounts."""

    BANK = "Bank"
    INVESTMENT = "Investment"


@dataclass(frozen=True)
class Account:
    """A bank or investment account.

    Attributes:
        id: Account identifier.
        name: Display name.
        type: Bank or Investment.
        currency: Currency of the cash balance.
        balance: Cash balance, used for bank accounts.
        institution: Optional institution name.
    """

    id: str
    name: str
    type: AccountType
    currency: CurrencyCode
    balance: float = 0.0
    institution: str | None = None

    @property
    def money(self) -> MonetaryValue:
        return MonetaryValue(self.balance, self.currency)


@dataclass(frozen=True)
class Transaction:
    """An income or expense entry."""

    id: str
    amount: float
    currency: CurrencyCode
    category: str
    description: str
    date: date
    type: TransactionType
    account_id: str | None = None

    @property
    def money(self) -> MonetaryValue:
        return MonetaryValue(self.amount, self.currency)


@dataclass(frozen=True)
class Asset:
    """A holding linked to an investment account."""

    id: str
    account_id: str
    name: str
    type: AssetType
    value: float
    currency: CurrencyCode
    day_change_pct: float | None = None

    @property
    def money(self) -> MonetaryValue:
        return MonetaryValue(self.value, self.currency)


@dataclass(frozen=True)
class Budget:
    """Spending limit for a category."""

    id: str
    category: str
    limit: float
    spent: float
    currency: CurrencyCode


@dataclass(frozen=True)
class Goal:
    """Savings goal."""

    id: str
    name: str
    target_amount: float
    current_amount: float
    currency: CurrencyCode
    color: str | None = None


__all__ = [
    "TransactionType",
    "AssetType",
    "AccountType",
    "Account",
    "Transaction",
    "Asset",
    "Budget",
    "Goal",
]
