"""Domain package for business rules and core models."""

from .errors import (
    FinanceDashboardError,
    InvalidExchangeRateError,
    UnknownCurrencyError,
)
from .models import (
    Account,
    Asset,
    Budget,
    CurrencyCode,
    ExchangeRateTable,
    Goal,
    MonetaryValue,
    Transaction,
    UsageRatio,
)
from .constants import DEFAULT_BASE_CURRENCY, DEFAULT_EXCHANGE_RATES
from .policies import is_invested, is_liquid, matches_category
from .services import (
    CurrencyConverter,
    budget_usage_percent,
    group_sum,
    savings_rate,
    total_by_type,
    total_value,
)

__all__ = [
    "FinanceDashboardError",
    "InvalidExchangeRateError",
    "UnknownCurrencyError",
    "Account",
    "Asset",
    "Budget",
    "CurrencyCode",
    "ExchangeRateTable",
    "Goal",
    "MonetaryValue",
    "Transaction",
    "UsageRatio",
    "DEFAULT_BASE_CURRENCY",
    "DEFAULT_EXCHANGE_RATES",
    "is_liquid",
    "is_invested",
    "matches_category",
    "CurrencyConverter",
    "total_value",
    "total_by_type",
    "savings_rate",
    "group_sum",
    "budget_usage_percent",
]
