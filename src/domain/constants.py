"""Domain constants for currency handling and dashboard thresholds."""

from src.domain.models.currency import CurrencyCode

DEFAULT_BASE_CURRENCY = CurrencyCode.USD

# Units of each currency per one unit of the base currency.
DEFAULT_EXCHANGE_RATES = {
    CurrencyCode.USD: 1.0,
    CurrencyCode.EUR: 0.92,
    CurrencyCode.GBP: 0.79,
    CurrencyCode.JPY: 150.5,
}

CURRENCY_LOCALES = {
    CurrencyCode.USD: "en_US",
    CurrencyCode.EUR: "de_DE",
    CurrencyCode.GBP: "en_GB",
    CurrencyCode.JPY: "ja_JP",
}

CURRENCY_FRACTION_DIGITS = {
    CurrencyCode.USD: 2,
    CurrencyCode.EUR: 2,
    CurrencyCode.GBP: 2,
    CurrencyCode.JPY: 0,
}

BUDGET_WARN_PCT = 85.0
BUDGET_LIMIT_PCT = 100.0

ADVISOR_TRANSACTION_SAMPLE = 50

CATEGORY_COLORS = {
    "Food": "#F87171",
    "Transport": "#60A5FA",
    "Housing": "#3B82F6",
    "Entertainment": "#34D399",
    "Shopping": "#F472B6",
    "Income": "#10B981",
    "Investment": "#818CF8",
}


__all__ = [
    "DEFAULT_BASE_CURRENCY",
    "DEFAULT_EXCHANGE_RATES",
    "CURRENCY_LOCALES",
    "CURRENCY_FRACTION_DIGITS",
    "BUDGET_WARN_PCT",
    "BUDGET_LIMIT_PCT",
    "ADVISOR_TRANSACTION_SAMPLE",
    "CATEGORY_COLORS",
]
