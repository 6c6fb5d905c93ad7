"""Domain errors for the finance dashboard."""


class FinanceDashboardError(Exception):
    """Base class for finance dashboard errors."""


class UnknownCurrencyError(FinanceDashboardError, LookupError):
    """Raised when a currency code is missing from the rate table."""

    def __init__(self, code) -> None:
        self.code = code
        super().__init__(f"Unknown currency: {code!r}")


class InvalidExchangeRateError(FinanceDashboardError, ValueError):
    """Raised when an exchange-rate table violates its invariants."""


__all__ = [
    "FinanceDashboardError",
    "UnknownCurrencyError",
    "InvalidExchangeRateError",
]
