"""Domain models for currencies, exchange rates, and monetary values."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
import math
from types import MappingProxyType

from src.domain.errors import InvalidExchangeRateError, UnknownCurrencyError


class CurrencyCode(str, Enum):
    """Supported currency codes."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"


@dataclass(frozen=True)
class ExchangeRateTable:
    """Static exchange rates expressed against a base currency.

    Attributes:
        base_currency: Currency whose rate is exactly 1.
        rates: Units of each currency per one unit of the base currency.
    """

    base_currency: CurrencyCode
    rates: Mapping[CurrencyCode, float]

    def __post_init__(self) -> None:
        normalized: dict[CurrencyCode, float] = {}
        for code, rate in self.rates.items():
            try:
                currency = CurrencyCode(code)
            except ValueError:
                raise UnknownCurrencyError(code) from None
            try:
                normalized[currency] = float(rate)
            except (TypeError, ValueError):
                raise InvalidExchangeRateError(
                    f"Rate for {currency.value} is not a number: {rate!r}"
                ) from None
        rates = MappingProxyType(normalized)
        object.__setattr__(self, "rates", rates)
        for code, rate in rates.items():
            if not math.isfinite(rate) or rate <= 0:
                raise InvalidExchangeRateError(
                    f"Rate for {code.value} must be positive and finite: {rate}"
                )
        base_rate = rates.get(self.base_currency)
        if base_rate is None:
            raise InvalidExchangeRateError(
                f"Base currency {self.base_currency.value} has no rate"
            )
        if base_rate != 1.0:
            raise InvalidExchangeRateError(
                f"Base currency rate must be 1, got {base_rate}"
            )

    def rate(self, code: CurrencyCode | str) -> float:
        """Return the rate for a currency code.

        Args:
            code: Currency code to look up.

        Returns:
            float: Units of the currency per base unit.

        Raises:
            UnknownCurrencyError: If the code has no rate in the table.
        """
        try:
            return self.rates[code]
        except (KeyError, TypeError):
            raise UnknownCurrencyError(code) from None

    def __contains__(self, code: object) -> bool:
        try:
            return code in self.rates
        except TypeError:
            return False

    @property
    def currencies(self) -> tuple[CurrencyCode, ...]:
        """Return the currency codes covered by the table."""
        return tuple(self.rates)


@dataclass(frozen=True)
class MonetaryValue:
    """An amount tagged with its currency."""

    amount: float
    currency: CurrencyCode


__all__ = ["CurrencyCode", "ExchangeRateTable", "MonetaryValue"]
