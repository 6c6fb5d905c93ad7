"""Currency conversion and money formatting.

A ``CurrencyConverter`` owns one session's display currency. Conversions
pivot through the base currency of a static ``ExchangeRateTable``; rounding
happens only when an amount is formatted for display.
"""

from decimal import ROUND_HALF_UP, Decimal

from babel.numbers import format_currency

from src.domain.constants import (
    CURRENCY_FRACTION_DIGITS,
    CURRENCY_LOCALES,
    DEFAULT_BASE_CURRENCY,
    DEFAULT_EXCHANGE_RATES,
)
from src.domain.errors import UnknownCurrencyError
from src.domain.models.currency import (
    CurrencyCode,
    ExchangeRateTable,
    MonetaryValue,
)
from src.domain.services.normalization import normalize_currency_code


def build_default_rate_table() -> ExchangeRateTable:
    """Return the static USD-based rate table."""
    return ExchangeRateTable(
        base_currency=DEFAULT_BASE_CURRENCY,
        rates=DEFAULT_EXCHANGE_RATES,
    )


def locale_for(code: CurrencyCode) -> str:
    """Return the formatting locale for a currency.

    Raises:
        UnknownCurrencyError: If the currency has no locale.
    """
    try:
        return CURRENCY_LOCALES[code]
    except KeyError:
        raise UnknownCurrencyError(code) from None


def fraction_digits_for(code: CurrencyCode) -> int:
    """Return the displayed fraction digits for a currency.

    Raises:
        UnknownCurrencyError: If the currency has no digit convention.
    """
    try:
        return CURRENCY_FRACTION_DIGITS[code]
    except KeyError:
        raise UnknownCurrencyError(code) from None


def round_for_display(amount: float, digits: int) -> Decimal:
    """Round half away from zero to a fixed number of fraction digits."""
    quantum = Decimal(1).scaleb(-digits)
    return Decimal(str(amount)).quantize(quantum, rounding=ROUND_HALF_UP)


class CurrencyConverter:
    """Convert and format amounts for one display currency.

    Each dashboard session owns its own converter, so sessions with
    different display currencies never share state.
    """

    def __init__(
        self,
        rates: ExchangeRateTable | None = None,
        display_currency: CurrencyCode | str | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            rates: Static rate table; defaults to the built-in USD table.
            display_currency: Initial display currency; defaults to the
                table's base currency.

        Raises:
            UnknownCurrencyError: If the display currency has no rate.
        """
        self._rates = rates or build_default_rate_table()
        self._display_currency = self._rates.base_currency
        if display_currency is not None:
            self.set_display_currency(display_currency)

    @property
    def rates(self) -> ExchangeRateTable:
        return self._rates

    @property
    def base_currency(self) -> CurrencyCode:
        return self._rates.base_currency

    @property
    def display_currency(self) -> CurrencyCode:
        return self._display_currency

    def set_display_currency(self, code: CurrencyCode | str) -> None:
        """Select the currency used by later convert and format calls.

        Raises:
            UnknownCurrencyError: If the code is unsupported or has no rate.
        """
        currency = normalize_currency_code(code)
        self._rates.rate(currency)
        self._display_currency = currency

    def convert(
        self,
        amount: float,
        from_currency: CurrencyCode | str,
    ) -> float:
        """Convert an amount into the display currency.

        Amounts already in the display currency are returned unchanged.

        Args:
            amount: Amount in the source currency.
            from_currency: Source currency code.

        Returns:
            float: Amount in the display currency.

        Raises:
            UnknownCurrencyError: If either currency has no rate.
        """
        source = normalize_currency_code(from_currency)
        if source == self._display_currency:
            return amount
        base_amount = amount / self._rates.rate(source)
        return base_amount * self._rates.rate(self._display_currency)

    def convert_value(self, value: MonetaryValue) -> MonetaryValue:
        """Convert a monetary value into the display currency."""
        return MonetaryValue(
            amount=self.convert(value.amount, value.currency),
            currency=self._display_currency,
        )

    def format(
        self,
        amount: float,
        from_currency: CurrencyCode | str | None = None,
    ) -> str:
        """Convert then render an amount for the display currency.

        Locale and fraction digits follow the display currency, not the
        source currency.

        Args:
            amount: Amount in the source currency.
            from_currency: Source currency; defaults to the base currency.

        Returns:
            str: Localized currency string.
        """
        source = from_currency if from_currency is not None else self.base_currency
        converted = self.convert(amount, source)
        target = self._display_currency
        rounded = round_for_display(converted, fraction_digits_for(target))
        return format_currency(
            rounded,
            target.value,
            locale=locale_for(target),
            currency_digits=True,
        )


__all__ = [
    "CurrencyConverter",
    "build_default_rate_table",
    "locale_for",
    "fraction_digits_for",
    "round_for_display",
]
