"""Domain normalization helpers."""

from datetime import date, datetime

from src.domain.errors import UnknownCurrencyError
from src.domain.models.currency import CurrencyCode
from src.domain.models.records import TransactionType


def normalize_currency_code(code: CurrencyCode | str | None) -> CurrencyCode:
    """Normalize a currency code to the closed enumeration.

    Args:
        code: Currency code or its textual form (case-insensitive).

    Returns:
        CurrencyCode: Matching enumeration member.

    Raises:
        UnknownCurrencyError: If the code is missing or not supported.
    """
    if isinstance(code, CurrencyCode):
        return code
    cleaned = code.strip().upper() if isinstance(code, str) else ""
    try:
        return CurrencyCode(cleaned)
    except ValueError:
        raise UnknownCurrencyError(code) from None


def normalize_transaction_type(
    value: TransactionType | str | None,
) -> TransactionType | None:
    """Normalize transaction type values.

    Args:
        value: Raw type value (e.g. ``"Expense"``).

    Returns:
        TransactionType | None: Normalized type or None when unrecognized.
    """
    if isinstance(value, TransactionType):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return TransactionType(value.strip().lower())
    except ValueError:
        return None


def parse_iso_date(value: date | str | None) -> date | None:
    """Parse ISO date or datetime strings into a date.

    Args:
        value: Date, datetime, or ISO 8601 string.

    Returns:
        date | None: Parsed calendar date or None when invalid.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    try:
        return datetime.fromisoformat(cleaned.replace("Z", "+00:00")).date()
    except ValueError:
        return None


__all__ = [
    "normalize_currency_code",
    "normalize_transaction_type",
    "parse_iso_date",
]
