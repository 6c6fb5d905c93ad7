"""Tests for domain normalization helpers."""

from datetime import date, datetime

import pytest

from src.domain.errors import UnknownCurrencyError
from src.domain.models import CurrencyCode, TransactionType
from src.domain.services import (
    normalize_currency_code,
    normalize_transaction_type,
    parse_iso_date,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("usd", CurrencyCode.USD),
        (" Eur ", CurrencyCode.EUR),
        ("JPY", CurrencyCode.JPY),
        (CurrencyCode.GBP, CurrencyCode.GBP),
    ],
)
def test_normalize_currency_code(raw, expected) -> None:
    assert normalize_currency_code(raw) == expected


@pytest.mark.parametrize("raw", ["CHF", "", None, "US D"])
def test_normalize_currency_code_rejects_unknown_codes(raw) -> None:
    with pytest.raises(UnknownCurrencyError):
        normalize_currency_code(raw)


def test_unknown_currency_error_is_a_lookup_error() -> None:
    with pytest.raises(LookupError) as excinfo:
        normalize_currency_code("XYZ")

    assert excinfo.value.code == "XYZ"
    assert "XYZ" in str(excinfo.value)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Expense", TransactionType.EXPENSE),
        (" income ", TransactionType.INCOME),
        (TransactionType.INCOME, TransactionType.INCOME),
        ("transfer", None),
        ("", None),
        (None, None),
        (42, None),
    ],
)
def test_normalize_transaction_type(raw, expected) -> None:
    assert normalize_transaction_type(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-03-15", date(2024, 3, 15)),
        ("2024-03-15T10:30:00", date(2024, 3, 15)),
        ("2024-03-15T10:30:00Z", date(2024, 3, 15)),
        (date(2024, 3, 15), date(2024, 3, 15)),
        (datetime(2024, 3, 15, 8), date(2024, 3, 15)),
        ("yesterday", None),
        ("   ", None),
        (None, None),
        (20240315, None),
    ],
)
def test_parse_iso_date(raw, expected) -> None:
    assert parse_iso_date(raw) == expected
