"""Tests for the allocation chart's Altair dependency guard."""

import sys
import types
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.domain.models import (
    AllocationSlice,
    AssetAllocation,
    AssetType,
    CurrencyCode,
)
from src.domain.services import CurrencyConverter

ALLOCATION = AssetAllocation(
    currency_code=CurrencyCode.USD,
    total=20000,
    slices=[
        AllocationSlice(AssetType.STOCK, 15000, 75.0),
        AllocationSlice(AssetType.CRYPTO, 5000, 25.0),
    ],
)


def _install(monkeypatch, numpy_attrs: dict, pandas_attrs: dict) -> None:
    monkeypatch.setitem(
        sys.modules,
        "numpy",
        types.SimpleNamespace(**numpy_attrs),
    )
    monkeypatch.setitem(
        sys.modules,
        "pandas",
        types.SimpleNamespace(**pandas_attrs),
    )


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "missing"),
    [
        ({}, {"Timestamp": object}, "ndarray"),
        ({"ndarray": object}, {}, "Timestamp"),
        ({}, {}, "ndarray"),
    ],
)
def test_incomplete_imports_name_the_missing_attribute(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    missing,
) -> None:
    _install(monkeypatch, numpy_attrs, pandas_attrs)

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert missing in message


def test_allocation_chart_warns_when_dependencies_are_broken(
    monkeypatch,
) -> None:
    """The donut is skipped with a warning instead of a stack trace."""
    fake_st = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    _install(monkeypatch, {"ndarray": object}, {})

    app._render_allocation_chart(ALLOCATION, CurrencyConverter())

    fake_st.warning.assert_called_once()
    assert "pandas" in fake_st.warning.call_args.args[0]
    fake_st.altair_chart.assert_not_called()


def test_allocation_chart_skips_dependency_check_without_holdings(
    monkeypatch,
) -> None:
    fake_st = MagicMock()
    check = MagicMock(return_value=(False, "broken"))
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_check_altair_dependencies", check)
    empty = AssetAllocation(
        currency_code=CurrencyCode.EUR,
        total=0,
        slices=[],
    )

    app._render_allocation_chart(empty, CurrencyConverter())

    fake_st.info.assert_called_once_with("No holdings available for the chart.")
    check.assert_not_called()
    fake_st.warning.assert_not_called()


def test_allocation_chart_renders_largest_slice_first(monkeypatch) -> None:
    fake_st = MagicMock()
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (True, None),
    )

    app._render_allocation_chart(ALLOCATION, CurrencyConverter())

    fake_st.altair_chart.assert_called_once()
    chart = fake_st.altair_chart.call_args.args[0]
    assert [row["category"] for row in chart.data.values] == ["Stock", "Crypto"]
    assert chart.data.values[0]["share_label"] == "75.0%"
    assert chart.data.values[0]["amount_label"] == "$15,000.00"
