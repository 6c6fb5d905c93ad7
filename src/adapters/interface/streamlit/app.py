"""Streamlit dashboard entry point."""

from datetime import date

import altair as alt
import streamlit as st

from src.domain.constants import CATEGORY_COLORS
from src.domain.errors import UnknownCurrencyError
from src.domain.models import (
    AssetAllocation,
    BudgetOverview,
    CurrencyCode,
    DashboardSummary,
)
from src.domain.services import CurrencyConverter, Period, filter_by_period
from src.infrastructure.container import (
    build_asset_allocation_use_case,
    build_budget_overview_use_case,
    build_currency_converter,
    build_dashboard_summary_use_case,
    build_spending_breakdown_use_case,
)
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.sample_data import DemoPortfolio, build_demo_portfolio

_CONVERTER_KEY = "currency_converter"


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that numpy and pandas expose what Altair needs.

    Returns:
        Tuple of (ok, error message).
    """
    import numpy
    import pandas

    if not hasattr(numpy, "ndarray"):
        return False, "numpy import is incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas import is incomplete (missing Timestamp)."
    return True, None


def _fetch_portfolio(today: date) -> DemoPortfolio:
    """Build the in-memory demo portfolio dated on ``today``."""
    return build_demo_portfolio(today)


@st.cache_data(show_spinner=False)
def _load_portfolio(today: date) -> DemoPortfolio:
    """Cached wrapper around _fetch_portfolio for Streamlit sessions.

    The date is part of the cache key, so a new day builds a new portfolio.
    """
    return _fetch_portfolio(today)


def _get_session_converter() -> CurrencyConverter:
    """Return the converter owned by the current Streamlit session."""
    if _CONVERTER_KEY not in st.session_state:
        st.session_state[_CONVERTER_KEY] = build_currency_converter()
    return st.session_state[_CONVERTER_KEY]


def _prepare_donut_chart_data(
    allocation: AssetAllocation,
    converter: CurrencyConverter,
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        allocation: Converted holdings per asset type.
        converter: Converter used for amount labels.
        max_categories: Maximum slices to keep before grouping into Other.

    Returns:
        Altair-ready chart rows.
    """
    sorted_items = sorted(
        allocation.slices,
        key=lambda item: item.amount,
        reverse=True,
    )
    rows = [
        (item.asset_type.value, item.amount, item.share_percent)
        for item in sorted_items[:max_categories]
    ]
    other_items = sorted_items[max_categories:]
    other_amount = sum((item.amount for item in other_items), 0.0)
    if other_items and other_amount != 0:
        rows.append(
            (
                "Other",
                other_amount,
                sum((item.share_percent for item in other_items), 0.0),
            )
        )
    return [
        {
            "category": label,
            "amount": amount,
            "amount_label": converter.format(amount, allocation.currency_code),
            "share_label": f"{share:.1f}%",
        }
        for label, amount, share in rows
    ]


def _render_allocation_chart(
    allocation: AssetAllocation,
    converter: CurrencyConverter,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of holdings by asset type."""
    st.subheader("Allocation")
    if not allocation.slices:
        st.info("No holdings available for the chart.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        return
    data = _prepare_donut_chart_data(allocation, converter)
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(width=chart_size, height=chart_size)
    st.altair_chart(chart, width="stretch")


def _render_spending_chart(
    by_category: dict[str, float],
    converter: CurrencyConverter,
) -> None:
    """Render a bar chart of expenses per category."""
    st.subheader("Spending by category")
    if not by_category:
        st.info("No expenses in this period.")
        return
    data = [
        {
            "category": category,
            "amount": amount,
            "amount_label": converter.format(amount, converter.display_currency),
        }
        for category, amount in by_category.items()
    ]
    domain = list(by_category)
    palette = [CATEGORY_COLORS.get(category, "#94A3B8") for category in domain]
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("category:N", sort=domain, title=None),
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(domain=domain, range=palette),
            legend=None,
        ),
        tooltip=[alt.Tooltip("category:N"), alt.Tooltip("amount_label:N")],
    )
    st.altair_chart(chart, width="stretch")


def _render_daily_spending_chart(
    by_day: dict[int, float],
    converter: CurrencyConverter,
) -> None:
    """Render a bar chart of expenses per day of the month."""
    st.subheader("Daily spending")
    if not by_day:
        st.info("No expenses in this period.")
        return
    data = [
        {
            "day": day,
            "amount": amount,
            "amount_label": converter.format(amount, converter.display_currency),
        }
        for day, amount in sorted(by_day.items())
    ]
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X("day:O", title="Day"),
        y=alt.Y("amount:Q", title=None),
        tooltip=[alt.Tooltip("day:O"), alt.Tooltip("amount_label:N")],
    )
    st.altair_chart(chart, width="stretch")


def _render_summary(
    summary: DashboardSummary,
    converter: CurrencyConverter,
) -> None:
    """Render the headline metrics."""
    currency = summary.currency_code
    net_col, liquid_col, invested_col, savings_col = st.columns(4)
    net_col.metric("Net Worth", converter.format(summary.net_worth, currency))
    liquid_col.metric("Liquidity", converter.format(summary.liquidity, currency))
    invested_col.metric("Invested", converter.format(summary.invested, currency))
    savings_col.metric("Savings Rate", f"{summary.savings_rate:.1f}%")


def _render_budgets(
    overview: BudgetOverview,
    converter: CurrencyConverter,
) -> None:
    """Render budget usage and goal progress tables."""
    st.subheader("Budgets")
    if not overview.budgets:
        st.info("No budgets defined.")
    else:
        currency = overview.currency_code
        data = [
            {
                "Category": status.category,
                "Spent": converter.format(status.spent, currency),
                "Limit": converter.format(status.limit, currency),
                "Used": status.usage.clamped_percent,
                "Status": status.usage.status,
            }
            for status in overview.budgets
        ]
        st.dataframe(
            data,
            width="stretch",
            hide_index=True,
            column_config={
                "Used": st.column_config.ProgressColumn(
                    "Used",
                    format="%.0f%%",
                    min_value=0,
                    max_value=100,
                ),
            },
        )
    if overview.goals:
        st.subheader("Goals")
        for goal in overview.goals:
            st.progress(
                goal.progress.clamped_percent / 100,
                text=f"{goal.name}: {goal.progress.clamped_percent:.0f}%",
            )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")

    try:
        converter = _get_session_converter()
    except UnknownCurrencyError as exc:
        get_app_logger().error(str(exc))
        st.error(str(exc))
        return

    codes = [code.value for code in CurrencyCode if code in converter.rates]
    selected = st.sidebar.selectbox(
        "Display currency",
        codes,
        index=codes.index(converter.display_currency.value),
    )
    if selected != converter.display_currency.value:
        get_usage_logger().info(f"Display currency changed to {selected}")
        converter.set_display_currency(selected)

    period = st.sidebar.selectbox(
        "Period",
        [Period.MONTH.value, Period.DAY.value, Period.YEAR.value, Period.TOTAL.value],
    )
    today = date.today()
    portfolio = _load_portfolio(today)
    transactions = filter_by_period(portfolio.transactions, period, today)

    summary = build_dashboard_summary_use_case(converter).execute(
        portfolio.assets,
        transactions,
    )
    _render_summary(summary, converter)

    left, right = st.columns(2)
    with left:
        allocation = build_asset_allocation_use_case(converter).execute(
            portfolio.assets
        )
        _render_allocation_chart(allocation, converter)
    with right:
        breakdown = build_spending_breakdown_use_case(converter).execute(
            transactions,
            portfolio.budgets,
        )
        _render_spending_chart(breakdown.by_category, converter)

    overview = build_budget_overview_use_case(converter).execute(
        portfolio.budgets,
        portfolio.goals,
    )
    _render_daily_spending_chart(breakdown.by_day, converter)
    _render_budgets(overview, converter)


if __name__ == "__main__":  # pragma: no cover
    main()
