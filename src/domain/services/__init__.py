"""Domain services package."""

from .finance import (
    account_balance,
    account_cashflow,
    allocation_shares,
    budget_usage_percent,
    by_category,
    by_day_of_month,
    category_spent,
    goal_progress_percent,
    group_assets,
    group_sum,
    largest_expense,
    savings_rate,
    sum_converted,
    top_performer,
    total_by_type,
    total_value,
)
from .fx import CurrencyConverter, build_default_rate_table
from .normalization import (
    normalize_currency_code,
    normalize_transaction_type,
    parse_iso_date,
)
from .periods import DateRange, Period, filter_by_period, period_bounds
from .validation import (
    validate_asset_values,
    validate_budget_limits,
    validate_goal_targets,
)

__all__ = [
    "CurrencyConverter",
    "build_default_rate_table",
    "sum_converted",
    "total_value",
    "total_by_type",
    "savings_rate",
    "by_category",
    "by_day_of_month",
    "group_sum",
    "group_assets",
    "allocation_shares",
    "budget_usage_percent",
    "goal_progress_percent",
    "category_spent",
    "largest_expense",
    "account_balance",
    "account_cashflow",
    "top_performer",
    "normalize_currency_code",
    "normalize_transaction_type",
    "parse_iso_date",
    "Period",
    "DateRange",
    "period_bounds",
    "filter_by_period",
    "validate_asset_values",
    "validate_budget_limits",
    "validate_goal_targets",
]
