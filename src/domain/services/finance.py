"""Domain services for dashboard aggregates.

Every sum converts each amount into the display currency before adding it;
raw amounts of different currencies are never combined. Degenerate input
(empty lists, zero income, zero limits) yields neutral results instead of
errors.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import TypeVar

from src.domain.constants import BUDGET_LIMIT_PCT, BUDGET_WARN_PCT
from src.domain.models import (
    Account,
    AccountType,
    Asset,
    MonetaryValue,
    Transaction,
    TransactionType,
    UsageRatio,
)
from src.domain.policies import matches_category
from src.domain.services.fx import CurrencyConverter
from src.domain.services.normalization import normalize_transaction_type

K = TypeVar("K", bound=Hashable)


def sum_converted(
    values: Iterable[MonetaryValue],
    converter: CurrencyConverter,
) -> float:
    """Sum monetary values after converting each to the display currency."""
    return sum(
        (converter.convert(value.amount, value.currency) for value in values),
        0.0,
    )


def total_value(
    assets: Iterable[Asset],
    converter: CurrencyConverter,
    predicate: Callable[[Asset], bool] | None = None,
) -> float:
    """Return the converted value of assets matching an optional filter.

    Args:
        assets: Holdings to aggregate.
        converter: Converter targeting the display currency.
        predicate: Optional filter, e.g. ``is_liquid`` or ``is_invested``.

    Returns:
        float: Total in the display currency, 0 for no matches.
    """
    return sum_converted(
        (
            asset.money
            for asset in assets
            if predicate is None or predicate(asset)
        ),
        converter,
    )


def total_by_type(
    transactions: Iterable[Transaction],
    transaction_type: TransactionType | str,
    converter: CurrencyConverter,
) -> float:
    """Return the converted total of transactions of one type.

    Args:
        transactions: Transactions to aggregate.
        transaction_type: ``income`` or ``expense``.
        converter: Converter targeting the display currency.

    Returns:
        float: Total in the display currency, 0 for no matches.
    """
    wanted = normalize_transaction_type(transaction_type)
    return sum_converted(
        (tx.money for tx in transactions if tx.type == wanted),
        converter,
    )


def savings_rate(income: float, expense: float) -> float:
    """Return the share of income kept, as a percentage.

    A dashboard without income shows a rate of 0 rather than failing, so
    ``income <= 0`` returns 0.
    """
    if income <= 0:
        return 0.0
    return (income - expense) / income * 100


def by_category(transaction: Transaction) -> str:
    return transaction.category


def by_day_of_month(transaction: Transaction) -> int:
    return transaction.date.day


def group_sum(
    transactions: Iterable[Transaction],
    key_fn: Callable[[Transaction], K],
    converter: CurrencyConverter,
) -> dict[K, float]:
    """Bucket converted expense amounts by key.

    Keys keep their first-seen order so charts render stably; the order
    carries no other meaning.

    Args:
        transactions: Transactions to bucket; income is ignored.
        key_fn: Function returning the bucket key, e.g. ``by_category``.
        converter: Converter targeting the display currency.

    Returns:
        dict: Converted totals per key.
    """
    totals: dict[K, float] = {}
    for tx in transactions:
        if tx.type != TransactionType.EXPENSE:
            continue
        key = key_fn(tx)
        totals[key] = totals.get(key, 0.0) + converter.convert(
            tx.amount,
            tx.currency,
        )
    return totals


def group_assets(
    assets: Iterable[Asset],
    key_fn: Callable[[Asset], K],
    converter: CurrencyConverter,
) -> dict[K, float]:
    """Bucket converted asset values by key, in first-seen order."""
    totals: dict[K, float] = {}
    for asset in assets:
        key = key_fn(asset)
        totals[key] = totals.get(key, 0.0) + converter.convert(
            asset.value,
            asset.currency,
        )
    return totals


def allocation_shares(totals: Mapping[K, float]) -> dict[K, float]:
    """Return each bucket's share of the total as a percentage.

    All shares are 0 when the total is not positive.
    """
    grand_total = sum(totals.values(), 0.0)
    if grand_total <= 0:
        return {key: 0.0 for key in totals}
    return {key: amount / grand_total * 100 for key, amount in totals.items()}


def budget_usage_percent(
    spent: float,
    limit: float,
    *,
    warn_threshold: float = BUDGET_WARN_PCT,
    limit_threshold: float = BUDGET_LIMIT_PCT,
) -> UsageRatio:
    """Return raw and display-clamped usage of a budget limit.

    The raw ratio keeps "over the limit" distinguishable from "at the
    limit"; the clamped ratio is bounded to [0, 100] for progress bars. A
    non-positive limit yields 0 for both.

    Args:
        spent: Amount spent, in the same currency as ``limit``.
        limit: Budget limit.
        warn_threshold: Percentage above which usage is near the limit.
        limit_threshold: Percentage at which the limit is reached.

    Returns:
        UsageRatio: Raw and clamped percentages with threshold flags.
    """
    if limit <= 0:
        raw = 0.0
    else:
        raw = spent / limit * 100
    return UsageRatio(
        raw_percent=raw,
        clamped_percent=min(max(raw, 0.0), 100.0),
        warn_threshold=warn_threshold,
        limit_threshold=limit_threshold,
    )


def goal_progress_percent(current: float, target: float) -> UsageRatio:
    """Return progress towards a goal target, 0 for a non-positive target."""
    return budget_usage_percent(current, target)


def category_spent(
    transactions: Iterable[Transaction],
    category: str,
    converter: CurrencyConverter,
) -> float:
    """Return converted expenses whose category matches, ignoring case."""
    return sum_converted(
        (
            tx.money
            for tx in transactions
            if tx.type == TransactionType.EXPENSE
            and matches_category(tx, category)
        ),
        converter,
    )


def largest_expense(
    transactions: Iterable[Transaction],
    converter: CurrencyConverter,
) -> Transaction | None:
    """Return the expense with the largest converted amount, if any."""
    expenses = [
        tx for tx in transactions if tx.type == TransactionType.EXPENSE
    ]
    if not expenses:
        return None
    return max(
        expenses,
        key=lambda tx: converter.convert(tx.amount, tx.currency),
    )


def account_balance(
    account: Account,
    assets: Iterable[Asset],
    converter: CurrencyConverter,
) -> float:
    """Return an account balance in the display currency.

    Bank accounts report their cash balance; investment accounts report the
    value of the assets linked to them.
    """
    if account.type == AccountType.INVESTMENT:
        return total_value(
            assets,
            converter,
            predicate=lambda asset: asset.account_id == account.id,
        )
    return converter.convert_value(account.money).amount


def account_cashflow(
    account_id: str,
    transactions: Iterable[Transaction],
    converter: CurrencyConverter,
) -> tuple[float, float]:
    """Return converted ``(income, expense)`` booked on one account.

    Args:
        account_id: Account whose transactions are summed.
        transactions: Transactions of any account.
        converter: Converter targeting the display currency.

    Returns:
        tuple[float, float]: Income and expense totals, 0 when none match.
    """
    linked = [tx for tx in transactions if tx.account_id == account_id]
    return (
        total_by_type(linked, TransactionType.INCOME, converter),
        total_by_type(linked, TransactionType.EXPENSE, converter),
    )


def top_performer(assets: Iterable[Asset]) -> Asset | None:
    """Return the asset with the highest daily change.

    A missing daily change counts as 0; ties keep the first asset.
    """
    best: Asset | None = None
    for asset in assets:
        change = asset.day_change_pct or 0.0
        if best is None or change > (best.day_change_pct or 0.0):
            best = asset
    return best


__all__ = [
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
]
