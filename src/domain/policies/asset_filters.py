"""Filtering policies for dashboard records."""

from src.domain.models.records import Asset, AssetType, Transaction


def is_liquid(asset: Asset) -> bool:
    """Return True for cash holdings counted as liquidity."""
    return asset.type == AssetType.CASH


def is_invested(asset: Asset) -> bool:
    """Return True for non-cash holdings counted as invested."""
    return asset.type != AssetType.CASH


def matches_category(transaction: Transaction, category: str) -> bool:
    """Return True when the transaction category matches, ignoring case.

    Args:
        transaction: Transaction to evaluate.
        category: Category name to compare against.

    Returns:
        bool: True when both names are non-empty and equal once casefolded.
    """
    left = transaction.category.strip().casefold()
    right = category.strip().casefold()
    return bool(left) and left == right


__all__ = ["is_liquid", "is_invested", "matches_category"]
