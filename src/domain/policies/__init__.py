"""Domain policies package."""

from .asset_filters import is_invested, is_liquid, matches_category

__all__ = ["is_liquid", "is_invested", "matches_category"]
