"""Helpers for float normalization."""

import math


def coerce_amount(value) -> float:
    """Normalize numeric values to float.

    Args:
        value: Raw numeric value from adapters or advisor payloads.

    Returns:
        float: Normalized numeric value, 0.0 for missing or non-finite input.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount):
        return 0.0
    return amount


__all__ = ["coerce_amount"]
