"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import math
import os

from src.domain.constants import (
    BUDGET_LIMIT_PCT,
    BUDGET_WARN_PCT,
    DEFAULT_BASE_CURRENCY,
)
from src.domain.models import CurrencyCode
from src.domain.services import normalize_currency_code
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the dashboard adapters.

    Attributes:
        display_currency: Display currency for new sessions.
        budget_warn_pct: Usage percentage flagged as near the limit.
        budget_limit_pct: Usage percentage flagged as exceeded.
    """

    display_currency: CurrencyCode = DEFAULT_BASE_CURRENCY
    budget_warn_pct: float = BUDGET_WARN_PCT
    budget_limit_pct: float = BUDGET_LIMIT_PCT

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.

        Raises:
            UnknownCurrencyError: If DASHBOARD_DISPLAY_CURRENCY is not a
                supported currency code.
        """
        logger = get_app_logger()
        display_currency = normalize_currency_code(
            os.getenv("DASHBOARD_DISPLAY_CURRENCY", DEFAULT_BASE_CURRENCY.value)
        )
        warn_pct = cls._read_percent(
            "DASHBOARD_BUDGET_WARN_PCT",
            BUDGET_WARN_PCT,
            logger,
        )
        limit_pct = cls._read_percent(
            "DASHBOARD_BUDGET_LIMIT_PCT",
            BUDGET_LIMIT_PCT,
            logger,
        )
        if warn_pct > limit_pct:
            logger.warning(
                f"Budget warning threshold {warn_pct} exceeds limit "
                f"threshold {limit_pct}; using defaults."
            )
            warn_pct, limit_pct = BUDGET_WARN_PCT, BUDGET_LIMIT_PCT
        return cls(
            display_currency=display_currency,
            budget_warn_pct=warn_pct,
            budget_limit_pct=limit_pct,
        )

    @staticmethod
    def _read_percent(name: str, default: float, logger) -> float:
        """Read a positive percentage from the environment.

        Args:
            name: Environment variable name.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            float: Parsed percentage.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}.")
            return default
        if not math.isfinite(value) or value <= 0:
            logger.warning(f"Invalid {name}={raw!r}; using {default}.")
            return default
        return value


__all__ = ["DashboardSettings"]
