"""Use case to request portfolio rebalancing suggestions from the advisor."""

from collections.abc import Sequence

from src.application.ports.advisor import (
    AdvisorError,
    AdvisorPort,
    AdvisorRequest,
    AdvisorTask,
)
from src.application.use_cases.advisor_utils import (
    AdvisorOutcome,
    as_list,
    as_text,
    call_advisor,
)
from src.domain.models import Asset, PortfolioAction, PortfolioAnalysis
from src.domain.services import CurrencyConverter
from src.infrastructure.logging.logger import get_app_logger

_PROMPT = (
    "Analyze this investment portfolio. The user's risk profile is "
    "{risk_profile}. Identify if the portfolio is consistent with the risk "
    "profile. Suggest 3 actions (buy/sell/hold) to rebalance or optimize. "
    "Return JSON."
)
_ACTIONS = ("buy", "sell", "hold")
RISK_PROFILES = ("Low", "Medium", "High")


class RequestPortfolioAnalysisUseCase:
    """Ask the advisor to compare holdings with a risk profile."""

    def __init__(
        self,
        advisor: AdvisorPort,
        converter: CurrencyConverter,
        logger=None,
    ) -> None:
        self._advisor = advisor
        self._converter = converter
        self._logger = logger or get_app_logger()

    def execute(
        self,
        assets: Sequence[Asset],
        risk_profile: str = "Medium",
    ) -> AdvisorOutcome[PortfolioAnalysis]:
        """Return the current and target risk plus suggested actions.

        Args:
            assets: Holdings to analyze.
            risk_profile: One of ``Low``, ``Medium`` or ``High``.

        Returns:
            AdvisorOutcome[PortfolioAnalysis]: Analysis or failure message.
        """
        if risk_profile not in RISK_PROFILES:
            return AdvisorOutcome.failure(f"Unknown risk profile: {risk_profile}")
        currency = self._converter.display_currency
        holdings = [
            {
                "name": asset.name,
                "type": asset.type.value,
                "value": round(
                    self._converter.convert(asset.value, asset.currency),
                    2,
                ),
            }
            for asset in assets
        ]
        request = AdvisorRequest(
            task=AdvisorTask.PORTFOLIO_REBALANCING,
            prompt=_PROMPT.format(risk_profile=risk_profile),
            payload={
                "currency": currency.value,
                "risk_profile": risk_profile,
                "holdings": holdings,
            },
        )
        try:
            response = call_advisor(self._advisor, request, self._logger)
        except AdvisorError as exc:
            self._logger.warning(f"Portfolio analysis request failed: {exc}")
            return AdvisorOutcome.failure(str(exc))

        suggestions = []
        for item in as_list(response.get("suggestions")):
            action = as_text(item.get("action")).lower()
            if action not in _ACTIONS:
                continue
            suggestions.append(
                PortfolioAction(
                    asset=as_text(item.get("asset")),
                    action=action,
                    reason=as_text(item.get("reason")),
                )
            )
        return AdvisorOutcome.success(
            PortfolioAnalysis(
                current_risk=as_text(response.get("currentRisk"), "Unknown"),
                target_risk=as_text(response.get("targetRisk"), risk_profile),
                summary=as_text(response.get("summary")),
                suggestions=suggestions,
            )
        )


__all__ = ["RequestPortfolioAnalysisUseCase", "RISK_PROFILES"]
