"""Use case to request a spending analysis from the advisor."""

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
from src.domain.constants import ADVISOR_TRANSACTION_SAMPLE
from src.domain.models import SpendingAnalysis, SpendingInsight, Transaction
from src.domain.services import CurrencyConverter
from src.infrastructure.logging.logger import get_app_logger
from src.utils.float_utils import coerce_amount

_PROMPT = (
    "Analyze these recent transactions. Identify 3 key insights "
    "(e.g. high recurring costs, increasing trends in a specific category, "
    "or unusual large purchases). Give a health score (0-100) based on "
    "spending discipline. Write a 1 sentence summary. Return JSON."
)
_INSIGHT_KINDS = ("warning", "success", "info")


class RequestSpendingAnalysisUseCase:
    """Ask the advisor to assess recent spending."""

    def __init__(
        self,
        advisor: AdvisorPort,
        converter: CurrencyConverter,
        logger=None,
        sample_size: int = ADVISOR_TRANSACTION_SAMPLE,
    ) -> None:
        self._advisor = advisor
        self._converter = converter
        self._logger = logger or get_app_logger()
        self._sample_size = sample_size

    def execute(
        self,
        transactions: Sequence[Transaction],
    ) -> AdvisorOutcome[SpendingAnalysis]:
        """Return insights, a 0-100 score and a summary.

        Only the first ``sample_size`` transactions are sent, with amounts
        in the display currency.
        """
        currency = self._converter.display_currency
        sample = [
            {
                "amount": round(
                    self._converter.convert(tx.amount, tx.currency),
                    2,
                ),
                "category": tx.category,
                "date": tx.date.isoformat(),
                "desc": tx.description,
                "type": tx.type.value,
            }
            for tx in list(transactions)[: self._sample_size]
        ]
        request = AdvisorRequest(
            task=AdvisorTask.SPENDING_ANALYSIS,
            prompt=_PROMPT,
            payload={"currency": currency.value, "transactions": sample},
        )
        try:
            response = call_advisor(self._advisor, request, self._logger)
        except AdvisorError as exc:
            self._logger.warning(f"Spending analysis request failed: {exc}")
            return AdvisorOutcome.failure(str(exc))

        insights = []
        for item in as_list(response.get("insights")):
            kind = as_text(item.get("type"), "info").lower()
            amount = item.get("amount")
            insights.append(
                SpendingInsight(
                    title=as_text(item.get("title")),
                    description=as_text(item.get("description")),
                    kind=kind if kind in _INSIGHT_KINDS else "info",
                    amount=coerce_amount(amount) if amount is not None else None,
                )
            )
        score = min(max(coerce_amount(response.get("score")), 0.0), 100.0)
        return AdvisorOutcome.success(
            SpendingAnalysis(
                score=score,
                summary=as_text(response.get("summary")),
                insights=insights,
            )
        )


__all__ = ["RequestSpendingAnalysisUseCase"]
