"""Use case to request budget limit suggestions from the advisor."""

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
from src.domain.models import BudgetSuggestion, Transaction
from src.domain.services import CurrencyConverter, by_category, group_sum
from src.infrastructure.logging.logger import get_app_logger
from src.utils.float_utils import coerce_amount

_PROMPT = (
    "Analyze this monthly spending summary per category. "
    "Amounts are in {currency}. "
    "Suggest a realistic budget limit for 3 key categories. "
    "Return JSON with a 'budgets' list of {{category, limit, reason}}."
)


class RequestBudgetPlanUseCase:
    """Ask the advisor for budget limits based on converted spending."""

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
        transactions: Sequence[Transaction],
    ) -> AdvisorOutcome[list[BudgetSuggestion]]:
        """Return suggested budgets in the display currency.

        Spending is summed per category after conversion, so the advisor
        never sees raw amounts of mixed currencies.
        """
        currency = self._converter.display_currency
        summary = {
            category: round(amount, 2)
            for category, amount in group_sum(
                transactions,
                by_category,
                self._converter,
            ).items()
        }
        request = AdvisorRequest(
            task=AdvisorTask.BUDGET_PLAN,
            prompt=_PROMPT.format(currency=currency.value),
            payload={"currency": currency.value, "spending": summary},
        )
        try:
            response = call_advisor(self._advisor, request, self._logger)
        except AdvisorError as exc:
            self._logger.warning(f"Budget plan request failed: {exc}")
            return AdvisorOutcome.failure(str(exc))

        suggestions = []
        for item in as_list(response.get("budgets")):
            category = as_text(item.get("category"))
            limit = coerce_amount(item.get("limit"))
            if not category or limit <= 0:
                continue
            suggestions.append(
                BudgetSuggestion(
                    category=category,
                    limit=limit,
                    reason=as_text(item.get("reason")),
                    currency=currency,
                )
            )
        return AdvisorOutcome.success(suggestions)


__all__ = ["RequestBudgetPlanUseCase"]
