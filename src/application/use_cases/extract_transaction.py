"""Use case to extract a transaction from free text or a receipt image."""

from datetime import date
from typing import Any
from uuid import uuid4

from src.application.ports.advisor import (
    AdvisorError,
    AdvisorPort,
    AdvisorRequest,
    AdvisorTask,
)
from src.application.use_cases.advisor_utils import (
    AdvisorOutcome,
    as_text,
    call_advisor,
)
from src.domain.errors import UnknownCurrencyError
from src.domain.models import Transaction, TransactionType
from src.domain.services import (
    CurrencyConverter,
    normalize_currency_code,
    normalize_transaction_type,
    parse_iso_date,
)
from src.infrastructure.logging.logger import get_app_logger
from src.utils.float_utils import coerce_amount

_TEXT_PROMPT = (
    'Extract transaction details from this text: "{text}". '
    "The user's home currency is {currency}. If no currency is specified "
    "in the text, assume {currency}. Return JSON with amount, currency, "
    "category, description, type (income or expense) and an ISO date."
)
_RECEIPT_PROMPT = (
    "Analyze this receipt. Extract the total amount, currency, merchant name "
    "(as description), category, and date. Return JSON."
)


class ExtractTransactionUseCase:
    """Turn advisor extractions into transactions for the caller to store."""

    def __init__(
        self,
        advisor: AdvisorPort,
        converter: CurrencyConverter,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            advisor: Port to the external advisor.
            converter: Session converter; its display currency is the
                default currency for extracted amounts.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._advisor = advisor
        self._converter = converter
        self._logger = logger or get_app_logger()

    def from_text(
        self,
        text: str,
        account_id: str | None = None,
        today: date | None = None,
    ) -> AdvisorOutcome[Transaction]:
        """Extract a transaction from a sentence such as "Lunch 12 EUR"."""
        if not text.strip():
            return AdvisorOutcome.failure("Nothing to extract from empty text")
        currency = self._converter.display_currency
        request = AdvisorRequest(
            task=AdvisorTask.PARSE_TRANSACTION,
            prompt=_TEXT_PROMPT.format(text=text.strip(), currency=currency.value),
            payload={"text": text.strip(), "currency": currency.value},
        )
        return self._extract(request, account_id, today)

    def from_receipt(
        self,
        image: bytes,
        mime_type: str,
        account_id: str | None = None,
        today: date | None = None,
    ) -> AdvisorOutcome[Transaction]:
        """Extract an expense from a receipt image."""
        if not image:
            return AdvisorOutcome.failure("Receipt image is empty")
        request = AdvisorRequest(
            task=AdvisorTask.PARSE_RECEIPT,
            prompt=_RECEIPT_PROMPT,
            image=image,
            mime_type=mime_type,
        )
        return self._extract(request, account_id, today)

    def _extract(
        self,
        request: AdvisorRequest,
        account_id: str | None,
        today: date | None,
    ) -> AdvisorOutcome[Transaction]:
        try:
            response = call_advisor(self._advisor, request, self._logger)
        except AdvisorError as exc:
            self._logger.warning(f"Transaction extraction failed: {exc}")
            return AdvisorOutcome.failure(str(exc))
        try:
            transaction = self._build_transaction(
                response,
                account_id,
                today or date.today(),
            )
        except (UnknownCurrencyError, ValueError) as exc:
            self._logger.warning(f"Discarding advisor extraction: {exc}")
            return AdvisorOutcome.failure(str(exc))
        return AdvisorOutcome.success(transaction)

    def _build_transaction(
        self,
        response: dict[str, Any],
        account_id: str | None,
        today: date,
    ) -> Transaction:
        amount = abs(coerce_amount(response.get("amount")))
        if amount == 0:
            raise ValueError("Extraction has no amount")
        raw_currency = as_text(response.get("currency"))
        currency = (
            normalize_currency_code(raw_currency)
            if raw_currency
            else self._converter.display_currency
        )
        raw_type = response.get("type")
        tx_type = normalize_transaction_type(raw_type)
        if tx_type is None:
            if raw_type:
                raise ValueError(f"Extraction has no valid type: {raw_type!r}")
            tx_type = TransactionType.EXPENSE
        raw_date = response.get("date")
        tx_date = parse_iso_date(raw_date)
        if tx_date is None:
            if raw_date:
                self._logger.warning(
                    f"Unparseable transaction date {raw_date!r}, using today"
                )
            tx_date = today
        return Transaction(
            id=uuid4().hex,
            amount=amount,
            currency=currency,
            category=as_text(response.get("category"), "General"),
            description=as_text(response.get("description"), "AI Entry"),
            date=tx_date,
            type=tx_type,
            account_id=account_id,
        )


__all__ = ["ExtractTransactionUseCase"]
