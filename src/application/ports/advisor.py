"""Port for the external generative-AI advisor.

The advisor is an opaque request/response collaborator: it receives a
prompt with a structured payload (and optionally an image) and returns a
JSON-like mapping, or raises ``AdvisorError``. Retries, streaming and partial
results are not part of the contract.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class AdvisorTask(str, Enum):
    """Kinds of advisor requests."""

    PARSE_TRANSACTION = "parse_transaction"
    PARSE_RECEIPT = "parse_receipt"
    BUDGET_PLAN = "budget_plan"
    SPENDING_ANALYSIS = "spending_analysis"
    PORTFOLIO_REBALANCING = "portfolio_rebalancing"


@dataclass(frozen=True)
class AdvisorRequest:
    """Single advisor call.

    Attributes:
        task: What the advisor is asked to do.
        prompt: Natural language instructions.
        payload: Structured data the prompt refers to.
        image: Optional raw image bytes (receipts).
        mime_type: MIME type of ``image``.
    """

    task: AdvisorTask
    prompt: str
    payload: dict[str, Any] = field(default_factory=dict)
    image: bytes | None = None
    mime_type: str | None = None


class AdvisorError(RuntimeError):
    """Raised when the advisor fails or returns an unusable response."""


class AdvisorPort(Protocol):
    """Port exposing the generative-AI advisor."""

    def request(self, request: AdvisorRequest) -> dict[str, Any]:
        """Return the structured advisor response.

        Raises:
            AdvisorError: On timeouts, transport errors or malformed output.
        """


__all__ = ["AdvisorTask", "AdvisorRequest", "AdvisorError", "AdvisorPort"]
