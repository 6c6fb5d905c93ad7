"""Shared helpers for advisor-backed use cases."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from src.application.ports.advisor import AdvisorError, AdvisorPort, AdvisorRequest

T = TypeVar("T")


@dataclass(frozen=True)
class AdvisorOutcome(Generic[T]):
    """Result of an advisor-backed use case.

    Exactly one of ``result`` and ``error`` is set.
    """

    result: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, result: T) -> "AdvisorOutcome[T]":
        return cls(result=result)

    @classmethod
    def failure(cls, error: str) -> "AdvisorOutcome[T]":
        return cls(error=error)


def call_advisor(
    advisor: AdvisorPort,
    request: AdvisorRequest,
    logger,
) -> dict[str, Any]:
    """Send a request and check the response is a mapping.

    Args:
        advisor: Port to the external advisor.
        request: Request to send.
        logger: Logger used for info messages.

    Returns:
        dict[str, Any]: Advisor response.

    Raises:
        AdvisorError: If the advisor fails or returns a non-mapping.
    """
    logger.info(f"Requesting advisor task={request.task.value}")
    response = advisor.request(request)
    if not isinstance(response, dict):
        raise AdvisorError(
            f"Advisor returned {type(response).__name__} for {request.task.value}"
        )
    return response


def as_text(value: Any, default: str = "") -> str:
    """Return a stripped string, or ``default`` for missing values."""
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def as_list(value: Any) -> list[dict[str, Any]]:
    """Return the mapping items of a list, ignoring anything else."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


__all__ = ["AdvisorOutcome", "call_advisor", "as_text", "as_list"]
