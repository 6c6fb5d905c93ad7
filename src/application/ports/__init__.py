"""Application ports package."""

from .advisor import AdvisorError, AdvisorPort, AdvisorRequest, AdvisorTask

__all__ = [
    "AdvisorError",
    "AdvisorPort",
    "AdvisorRequest",
    "AdvisorTask",
]
