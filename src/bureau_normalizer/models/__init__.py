"""Data models for raw bureau documents and the normalized payload."""

from bureau_normalizer.models.payload import (
    AiContextPayload,
    FinancialSummary,
    Identification,
    Location,
    NegativeDetails,
)
from bureau_normalizer.models.raw import RawDocument

__all__ = [
    "AiContextPayload",
    "FinancialSummary",
    "Identification",
    "Location",
    "NegativeDetails",
    "RawDocument",
]
