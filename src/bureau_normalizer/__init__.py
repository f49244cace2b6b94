"""Credit bureau response normalizer: raw SPCA-XML JSON → compact AI context."""

from bureau_normalizer.assembler import clean_credit_data
from bureau_normalizer.errors import InvalidInputError
from bureau_normalizer.models.payload import AiContextPayload
from bureau_normalizer.pipeline import normalize_document, normalize_json, normalize_many

__all__ = [
    "AiContextPayload",
    "InvalidInputError",
    "clean_credit_data",
    "normalize_document",
    "normalize_json",
    "normalize_many",
]
