"""Calling layer: validate input → normalize → measure footprint."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from bureau_normalizer.assembler import clean_credit_data
from bureau_normalizer.models.payload import AiContextPayload
from bureau_normalizer.models.raw import RawDocument
from bureau_normalizer.parsing.access import dig
from bureau_normalizer.parsing.sections import ALL_SECTIONS

logger = logging.getLogger(__name__)


@dataclass
class ReductionStats:
    """Size of the raw response versus the normalized payload."""

    raw_chars: int
    normalized_chars: int
    section_counts: dict[str, int] = field(default_factory=dict)

    @property
    def ratio(self) -> float:
        """Fraction of characters removed (0.0 when the raw document is empty)."""
        if not self.raw_chars:
            return 0.0
        return 1 - self.normalized_chars / self.raw_chars


def normalize_document(document: Any) -> AiContextPayload:
    """
    Normalize one decoded bureau response.
    Raises InvalidInputError when the top-level value is not a JSON object.
    """
    return clean_credit_data(RawDocument.from_value(document).data)


def normalize_json(text: str | bytes) -> AiContextPayload:
    """Decode JSON text and normalize it; undecodable input raises InvalidInputError."""
    return clean_credit_data(RawDocument.from_json(text).data)


def normalize_many(documents: Iterable[Any]) -> list[AiContextPayload]:
    """Normalize documents independently, preserving order."""
    payloads = [normalize_document(d) for d in documents]
    logger.info("Normalized %d documents", len(payloads))
    return payloads


def reduction_stats(document: Any, payload: AiContextPayload, *, drop_empty: bool = True) -> ReductionStats:
    """Compare serialized sizes and count records kept per section."""
    if isinstance(document, RawDocument):
        document = document.data
    raw_text = json.dumps(document, ensure_ascii=False, default=str)
    output = payload.to_dict()
    counts = {s.name: len(dig(output, *s.output_path) or []) for s in ALL_SECTIONS}
    return ReductionStats(
        raw_chars=len(raw_text),
        normalized_chars=len(payload.to_prompt_json(drop_empty=drop_empty)),
        section_counts=counts,
    )
