"""Raw bureau response before normalization."""

import json
from typing import Any, Mapping

from pydantic import BaseModel, Field, ValidationError

from bureau_normalizer.errors import InvalidInputError


class RawDocument(BaseModel):
    """Bureau response envelope handed over by the fetch stage; always a JSON object."""

    data: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_value(cls, document: Any) -> "RawDocument":
        """Wrap a decoded value. Raises InvalidInputError unless it is a JSON object."""
        if isinstance(document, cls):
            return document
        if not isinstance(document, Mapping):
            raise InvalidInputError(
                f"Expected a JSON object at top level, got {type(document).__name__}"
            )
        try:
            return cls(data=document)
        except ValidationError as e:
            raise InvalidInputError(f"Top-level object has non-string keys: {e}") from e

    @classmethod
    def from_json(cls, text: str | bytes) -> "RawDocument":
        """Decode JSON text (str, or UTF-8 bytes) into a RawDocument."""
        try:
            document = json.loads(text)
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            raise InvalidInputError(f"Input is not valid JSON: {e}") from e
        return cls.from_value(document)
