"""Scalar coercion for bureau-native string encodings (pt-BR locale)."""

import math
import re
from typing import Any

# Leading numeric prefix, as read by a lenient float parser ("12,5abc" -> 12.5)
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def is_present(value: Any) -> bool:
    """
    Truthiness as the bureau payload was originally consumed.
    None, False, 0, NaN and "" are absent; empty lists/dicts still count as present.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    if isinstance(value, str):
        return value != ""
    return True


def parse_monetary_value(value: Any) -> float:
    """
    Parse a pt-BR monetary string ("1.234,56") into a float.
    Non-strings and unparsable strings yield 0.
    """
    if not isinstance(value, str):
        return 0.0
    normalized = value.replace(".", "").replace(",", ".", 1)
    m = _FLOAT_PREFIX.match(normalized)
    if not m:
        return 0.0
    result = float(m.group(1))
    return 0.0 if math.isnan(result) or math.isinf(result) else result


def parse_quantity(value: Any) -> int:
    """Parse an integer counter; absent or non-numeric yields 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) or math.isinf(value) else int(value)
    if isinstance(value, str):
        m = _INT_PREFIX.match(value)
        return int(m.group(1)) if m else 0
    return 0
