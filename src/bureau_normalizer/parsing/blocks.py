"""Record block unification.

The bureau's XML-to-JSON conversion renders the same repeated section in
different shapes depending on how many records exist:

- a list of records (many records, some sections);
- a wrapper ``{"REGISTRO": "S", "<DATA-KEY>": record-or-list}``;
- a bare record carrying ``"REGISTRO": "S"`` (one record, no wrapper);
- ``{"REGISTRO": "N"}`` or nothing at all (no records).

``classify_block`` is the only place that decides which shape a block has;
``unify_block`` turns any of them into a list of renamed, non-empty records.
"""

import logging
from enum import Enum
from typing import Any, Mapping, Optional

from .constants import INDICATOR, INDICATOR_YES, PLACEHOLDER
from .scalars import is_present

logger = logging.getLogger(__name__)

# Ordered (source code, output name) pairs
FieldRenameMap = tuple[tuple[str, str], ...]
NormalizedRecord = dict[str, Any]


class BlockShape(str, Enum):
    """Runtime shape of a raw record block."""

    ABSENT = "absent"
    SEQUENCE = "sequence"
    WRAPPED = "wrapped"
    SINGLE = "single"
    EMPTY = "empty"


def classify_block(block: Any, data_key: Optional[str] = None) -> BlockShape:
    """Resolve the shape of a record block; precedence follows the enum order."""
    if not is_present(block):
        return BlockShape.ABSENT
    if isinstance(block, list):
        return BlockShape.SEQUENCE
    if isinstance(block, Mapping) and block.get(INDICATOR) == INDICATOR_YES:
        if data_key and is_present(block.get(data_key)):
            return BlockShape.WRAPPED
        return BlockShape.SINGLE
    return BlockShape.EMPTY


def resolve_records(block: Any, data_key: Optional[str] = None) -> list[Any]:
    """Return the raw record list for a block, promoting a single record to a list."""
    shape = classify_block(block, data_key)
    if shape is BlockShape.SEQUENCE:
        raw = block
    elif shape is BlockShape.WRAPPED:
        raw = block[data_key]
    elif shape is BlockShape.SINGLE:
        raw = block
    else:
        return []
    return list(raw) if isinstance(raw, list) else [raw]


def rename_record(item: Any, fields: FieldRenameMap) -> NormalizedRecord:
    """Project one raw record onto the output vocabulary, skipping empty and '-' values."""
    if not isinstance(item, Mapping):
        return {}
    record: NormalizedRecord = {}
    for source, target in fields:
        value = item.get(source)
        if is_present(value) and value != PLACEHOLDER:
            record[target] = value
    return record


def unify_block(
    block: Any,
    data_key: Optional[str],
    fields: FieldRenameMap,
) -> list[NormalizedRecord]:
    """
    Normalize a shape-ambiguous record block into a list of renamed records.
    Non-mapping items and records with no populated field are dropped.
    """
    raw_items = resolve_records(block, data_key)
    records = [rename_record(item, fields) for item in raw_items]
    kept = [r for r in records if r]
    if len(kept) != len(raw_items):
        logger.debug(
            "Dropped %d of %d records (data_key=%s)",
            len(raw_items) - len(kept),
            len(raw_items),
            data_key,
        )
    return kept
