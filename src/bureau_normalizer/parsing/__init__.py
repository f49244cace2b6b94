"""Parsing primitives for bureau responses: scalars, safe access, record blocks."""

from bureau_normalizer.parsing.access import dig, dig_mapping
from bureau_normalizer.parsing.blocks import (
    BlockShape,
    classify_block,
    rename_record,
    resolve_records,
    unify_block,
)
from bureau_normalizer.parsing.scalars import is_present, parse_monetary_value, parse_quantity
from bureau_normalizer.parsing.sections import ALL_SECTIONS, SectionSpec

__all__ = [
    "ALL_SECTIONS",
    "BlockShape",
    "SectionSpec",
    "classify_block",
    "dig",
    "dig_mapping",
    "is_present",
    "parse_monetary_value",
    "parse_quantity",
    "rename_record",
    "resolve_records",
    "unify_block",
]
