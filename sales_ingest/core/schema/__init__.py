"""
Input shape handling: format detection, field reconciliation and record
construction.
"""

from .field_reconciler import (
    FIELD_SYNONYMS,
    build_column_map,
    extract_row,
    flatten_mapping,
    reconcile_mapping,
    stringify,
)
from .format_detection import SNIFF_SIZE, detect_format, format_from_extension, sniff_format
from .record_builder import RecordBuilder

__all__ = [
    "FIELD_SYNONYMS",
    "SNIFF_SIZE",
    "RecordBuilder",
    "build_column_map",
    "detect_format",
    "extract_row",
    "flatten_mapping",
    "format_from_extension",
    "reconcile_mapping",
    "sniff_format",
    "stringify",
]
