"""
Batch data sink writers.
"""

from .format_writer import EXPORT_COLUMNS, FormatWriter

__all__ = [
    "EXPORT_COLUMNS",
    "FormatWriter",
]
