"""
Batch data source readers.
"""

from .delimited_reader import DelimitedReader
from .file_reader import FileReader
from .raw_entry import RawEntry
from .structured_reader import StructuredReader

__all__ = [
    "DelimitedReader",
    "FileReader",
    "RawEntry",
    "StructuredReader",
]
