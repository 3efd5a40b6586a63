"""
Supported serialization formats.
"""

from enum import Enum


class DataFormat(str, Enum):
    """Serialization formats understood by the readers and writers."""

    CSV = "csv"
    TSV = "tsv"
    JSON = "json"
    YAML = "yaml"
    XML = "xml"  # reserved, detected but not parsed

    @classmethod
    def parse(cls, value: "str | DataFormat") -> "DataFormat":
        """
        Resolve a format name ("csv", "YML", ...) to a DataFormat.

        Raises:
            ValueError: If the name is not a known format
        """
        if isinstance(value, DataFormat):
            return value
        name = value.strip().lower().lstrip(".")
        if name == "yml":
            name = "yaml"
        try:
            return cls(name)
        except ValueError:
            raise ValueError(f"Unsupported format: {value}") from None


SUPPORTED_FORMATS = (DataFormat.CSV, DataFormat.TSV, DataFormat.JSON, DataFormat.YAML)
