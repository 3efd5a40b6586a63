"""
Structured document reader (JSON and YAML).
"""

import json
from collections.abc import Mapping
from typing import Any

import yaml

from sales_ingest.core.errors import StructuralError
from sales_ingest.core.models import DataFormat
from sales_ingest.core.schema import reconcile_mapping

from .raw_entry import RawEntry

# Keys that may wrap the record list in a top-level object
WRAPPER_KEYS = ("transactions", "data")


class StructuredReader:
    """
    Reads JSON or YAML documents into raw entries.

    Accepted shapes: a list of objects, an object holding the list under
    "transactions" or "data", or a single object (a one-record batch).
    List items that are not objects become error entries.
    """

    def __init__(self, file_format: DataFormat):
        """
        Initialize structured reader.

        Args:
            file_format: DataFormat.JSON or DataFormat.YAML
        """
        if file_format not in (DataFormat.JSON, DataFormat.YAML):
            raise ValueError(f"StructuredReader does not handle {file_format.value}")
        self.file_format = file_format

    def load(self, text: str) -> Any:
        """
        Parse the document.

        Raises:
            StructuralError: If the document is malformed
        """
        try:
            if self.file_format == DataFormat.JSON:
                return json.loads(text)
            return yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise StructuralError(f"failed to parse {self.file_format.value} input: {e}") from e

    def read(self, text: str) -> list[RawEntry]:
        """
        Read a structured document.

        Args:
            text: Decoded file content

        Returns:
            Raw entries in document order

        Raises:
            StructuralError: If the document is malformed or is not a list or object
        """
        document = self.load(text)
        items = self._extract_items(document)

        entries = []
        for position, item in enumerate(items, start=1):
            if isinstance(item, Mapping):
                entries.append(RawEntry(position=position, values=reconcile_mapping(item)))
            else:
                entries.append(RawEntry(
                    position=position,
                    error=f"entry {position} is not an object ({type(item).__name__})",
                ))
        return entries

    def _extract_items(self, document: Any) -> list[Any]:
        if document is None:
            return []

        if isinstance(document, list):
            return document

        if isinstance(document, Mapping):
            for key in WRAPPER_KEYS:
                if isinstance(document.get(key), list):
                    return document[key]
            return [document]

        raise StructuralError(
            f"{self.file_format.value} input must be a list or an object, got {type(document).__name__}"
        )
