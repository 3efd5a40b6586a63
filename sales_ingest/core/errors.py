"""
Exception hierarchy for the ingestion pipeline.

Per-record problems (ParseError, TransformationError) are caught by the
pipeline and reported in the TransformationResult. StructuralError and
ConfigurationError abort the whole call.
"""


class SalesIngestError(Exception):
    """Base class for all pipeline errors."""


class ParseError(SalesIngestError, ValueError):
    """Raised when a raw value cannot be converted to its canonical type."""

    def __init__(self, field_name: str, value: object, message: str):
        self.field_name = field_name
        self.value = value
        self.message = message
        super().__init__(f"invalid {field_name} '{value}': {message}")


class RecordParseError(SalesIngestError):
    """Raised when a parsed entry cannot be turned into a Transaction."""


class StructuralError(SalesIngestError):
    """Raised when the input cannot be decoded into records at all."""


class ConfigurationError(SalesIngestError, ValueError):
    """Raised when a TransformConfig is rejected before processing."""


class TransformationError(SalesIngestError):
    """Raised by a transformation stage that cannot handle a record."""

    def __init__(self, transformation_name: str, message: str):
        self.transformation_name = transformation_name
        self.message = message
        super().__init__(f"[{transformation_name}] {message}")
