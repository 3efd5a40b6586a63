"""
RawEntry: one input entry after decoding, before it becomes a Transaction.
"""

from dataclasses import dataclass, field

from sales_ingest.core.models import RawMapping


@dataclass
class RawEntry:
    """
    A decoded input entry.

    Attributes:
        position: 1-based position of the entry in the input
        values: Canonical field name -> raw value
        error: Set when the entry could not be read as a record at all
    """

    position: int
    values: RawMapping = field(default_factory=dict)
    error: str | None = None
