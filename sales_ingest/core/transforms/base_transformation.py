"""
Base interface for record-level transformations.

All transformations inherit from BaseTransformation and implement transform().
"""

from abc import ABC, abstractmethod

from sales_ingest.core.models import Transaction, TransformConfig


class BaseTransformation(ABC):
    """
    Abstract base class for record-level transformations.

    A transformation maps one canonical record to a (possibly different)
    record. It may raise; the engine then keeps the record's previous values
    and reports a warning. Implementations must be idempotent.
    """

    name: str = ""
    description: str = ""

    def __init__(self, config: TransformConfig):
        """
        Initialize transformation.

        Args:
            config: Shared read-only configuration
        """
        self.config = config

    @abstractmethod
    def transform(self, record: Transaction) -> Transaction:
        """
        Transform a record.

        Args:
            record: The record to transform (not modified)

        Returns:
            The transformed record

        Raises:
            TransformationError: If the record cannot be transformed
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
