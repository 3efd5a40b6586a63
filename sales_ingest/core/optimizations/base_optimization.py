"""
Base interface for dataset-level optimization passes.
"""

from abc import ABC, abstractmethod

from sales_ingest.core.models import Transaction


class BaseOptimization(ABC):
    """
    Abstract base class for optimizations.

    An optimization runs once over the complete record set, after every
    per-record stage, and returns a (possibly smaller or reordered) list.
    Any bookkeeping it needs is allocated inside optimize(), so every call
    starts from scratch.
    """

    name: str = ""
    description: str = ""

    @abstractmethod
    def optimize(self, records: list[Transaction]) -> list[Transaction]:
        """
        Optimize a record set.

        Args:
            records: Records in encounter order (not modified)

        Returns:
            The optimized record list
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
