"""
Dataset-level optimization passes.
"""

from .base_optimization import BaseOptimization
from .data_deduplication import DataDeduplication
from .duplicate_removal import DuplicateRemoval
from .index_optimization import IndexOptimization

OPTIMIZATION_REGISTRY: dict[str, type[BaseOptimization]] = {
    DuplicateRemoval.name: DuplicateRemoval,
    DataDeduplication.name: DataDeduplication,
    IndexOptimization.name: IndexOptimization,
}

__all__ = [
    "OPTIMIZATION_REGISTRY",
    "BaseOptimization",
    "DataDeduplication",
    "DuplicateRemoval",
    "IndexOptimization",
]
