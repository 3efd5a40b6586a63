"""
RegionMapping - standardizes region names.
"""

from sales_ingest.core.models import Transaction
from sales_ingest.core.normalizers import map_region

from .base_transformation import BaseTransformation


class RegionMapping(BaseTransformation):
    name = "RegionMapping"
    description = "Maps region names to standardized values"

    def transform(self, record: Transaction) -> Transaction:
        return record.model_copy(update={"region": map_region(record.region, self.config)})
