"""
CountryMapping - standardizes country names.
"""

from sales_ingest.core.models import Transaction
from sales_ingest.core.normalizers import map_country

from .base_transformation import BaseTransformation


class CountryMapping(BaseTransformation):
    name = "CountryMapping"
    description = "Maps country names to standardized values"

    def transform(self, record: Transaction) -> Transaction:
        return record.model_copy(update={"country": map_country(record.country, self.config)})
