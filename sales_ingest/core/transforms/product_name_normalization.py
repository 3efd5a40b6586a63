"""
ProductNameNormalization - consistent product naming.
"""

from sales_ingest.core.models import Transaction
from sales_ingest.core.normalizers import normalize_product_name

from .base_transformation import BaseTransformation


class ProductNameNormalization(BaseTransformation):
    name = "ProductNameNormalization"
    description = "Normalizes product names for consistency"

    def transform(self, record: Transaction) -> Transaction:
        return record.model_copy(
            update={"product_name": normalize_product_name(record.product_name, self.config)}
        )
