"""
Record-level transformation stages.

Provides currency, date, string-cleaning, country, region and product name
normalization. Default registration order is the order of
TRANSFORMATION_REGISTRY.
"""

from .base_transformation import BaseTransformation
from .country_mapping import CountryMapping
from .currency_normalization import CurrencyNormalization
from .date_normalization import DateNormalization
from .product_name_normalization import ProductNameNormalization
from .region_mapping import RegionMapping
from .string_cleaning import StringCleaning

TRANSFORMATION_REGISTRY: dict[str, type[BaseTransformation]] = {
    CurrencyNormalization.name: CurrencyNormalization,
    DateNormalization.name: DateNormalization,
    StringCleaning.name: StringCleaning,
    CountryMapping.name: CountryMapping,
    RegionMapping.name: RegionMapping,
    ProductNameNormalization.name: ProductNameNormalization,
}

__all__ = [
    "TRANSFORMATION_REGISTRY",
    "BaseTransformation",
    "CountryMapping",
    "CurrencyNormalization",
    "DateNormalization",
    "ProductNameNormalization",
    "RegionMapping",
    "StringCleaning",
]
