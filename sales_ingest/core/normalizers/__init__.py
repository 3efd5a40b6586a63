"""
Pure value normalizers: each is a function of (raw value, configuration).
"""

from .currency import format_minor_units, parse_currency, strip_currency
from .dates import FALLBACK_DATE_FORMATS, format_timestamp, parse_date, to_utc
from .geography import COUNTRY_ALIASES, REGION_ALIASES, map_country, map_region
from .products import normalize_product_name
from .quantity import parse_quantity
from .text import capitalize_words, clean_string, normalize_null, title_case

__all__ = [
    "COUNTRY_ALIASES",
    "FALLBACK_DATE_FORMATS",
    "REGION_ALIASES",
    "capitalize_words",
    "clean_string",
    "format_minor_units",
    "format_timestamp",
    "map_country",
    "map_region",
    "normalize_null",
    "normalize_product_name",
    "parse_currency",
    "parse_date",
    "parse_quantity",
    "strip_currency",
    "title_case",
    "to_utc",
]
