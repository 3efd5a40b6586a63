"""
Product name normalization.
"""

import re

from sales_ingest.core.models import TransformConfig

from .text import capitalize_words

# Common catalog terms, applied in this order.
PRODUCT_KEYWORDS = (
    (re.compile("widget", re.IGNORECASE), "Widget"),
    (re.compile("gadget", re.IGNORECASE), "Gadget"),
    (re.compile("device", re.IGNORECASE), "Device"),
    (re.compile("tool", re.IGNORECASE), "Tool"),
    (re.compile("kit", re.IGNORECASE), "Kit"),
    (re.compile("set", re.IGNORECASE), "Set"),
    (re.compile("pack", re.IGNORECASE), "Pack"),
    (re.compile("bundle", re.IGNORECASE), "Bundle"),
)

PRODUCT_MAPPING_PREFIX = "product_"


def normalize_product_name(product_name: str, config: TransformConfig) -> str:
    """
    Normalize a product name.

    Custom mappings ("product_<name>") win outright; otherwise catalog
    keywords are normalized and each word is capitalized.
    """
    product_name = product_name.strip()
    if not product_name:
        return ""

    mapped = config.lookup_mapping(PRODUCT_MAPPING_PREFIX + product_name)
    if mapped is not None:
        return mapped

    for pattern, replacement in PRODUCT_KEYWORDS:
        product_name = pattern.sub(replacement, product_name)

    return capitalize_words(product_name)
