"""
Country and region standardization.
"""

from sales_ingest.core.models import TransformConfig

from .text import title_case

COUNTRY_ALIASES = {
    "usa": "United States",
    "us": "United States",
    "america": "United States",
    "united states of america": "United States",
    "uk": "United Kingdom",
    "britain": "United Kingdom",
    "great britain": "United Kingdom",
    "england": "United Kingdom",
    "uae": "United Arab Emirates",
    "south korea": "South Korea",
    "republic of korea": "South Korea",
    "north korea": "North Korea",
    "democratic people's republic of korea": "North Korea",
    "prc": "China",
    "people's republic of china": "China",
    "roc": "Taiwan",
    "republic of china": "Taiwan",
}

REGION_ALIASES = {
    "n": "North",
    "s": "South",
    "e": "East",
    "w": "West",
    "ne": "Northeast",
    "nw": "Northwest",
    "se": "Southeast",
    "sw": "Southwest",
    "central": "Central",
    "centre": "Central",
    "mid": "Central",
    "middle": "Central",
}

# custom_mappings keys for regions carry this prefix ("region_n": "North").
REGION_MAPPING_PREFIX = "region_"


def map_country(country: str, config: TransformConfig) -> str:
    """
    Standardize a country name.

    Lookup order: config custom mappings, built-in aliases, then a
    title-cased rendering of the input.
    """
    token = country.strip().casefold()
    if not token:
        return ""

    mapped = config.lookup_mapping(token)
    if mapped is not None:
        return mapped
    if token in COUNTRY_ALIASES:
        return COUNTRY_ALIASES[token]
    return title_case(country.strip())


def map_region(region: str, config: TransformConfig) -> str:
    """
    Standardize a region name.

    Lookup order: config custom mappings ("region_<token>"), built-in
    aliases, then a title-cased rendering of the input.
    """
    token = region.strip().casefold()
    if not token:
        return ""

    mapped = config.lookup_mapping(REGION_MAPPING_PREFIX + token)
    if mapped is not None:
        return mapped
    if token in REGION_ALIASES:
        return REGION_ALIASES[token]
    return title_case(region.strip())
