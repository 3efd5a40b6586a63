"""
TransformConfig model: the read-only settings shared by every pipeline stage.
"""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DATE_FORMATS = [
    "%Y-%m-%dT%H:%M:%SZ",   # RFC3339, UTC designator
    "%Y-%m-%d",
    "%Y-%m-%d %H:%M:%S",
    "%m/%d/%Y",
    "%d-%m-%Y",
    "%Y/%m/%d",
    "%b %d, %Y",            # Mar 15, 2024
    "%d %b %Y",             # 15 Mar 2024
    "%Y-%m-%dT%H:%M:%S%z",  # RFC3339 with offset
]

DEFAULT_CURRENCY_FORMATS = ["USD", "EUR", "GBP", "JPY", "INR", "AUD", "CAD"]

DEFAULT_NULL_VALUES = [
    "", "NULL", "null", "N/A", "n/a", "NA", "na", "-",
    "None", "none", "undefined", "UNDEFINED",
]

DEFAULT_CUSTOM_MAPPINGS = {
    # Countries
    "usa": "United States",
    "us": "United States",
    "america": "United States",
    "uk": "United Kingdom",
    "britain": "United Kingdom",
    "england": "United Kingdom",
    # Regions
    "region_n": "North",
    "region_s": "South",
    "region_e": "East",
    "region_w": "West",
    "region_ne": "Northeast",
    "region_nw": "Northwest",
    "region_se": "Southeast",
    "region_sw": "Southwest",
}

DEFAULT_DATA_TYPES = {
    "transaction_id": "string",
    "country": "string",
    "region": "string",
    "product_name": "string",
    "price": "float",
    "quantity": "integer",
    "transaction_date": "datetime",
}

DEFAULT_PRICE_MULTIPLIER = 100.0


class TransformConfig(BaseModel):
    """
    Settings for one or more processing runs.

    Instances are frozen: stages read them but never mutate them, so a single
    config may be shared by concurrent runs.

    Attributes:
        enable_validation: Run the validator stages
        enable_optimization: Run the dataset-level optimization stages
        date_formats: strptime patterns tried in order
        currency_formats: Recognized ISO currency codes (stripped from prices)
        null_values: Raw strings treated as missing
        default_country: Substituted when a record has no country
        default_region: Substituted when a record has no region
        price_multiplier: Raw decimal amount x multiplier = minor units
        custom_mappings: Case-folded token -> canonical display string
        data_types: Declared type per canonical field (informational)
        transformations: Transformation stage names to register (None = all)
        validators: Validator stage names to register (None = all)
        optimizations: Optimization stage names to register (None = all)
    """

    model_config = ConfigDict(frozen=True)

    enable_validation: bool = True
    enable_optimization: bool = True
    date_formats: list[str] = Field(default_factory=lambda: list(DEFAULT_DATE_FORMATS))
    currency_formats: list[str] = Field(default_factory=lambda: list(DEFAULT_CURRENCY_FORMATS))
    null_values: list[str] = Field(default_factory=lambda: list(DEFAULT_NULL_VALUES))
    default_country: str = ""
    default_region: str = ""
    price_multiplier: float = DEFAULT_PRICE_MULTIPLIER
    custom_mappings: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_CUSTOM_MAPPINGS))
    data_types: dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_DATA_TYPES))
    transformations: list[str] | None = None
    validators: list[str] | None = None
    optimizations: list[str] | None = None

    def lookup_mapping(self, key: str) -> str | None:
        """Case-insensitive lookup in custom_mappings."""
        return self.custom_mappings.get(key.strip().casefold())


def default_configuration(**overrides) -> TransformConfig:
    """
    Build a fresh default configuration.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        New TransformConfig instance (never shared)
    """
    return TransformConfig(**overrides)
