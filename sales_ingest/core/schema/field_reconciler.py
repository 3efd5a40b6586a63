"""
Field reconciliation: heterogeneous source field names -> canonical fields.

The same synonym table serves delimited headers (mapped once per file) and
JSON/YAML objects (mapped per record, since keys can differ between entries).
"""

import json
from collections.abc import Mapping, Sequence
from datetime import date, datetime

from sales_ingest.core.models import RawMapping, RawValue

# Canonical field -> accepted source names. First match in list order wins.
FIELD_SYNONYMS: dict[str, tuple[str, ...]] = {
    "transaction_id": ("transaction_id", "id", "trans_id", "txn_id", "transaction", "order_id"),
    "country": ("country", "nation", "country_name", "country_code"),
    "region": ("region", "state", "province", "area", "zone", "territory"),
    "product_name": ("product_name", "product", "item", "item_name", "product_title"),
    "price": ("price", "unit_price", "cost", "amount", "unit_cost", "price_per_unit"),
    "quantity": ("quantity", "qty", "amount", "count", "units", "number"),
    "transaction_date": ("transaction_date", "date", "timestamp", "time", "tx_date", "order_date"),
}

NESTED_KEY_SEPARATOR = "_"


def normalize_key(key: object) -> str:
    return str(key).strip().lower()


def match_field(available: Mapping[str, object] | set[str], field_name: str) -> str | None:
    """Return the first synonym of field_name present in available, if any."""
    for synonym in FIELD_SYNONYMS[field_name]:
        if synonym in available:
            return synonym
    return None


def build_column_map(header: Sequence[str]) -> dict[str, int]:
    """
    Map a delimited header row onto column indexes.

    Every header is kept under its trimmed, lower-cased literal name; each
    canonical field then points at the column of its first matching synonym.
    Duplicate literal headers keep their first position.

    Args:
        header: Header cells in file order

    Returns:
        Dict of canonical and literal names -> column index
    """
    column_map: dict[str, int] = {}
    for index, cell in enumerate(header):
        column_map.setdefault(normalize_key(cell), index)

    literal = dict(column_map)
    for field_name in FIELD_SYNONYMS:
        synonym = match_field(literal, field_name)
        if synonym is not None:
            column_map[field_name] = literal[synonym]

    return column_map


def extract_row(row: Sequence[str], column_map: Mapping[str, int]) -> RawMapping:
    """
    Pull canonical values out of a delimited row.

    Columns missing from a short row are simply absent from the result.
    """
    values: RawMapping = {}
    for field_name in FIELD_SYNONYMS:
        index = column_map.get(field_name)
        if index is not None and index < len(row):
            values[field_name] = row[index]
    return values


def flatten_mapping(data: Mapping, prefix: str = "") -> RawMapping:
    """
    Recursively flatten nested maps into one string-keyed level.

    Nested keys are joined with "_" ({"product": {"name": ...}} becomes
    "product_name"). Keys are lower-cased; the first occurrence of a key wins.
    """
    flat: RawMapping = {}
    for key, value in data.items():
        name = normalize_key(key)
        if prefix:
            name = f"{prefix}{NESTED_KEY_SEPARATOR}{name}"
        if isinstance(value, Mapping):
            for nested_key, nested_value in flatten_mapping(value, name).items():
                flat.setdefault(nested_key, nested_value)
        else:
            flat.setdefault(name, value)
    return flat


def reconcile_mapping(data: Mapping) -> RawMapping:
    """
    Map one JSON/YAML object onto canonical fields.

    Args:
        data: Decoded object, possibly nested

    Returns:
        Canonical field -> raw value, for fields that were found
    """
    flat = flatten_mapping(data)
    values: RawMapping = {}
    for field_name in FIELD_SYNONYMS:
        synonym = match_field(flat, field_name)
        if synonym is not None:
            values[field_name] = flat[synonym]
    return values


def stringify(value: RawValue) -> str:
    """
    Render a loosely-typed value as text.

    This is the fallback used wherever a string is expected but the decoder
    produced something else.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (list, dict)):
        return json.dumps(value, default=str, separators=(",", ":"))
    return str(value)
