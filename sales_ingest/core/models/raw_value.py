"""
Loosely-typed values produced by the JSON/YAML decoders.

Decoded documents are plain Python trees; RawValue names the union the
reconciler works against. YAML additionally yields date/datetime scalars.
"""

from datetime import date, datetime
from typing import Union

RawScalar = Union[str, int, float, bool, None, date, datetime]
RawValue = Union[RawScalar, list["RawValue"], dict[str, "RawValue"]]
RawMapping = dict[str, RawValue]
