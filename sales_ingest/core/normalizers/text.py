"""
String normalizers: null-token handling, cleaning and naive title-casing.
"""

import re
import unicodedata
from collections.abc import Iterable

_WHITESPACE_RUN = re.compile(r"\s+")

# Unicode major categories kept by clean_string: letters, numbers,
# punctuation and separators.
_KEPT_CATEGORIES = frozenset("LNPZ")


def normalize_null(value: str, null_values: Iterable[str]) -> str:
    """
    Trim a raw value and blank it out when it is a configured null token.

    Args:
        value: Raw string value
        null_values: Strings treated as "no value"

    Returns:
        Trimmed value, or "" when the value is a null token
    """
    value = value.strip()
    if value in null_values:
        return ""
    return value


def clean_string(value: str) -> str:
    """
    Clean free text.

    Whitespace runs collapse to a single space, characters outside the
    letter/number/punctuation/separator classes are dropped, and the result
    is trimmed. Applying it twice gives the same result as applying it once.
    """
    value = _WHITESPACE_RUN.sub(" ", value)
    value = "".join(ch for ch in value if unicodedata.category(ch)[0] in _KEPT_CATEGORIES)
    return _WHITESPACE_RUN.sub(" ", value).strip()


def _upper(ch: str) -> str:
    """Upper-case one character, leaving it alone when the mapping expands (ß -> SS)."""
    mapped = ch.upper()
    return mapped if len(mapped) == 1 else ch


def _lower(ch: str) -> str:
    mapped = ch.lower()
    return mapped if len(mapped) == 1 else ch


def title_case(value: str) -> str:
    """
    Naive title-casing.

    Lower-cases the input and upper-cases every letter that follows a
    character other than a letter, digit or underscore ("guinea-bissau" ->
    "Guinea-Bissau", "o'neil" -> "O'Neil"). Case mapping is one character to
    one character, so "straße" keeps its ß. Not locale aware.
    """
    chars = []
    previous_is_word = False
    for ch in map(_lower, value):
        if ch.isalpha() and not previous_is_word:
            chars.append(_upper(ch))
        else:
            chars.append(ch)
        previous_is_word = ch.isalnum() or ch == "_"
    return "".join(chars)


def capitalize_words(value: str) -> str:
    """Upper-case the first letter of each whitespace-separated word."""
    return " ".join(
        "".join([_upper(word[0]), *map(_lower, word[1:])]) for word in value.split()
    )
