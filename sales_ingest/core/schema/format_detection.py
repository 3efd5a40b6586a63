"""
Format detection from filename hints and content sniffing.
"""

from pathlib import Path

from sales_ingest.core.models import DataFormat

EXTENSION_FORMATS = {
    ".csv": DataFormat.CSV,
    ".tsv": DataFormat.TSV,
    ".json": DataFormat.JSON,
    ".yaml": DataFormat.YAML,
    ".yml": DataFormat.YAML,
    ".xml": DataFormat.XML,
}

# Bytes inspected when the extension does not decide the format.
SNIFF_SIZE = 1024


def format_from_extension(filename: str | Path | None) -> DataFormat | None:
    """Return the format implied by a file extension, if it is a known one."""
    if not filename:
        return None
    return EXTENSION_FORMATS.get(Path(filename).suffix.lower())


def sniff_format(data: bytes) -> DataFormat:
    """
    Classify raw content.

    Bracket-delimited text is JSON, markup is XML, text with a colon plus a
    list marker or document separator is YAML, text with tabs is TSV, and
    anything else is CSV.
    """
    text = data.decode("utf-8", errors="replace").lstrip("\ufeff").strip()

    if (text.startswith("{") and text.endswith("}")) or (text.startswith("[") and text.endswith("]")):
        return DataFormat.JSON

    if text.startswith("<") and ">" in text:
        return DataFormat.XML

    if ":" in text and ("\n-" in text or "---" in text):
        return DataFormat.YAML

    if "\t" in text:
        return DataFormat.TSV

    return DataFormat.CSV


def detect_format(data: bytes, filename: str | Path | None = None) -> DataFormat:
    """
    Detect the format of an input buffer.

    A known filename extension wins; otherwise the content is sniffed. Never
    raises: a best guess is always returned and parse failures surface later.

    Args:
        data: Raw input bytes (the first SNIFF_SIZE bytes are enough)
        filename: Optional filename hint

    Returns:
        Detected DataFormat
    """
    by_extension = format_from_extension(filename)
    if by_extension is not None:
        return by_extension
    return sniff_format(data[:SNIFF_SIZE])
