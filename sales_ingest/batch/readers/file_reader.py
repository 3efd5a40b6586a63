"""
Generic reader dispatching raw input to the reader for its format.
"""

from sales_ingest.core.errors import StructuralError
from sales_ingest.core.models import DataFormat

from .delimited_reader import DelimitedReader
from .raw_entry import RawEntry
from .structured_reader import StructuredReader


class FileReader:
    """
    Generic reader supporting every input format.
    """

    def __init__(self):
        self.readers = {
            DataFormat.CSV: DelimitedReader(","),
            DataFormat.TSV: DelimitedReader("\t"),
            DataFormat.JSON: StructuredReader(DataFormat.JSON),
            DataFormat.YAML: StructuredReader(DataFormat.YAML),
        }

    def read(self, data: bytes | str, file_format: DataFormat) -> list[RawEntry]:
        """
        Decode input and read it into raw entries.

        Args:
            data: UTF-8 bytes (a leading BOM is dropped) or already decoded text
            file_format: Format to parse the input as

        Returns:
            Raw entries in input order

        Raises:
            StructuralError: If the input is undecodable, malformed or XML
        """
        reader = self.readers.get(file_format)
        if reader is None:
            raise StructuralError(f"{file_format.value} input is not supported")

        if isinstance(data, bytes):
            try:
                text = data.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise StructuralError(f"input is not valid UTF-8: {e}") from e
        else:
            text = data.lstrip("\ufeff")

        return reader.read(text)
