"""
Delimited text reader (CSV and TSV).
"""

import csv
import io

from sales_ingest.core.errors import StructuralError
from sales_ingest.core.schema import build_column_map, extract_row

from .raw_entry import RawEntry


class DelimitedReader:
    """
    Reads header-first delimited text into raw entries.

    Header names are reconciled once against the synonym table; each data
    row then yields the canonical values it carries. Blank lines are ignored.
    """

    def __init__(self, delimiter: str = ","):
        """
        Initialize delimited reader.

        Args:
            delimiter: Field delimiter ("," for CSV, "\\t" for TSV)
        """
        self.delimiter = delimiter

    def read(self, text: str) -> list[RawEntry]:
        """
        Read delimited text.

        Args:
            text: Decoded file content

        Returns:
            Raw entries in row order

        Raises:
            StructuralError: If there is no header row or the text is not
                valid delimited data
        """
        reader = csv.reader(io.StringIO(text), delimiter=self.delimiter, skipinitialspace=True)

        try:
            header = next(reader, None)
            if not header or not any(cell.strip() for cell in header):
                raise StructuralError("delimited input has no header row")

            column_map = build_column_map(header)

            entries = []
            for row in reader:
                if not row or not any(cell.strip() for cell in row):
                    continue
                entries.append(RawEntry(position=len(entries) + 1, values=extract_row(row, column_map)))
        except csv.Error as e:
            raise StructuralError(f"failed to read delimited input: {e}") from e

        return entries
