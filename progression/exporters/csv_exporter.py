"""
CSV exporter for merged progression rows.

Writes every field quoted, with a header row and a UTF-8 byte-order mark
so spreadsheet tools pick up the encoding.
"""

import csv
import logging
from io import StringIO
from pathlib import Path
from typing import Iterable, List

from progression.models.rows import MergedRow

logger = logging.getLogger(__name__)

CSV_ENCODING = "utf-8-sig"


class CsvExporter:
    """Serializes MergedRows to a single CSV file."""

    def __init__(self, output_path: Path):
        self.output_path = Path(output_path)
        self.headers: List[str] = list(MergedRow.CSV_COLUMNS)

    def _write_rows(self, f, rows: Iterable[MergedRow]) -> None:
        writer = csv.DictWriter(
            f,
            fieldnames=self.headers,
            delimiter=",",
            quotechar='"',
            quoting=csv.QUOTE_ALL,
        )
        writer.writeheader()

        for row in rows:
            data = row.model_dump()
            writer.writerow({h: data.get(h, "") for h in self.headers})

    def render(self, rows: Iterable[MergedRow]) -> str:
        """
        Render rows as CSV text (without the byte-order mark).

        Args:
            rows: Rows to render

        Returns:
            CSV content including the header row
        """
        output = StringIO()
        self._write_rows(output, rows)
        return output.getvalue()

    def write(self, rows: Iterable[MergedRow]) -> Path:
        """
        Write rows to the output file, replacing any existing file.

        Args:
            rows: Rows to export

        Returns:
            Path of the written file

        Raises:
            OSError: If the file cannot be written
        """
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.output_path, "w", newline="", encoding=CSV_ENCODING) as f:
            self._write_rows(f, rows)

        logger.info(f"Wrote {self.output_path}")
        return self.output_path
