"""
Progression export runner.

Extracts every configured framework document concurrently, flattens and
merges the rows, and writes the combined CSV.
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from progression.core.config import ProgressionSettings, get_settings
from progression.core.exceptions import ProgressionError
from progression.exporters.csv_exporter import CsvExporter
from progression.extractors.framework_extractor import FrameworkExtractor
from progression.models.rows import MergedRow, ProgressionRow
from progression.transformers.row_merger import merge_rows
from progression.transformers.row_projector import RowProjector

logger = logging.getLogger(__name__)


@dataclass
class ExportSummary:
    """Outcome of a completed export run."""

    documents: int
    rows: int
    merged_rows: int
    output_path: Path


class ProgressionExport:
    """
    Runs the export for a fixed list of framework documents.

    Documents are extracted concurrently but combined in configured order,
    so the output never depends on which read finishes first. The first
    failure aborts the run before anything is written.
    """

    def __init__(self, settings: ProgressionSettings):
        self.settings = settings
        self.extractor = FrameworkExtractor(delimiter=settings.front_matter_delimiter)
        self.projector = RowProjector(
            brand_from=settings.brand_from,
            brand_to=settings.brand_to,
        )

    async def _process_document(self, file_path: Path) -> List[ProgressionRow]:
        """Extract and project a single document."""
        extracted = await self.extractor.extract(file_path)
        rows = self.projector.project(extracted.framework)
        logger.debug(f"{file_path}: {len(rows)} rows")
        return rows

    async def collect_rows(self) -> List[ProgressionRow]:
        """
        Extract and project every configured document.

        Returns:
            All rows, concatenated in configured document order

        Raises:
            FileNotFoundError: If a document is missing
            FrameworkParseError: If a document's front matter is invalid
        """
        paths = self.settings.get_framework_paths()
        results = await asyncio.gather(*(self._process_document(p) for p in paths))

        rows: List[ProgressionRow] = []
        for document_rows in results:
            rows.extend(document_rows)
        return rows

    async def run(self) -> ExportSummary:
        """
        Run the full export.

        Prints the merged row count before writing the CSV.

        Returns:
            ExportSummary describing what was written
        """
        paths = self.settings.get_framework_paths()
        logger.info(f"Exporting {len(paths)} framework documents")

        rows = await self.collect_rows()
        merged: List[MergedRow] = merge_rows(rows)

        print(len(merged))

        exporter = CsvExporter(self.settings.get_output_path())
        output_path = exporter.write(merged)

        return ExportSummary(
            documents=len(paths),
            rows=len(rows),
            merged_rows=len(merged),
            output_path=output_path,
        )


def main(settings: Optional[ProgressionSettings] = None) -> int:
    """
    Console entry point.

    Returns:
        Process exit code: 0 on success, 1 on any failure
    """
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        summary = asyncio.run(ProgressionExport(settings).run())
    except (ProgressionError, OSError) as e:
        logger.error(f"Export failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(
        f"Exported {summary.merged_rows} rows from {summary.documents} documents "
        f"to {summary.output_path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
