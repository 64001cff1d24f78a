"""Tests for the CSV exporter."""

import csv

import pytest

from progression.exporters.csv_exporter import CsvExporter
from progression.models.rows import MergedRow


ROWS = [
    MergedRow(
        criterion="Be kind",
        role="Engineer Backend, Engineer Web",
        topic="Communication 1",
        examples="; Pair review",
    ),
    MergedRow(
        criterion='Says "no", politely',
        role="Engineer Data",
        topic="Communication 2",
        examples="",
    ),
]


class TestCsvExporter:
    """Tests for CSV rendering and writing."""

    def test_render_quotes_every_field(self, tmp_path):
        text = CsvExporter(tmp_path / "out.csv").render(ROWS)
        lines = text.splitlines()

        assert lines[0] == '"criterion","role","topic","examples"'
        assert lines[1] == '"Be kind","Engineer Backend, Engineer Web","Communication 1","; Pair review"'
        assert lines[2] == '"Says ""no"", politely","Engineer Data","Communication 2",""'

    def test_render_header_only_for_no_rows(self, tmp_path):
        text = CsvExporter(tmp_path / "out.csv").render([])
        assert text == '"criterion","role","topic","examples"\r\n'

    def test_write_prefixes_byte_order_mark(self, tmp_path):
        path = CsvExporter(tmp_path / "out.csv").write(ROWS)

        raw = path.read_bytes()
        assert raw.startswith(b"\xef\xbb\xbf")
        assert raw[3:].decode("utf-8") == CsvExporter(path).render(ROWS)

    def test_written_file_round_trips_through_csv_reader(self, tmp_path):
        path = CsvExporter(tmp_path / "out.csv").write(ROWS)

        with open(path, newline="", encoding="utf-8-sig") as f:
            records = list(csv.DictReader(f))

        assert [r["criterion"] for r in records] == ["Be kind", 'Says "no", politely']
        assert records[0]["role"] == "Engineer Backend, Engineer Web"

    def test_write_overwrites_existing_file(self, tmp_path):
        path = tmp_path / "out.csv"
        path.write_text("stale content that is longer than the new export" * 10)

        CsvExporter(path).write(ROWS[:1])

        with open(path, newline="", encoding="utf-8-sig") as f:
            records = list(csv.DictReader(f))
        assert len(records) == 1

    def test_write_creates_parent_directories(self, tmp_path):
        path = CsvExporter(tmp_path / "nested" / "dir" / "out.csv").write(ROWS)
        assert path.exists()

    def test_unwritable_destination_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(OSError):
            CsvExporter(blocker / "out.csv").write(ROWS)
