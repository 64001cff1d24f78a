"""Exporters for the progression export."""

from progression.exporters.csv_exporter import CsvExporter

__all__ = ["CsvExporter"]
