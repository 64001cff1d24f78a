"""
Progression framework export.

This package flattens Markdown progression-framework documents (YAML front
matter describing roles, topics and per-level criteria) into a single CSV
with one row per distinct criterion.
"""

__version__ = "1.0.0"
