"""Utility modules for yelplex."""

from .data_prep import export_to_json, export_tables, load_export, prepare_export, write_tables

__all__ = [
    "export_to_json",
    "export_tables",
    "load_export",
    "prepare_export",
    "write_tables",
]
