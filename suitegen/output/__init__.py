"""Rendering and export of generation results."""

from .formatter import export_filename, format_export, format_generation_result

__all__ = [
    "format_generation_result",
    "format_export",
    "export_filename",
]
