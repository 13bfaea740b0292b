"""Export and report formatting."""

from .exporter import ExportFormat, export_test_cases, resolve_format
from .formatter import format_result

__all__ = [
    "ExportFormat",
    "export_test_cases",
    "format_result",
    "resolve_format",
]
