"""
Utility helpers used by the export pipeline.

This subpackage exposes the error types, console/file reporting, export
loading and filename helpers.
"""

from .errors import ConfigurationError, DataResolutionError, ExportError, ExportStructureError
from .fetch import is_absolute_url, read_export, with_retries
from .filenames import filename_from_url
from .reporting import CONSOLE, EVENTS, Reporter

__all__ = [
    "CONSOLE",
    "ConfigurationError",
    "DataResolutionError",
    "ExportError",
    "ExportStructureError",
    "EVENTS",
    "Reporter",
    "filename_from_url",
    "is_absolute_url",
    "read_export",
    "with_retries",
]
