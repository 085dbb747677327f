"""printfleet - printer registry with multi-format import/export."""

from __future__ import annotations

from importlib.metadata import version

from .config import DatabaseConfig, Settings, get_settings
from .models import (
    DuplicatePolicy,
    ExportOptions,
    ExportResult,
    FileFormat,
    ImportableRecord,
    ImportIssue,
    ImportOptions,
    ImportPreview,
    ImportResult,
    ImportValidationResult,
    PrinterRecord,
)
from .registry import InMemoryRegistry, Registry
from .services import ImportService
from .storage import Database, DatabaseRegistry

__all__ = [
    "Database",
    "DatabaseConfig",
    "DatabaseRegistry",
    "DuplicatePolicy",
    "ExportOptions",
    "ExportResult",
    "FileFormat",
    "ImportIssue",
    "ImportOptions",
    "ImportPreview",
    "ImportResult",
    "ImportService",
    "ImportValidationResult",
    "ImportableRecord",
    "InMemoryRegistry",
    "PrinterRecord",
    "Registry",
    "Settings",
    "__version__",
    "get_settings",
]

__version__ = version("printfleet")
