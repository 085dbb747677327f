"""Data models for printfleet."""

from printfleet.models.options import DuplicatePolicy, ExportOptions, ImportOptions
from printfleet.models.records import (
    FileFormat,
    ImportableRecord,
    PrinterRecord,
    PrinterRegistry,
    RawRecord,
)
from printfleet.models.results import (
    ExportResult,
    ImportIssue,
    ImportPreview,
    ImportResult,
    ImportValidationResult,
    IssueKind,
)

__all__ = [
    "DuplicatePolicy",
    "ExportOptions",
    "ExportResult",
    "FileFormat",
    "ImportIssue",
    "ImportOptions",
    "ImportPreview",
    "ImportResult",
    "ImportValidationResult",
    "ImportableRecord",
    "IssueKind",
    "PrinterRecord",
    "PrinterRegistry",
    "RawRecord",
]
