from __future__ import annotations

from .detector import detect_format
from .exporter import export_records
from .importer import import_records
from .normalizer import normalize
from .pipeline import parse_file
from .preview import create_preview
from .validator import validate_record

__all__ = [
    "create_preview",
    "detect_format",
    "export_records",
    "import_records",
    "normalize",
    "parse_file",
    "validate_record",
]
