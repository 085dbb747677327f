from __future__ import annotations

from collections.abc import Iterable

from printfleet.models import ImportableRecord, ImportPreview

from .detector import detect_format
from .pipeline import parse_file

SAMPLE_SIZE = 5


def find_duplicate_serials(records: Iterable[ImportableRecord]) -> list[str]:
    """Serials occurring more than once, in order of their first repeat."""
    seen: set[str] = set()
    repeats: dict[str, None] = {}
    for record in records:
        if not record.serial:
            continue
        if record.serial in seen:
            repeats.setdefault(record.serial, None)
        seen.add(record.serial)
    return list(repeats)


def find_existing_serials(
    records: Iterable[ImportableRecord], existing: Iterable[ImportableRecord]
) -> list[str]:
    known = {record.serial for record in existing}
    matches = dict.fromkeys(
        r.serial for r in records if r.serial and r.serial in known
    )
    return list(matches)


def create_preview(
    content: str, filename: str, existing_records: Iterable[ImportableRecord]
) -> ImportPreview:
    """Summarize what importing ``content`` would do, without touching anything.

    Serial overlap is reported for every normalized record, so rows that still
    fail validation show up too.
    """
    fmt = detect_format(filename, content)
    validation = parse_file(content, fmt)
    records = validation.records

    return ImportPreview(
        format=fmt,
        total_records=validation.total_records,
        valid_records=len(records),
        invalid_records=validation.total_records - len(records),
        duplicate_serials=find_duplicate_serials(validation.normalized),
        existing_serials=find_existing_serials(
            validation.normalized, existing_records
        ),
        sample_data=records[:SAMPLE_SIZE],
        errors=validation.errors,
        warnings=validation.warnings,
    )
