from __future__ import annotations

import logging

from printfleet.models import (
    FileFormat,
    ImportableRecord,
    ImportIssue,
    ImportValidationResult,
)

from .normalizer import normalize
from .parsers import PARSERS
from .validator import validate_record

logger = logging.getLogger(__name__)


def parse_file(content: str, fmt: FileFormat) -> ImportValidationResult:
    """Parse, normalize and validate every record of ``content``.

    Records failing validation are left out of ``records``; their problems are
    reported in ``errors`` in input order.
    """
    errors: list[ImportIssue] = []
    warnings: list[ImportIssue] = []
    records: list[ImportableRecord] = []
    normalized: list[ImportableRecord] = []

    content = content.replace("\r\n", "\n")
    raw_records = PARSERS[FileFormat(fmt)](content, errors)
    # Rows rejected by the parser still count as candidates.
    total = len(raw_records) + sum(1 for issue in errors if issue.line is not None)

    for raw in raw_records:
        record = normalize(raw.fields, raw.line, errors)
        if record is None:
            continue
        checked = validate_record(record, raw.line)
        errors.extend(checked.errors)
        warnings.extend(checked.warnings)
        normalized.append(checked.record)
        if not checked.errors:
            records.append(checked.record)

    logger.debug(
        "Parsed %s: %d candidate(s), %d valid, %d error(s), %d warning(s)",
        fmt,
        total,
        len(records),
        len(errors),
        len(warnings),
    )
    return ImportValidationResult(
        errors=errors,
        warnings=warnings,
        records=records,
        normalized=normalized,
        total_records=total,
    )
