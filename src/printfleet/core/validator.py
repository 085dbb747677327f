from __future__ import annotations

import re
from dataclasses import dataclass

from printfleet.models import ImportableRecord, ImportIssue, IssueKind

IPV4_PATTERN = re.compile(
    r"^(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
    r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)$"
)

MIN_SERIAL_LENGTH = 3

REQUIRED_FIELDS = (
    ("name", "name", "Printer name is required"),
    ("model", "model", "Printer model is required"),
    ("ip", "ip", "IP address is required"),
    ("access_code", "accessCode", "Access code is required"),
    ("serial", "serial", "Serial number is required"),
)


@dataclass
class RecordValidation:
    errors: list[ImportIssue]
    warnings: list[ImportIssue]
    record: ImportableRecord


def is_valid_ip(value: str) -> bool:
    return IPV4_PATTERN.match(value) is not None


def validate_record(record: ImportableRecord, line: int) -> RecordValidation:
    """Check one record; the returned record always has every field trimmed."""
    cleaned = ImportableRecord(
        name=record.name.strip(),
        model=record.model.strip(),
        ip=record.ip.strip(),
        access_code=record.access_code.strip(),
        serial=record.serial.strip(),
    )

    errors: list[ImportIssue] = []
    warnings: list[ImportIssue] = []

    for attr, field, message in REQUIRED_FIELDS:
        if not getattr(cleaned, attr):
            errors.append(
                ImportIssue(
                    line=line, field=field, message=message, kind=IssueKind.VALIDATION
                )
            )

    if cleaned.ip and not is_valid_ip(cleaned.ip):
        errors.append(
            ImportIssue(
                line=line,
                field="ip",
                message="Invalid IP address format",
                kind=IssueKind.VALIDATION,
            )
        )

    if cleaned.serial and len(cleaned.serial) < MIN_SERIAL_LENGTH:
        warnings.append(
            ImportIssue(
                line=line,
                field="serial",
                message="Serial number seems too short",
                kind=IssueKind.WARNING,
            )
        )

    return RecordValidation(errors=errors, warnings=warnings, record=cleaned)
