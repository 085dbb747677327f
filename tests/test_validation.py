"""Tests for normalization, record validation and the parse pipeline."""

from __future__ import annotations

from printfleet.core import normalize, parse_file, validate_record
from printfleet.models import FileFormat, ImportableRecord, ImportIssue, IssueKind

VALID_FIELDS = {
    "name": "Workshop",
    "model": "X1C",
    "ip": "192.168.1.20",
    "accessCode": "12345678",
    "serial": "01S00A123",
}


def test_normalize_resolves_aliases_in_order():
    errors: list[ImportIssue] = []
    record = normalize(
        {
            "Name": "Upper",
            "printer_name": "ignored",
            "printerModel": "P1S",
            "address": "10.0.0.9",
            "access_code": "abcd",
            "serial": "",
            "serialNumber": "SN-42",
            "location": "shelf",
        },
        line=7,
        errors=errors,
    )

    assert errors == []
    assert record == ImportableRecord(
        name="Upper", model="P1S", ip="10.0.0.9", access_code="abcd", serial="SN-42"
    )


def test_normalize_missing_fields_default_to_empty():
    errors: list[ImportIssue] = []
    record = normalize({"name": "Only"}, line=1, errors=errors)

    assert record is not None
    assert record.serial == ""
    assert record.access_code == ""


def test_normalize_non_string_value_drops_record():
    errors: list[ImportIssue] = []
    record = normalize({"name": "A", "serial": 1234}, line=3, errors=errors)

    assert record is None
    assert len(errors) == 1
    assert errors[0].line == 3
    assert "Failed to normalize record" in errors[0].message


def test_normalize_non_mapping():
    errors: list[ImportIssue] = []
    assert normalize(["not", "a", "record"], line=2, errors=errors) is None
    assert errors[0].line == 2


def test_validate_missing_ip():
    record = ImportableRecord.model_validate({**VALID_FIELDS, "ip": "  "})
    result = validate_record(record, line=4)

    assert [(e.field, e.line) for e in result.errors] == [("ip", 4)]
    assert result.errors[0].message == "IP address is required"
    assert result.errors[0].kind is IssueKind.VALIDATION


def test_validate_malformed_ip():
    record = ImportableRecord.model_validate({**VALID_FIELDS, "ip": "999.1.1.1"})
    result = validate_record(record, line=1)

    assert len(result.errors) == 1
    assert result.errors[0].field == "ip"
    assert result.errors[0].message == "Invalid IP address format"


def test_validate_short_serial_is_warning_only():
    record = ImportableRecord.model_validate({**VALID_FIELDS, "serial": "ab"})
    result = validate_record(record, line=1)

    assert result.errors == []
    assert len(result.warnings) == 1
    assert result.warnings[0].field == "serial"
    assert result.warnings[0].kind is IssueKind.WARNING


def test_validate_reports_every_missing_field():
    result = validate_record(ImportableRecord(), line=9)

    assert [e.field for e in result.errors] == [
        "name",
        "model",
        "ip",
        "accessCode",
        "serial",
    ]


def test_validate_returns_trimmed_record():
    record = ImportableRecord.model_validate(
        {key: f"  {value} " for key, value in VALID_FIELDS.items()}
    )
    result = validate_record(record, line=1)

    assert result.errors == []
    assert result.record == ImportableRecord.model_validate(VALID_FIELDS)


def test_parse_file_drops_invalid_records_and_keeps_order():
    content = "\n".join(
        [
            "name,model,ip,accessCode,serial",
            "A,X1C,192.168.1.10,111,SER001",
            "B,X1C,300.1.1.1,222,SER002",
            "C,P1S,192.168.1.12,333,S3",
        ]
    )
    result = parse_file(content, FileFormat.CSV)

    assert not result.valid
    assert result.total_records == 3
    assert [r.serial for r in result.records] == ["SER001", "S3"]
    assert [(e.line, e.field) for e in result.errors] == [(3, "ip")]
    assert [(w.line, w.field) for w in result.warnings] == [(4, "serial")]


def test_parse_file_counts_rejected_rows():
    content = "name,model,ip,accessCode,serial\nA,X1C\nB,X1C,10.0.0.2,1,SER2\n"
    result = parse_file(content, FileFormat.CSV)

    assert result.total_records == 2
    assert len(result.records) == 1


def test_parse_file_handles_windows_line_endings():
    content = "\r\n".join(
        ["name: A", "model: X1C", "ip: 10.0.0.1", "accessCode: 1", "serial: SER1", ""]
    )
    result = parse_file(content, FileFormat.TXT)

    assert result.valid
    assert result.records[0].serial == "SER1"
