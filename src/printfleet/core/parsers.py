"""Format parsers.

Each parser turns raw file content into ``RawRecord``s and appends any problem
it finds to ``errors`` instead of raising. The YAML and TXT parsers are line
scanners for a deliberately small subset of those formats: flat ``key: value``
records only, no nesting, anchors or multi-line scalars.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from typing import Any

from printfleet.models import FileFormat, ImportIssue, IssueKind, RawRecord

from .aliases import CANONICAL_FIELDS, resolve_header

logger = logging.getLogger(__name__)

Parser = Callable[[str, list[ImportIssue]], list[RawRecord]]

YAML_ITEM_PREFIX = "- name:"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _split_pair(line: str) -> tuple[str, str]:
    key, _, value = line.partition(":")
    return key.strip(), value.strip()


def parse_json(content: str, errors: list[ImportIssue]) -> list[RawRecord]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        errors.append(ImportIssue(message=f"Invalid JSON: {exc}"))
        return []

    if isinstance(data, list):
        items: list[Any] = data
    elif isinstance(data, dict) and isinstance(data.get("printers"), list):
        items = data["printers"]
    else:
        errors.append(
            ImportIssue(
                message=(
                    "JSON must contain an array of printers or an object with "
                    'a "printers" array'
                )
            )
        )
        return []

    # Non-object elements are passed through so the normalizer reports them.
    return [RawRecord(line=index, fields=item) for index, item in enumerate(items, 1)]


def _split_csv_line(line: str) -> list[str]:
    return [value.strip().replace('"', "") for value in line.split(",")]


def parse_csv(content: str, errors: list[ImportIssue]) -> list[RawRecord]:
    rows = [
        (number, line.strip())
        for number, line in enumerate(content.split("\n"), start=1)
        if line.strip()
    ]
    if not rows:
        errors.append(ImportIssue(message="CSV file is empty"))
        return []

    _, header_line = rows[0]
    header = [resolve_header(column) for column in _split_csv_line(header_line)]

    missing = [field for field in CANONICAL_FIELDS if field not in header]
    if missing:
        errors.append(
            ImportIssue(message=f"Missing required CSV columns: {', '.join(missing)}")
        )
        return []

    records: list[RawRecord] = []
    for number, line in rows[1:]:
        values = _split_csv_line(line)
        if len(values) != len(header):
            errors.append(
                ImportIssue(
                    line=number,
                    message=f"Row has {len(values)} columns, expected {len(header)}",
                    kind=IssueKind.ROW,
                )
            )
            continue
        records.append(RawRecord(line=number, fields=dict(zip(header, values))))

    logger.debug("CSV: %d data row(s), %d column(s)", len(rows) - 1, len(header))
    return records


def parse_yaml(content: str, errors: list[ImportIssue]) -> list[RawRecord]:
    records: list[RawRecord] = []
    current: dict[str, Any] | None = None
    start_line = 0

    for number, raw_line in enumerate(content.split("\n"), start=1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        if line.startswith(YAML_ITEM_PREFIX):
            if current is not None:
                records.append(RawRecord(line=start_line, fields=current))
            name = line[len(YAML_ITEM_PREFIX) :].strip()
            current = {"name": _strip_quotes(name)}
            start_line = number
        elif current is not None and ":" in line:
            key, value = _split_pair(line)
            if key and value:
                current[key] = _strip_quotes(value)

    if current is not None:
        records.append(RawRecord(line=start_line, fields=current))

    return records


def parse_txt(content: str, errors: list[ImportIssue]) -> list[RawRecord]:
    blocks = [block.strip() for block in content.split("\n\n") if block.strip()]
    records: list[RawRecord] = []

    for number, block in enumerate(blocks, start=1):
        fields: dict[str, Any] = {}
        for line in block.split("\n"):
            if ":" not in line:
                continue
            key, value = _split_pair(line)
            if key and value:
                fields[key.lower()] = value
        records.append(RawRecord(line=number, fields=fields))

    return records


PARSERS: dict[FileFormat, Parser] = {
    FileFormat.JSON: parse_json,
    FileFormat.CSV: parse_csv,
    FileFormat.YAML: parse_yaml,
    FileFormat.TXT: parse_txt,
}
