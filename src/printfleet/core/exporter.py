from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime, timezone
from typing import Any

from printfleet.models import ExportOptions, ExportResult, FileFormat

logger = logging.getLogger(__name__)

DEFAULT_ENTITY = "printers"

ExportRow = dict[str, str]


def _row(record: Any, include_timestamps: bool) -> ExportRow:
    if isinstance(record, Mapping):
        source = dict(record)
    else:
        source = record.model_dump(by_alias=True)

    row = {
        "name": source["name"],
        "model": source.get("model") or "",
        "ip": source.get("ip") or "",
        "accessCode": source.get("accessCode") or "",
        "serial": source.get("serial") or "",
    }
    if include_timestamps:
        stamp = source.get("lastUpdate") or datetime.now(timezone.utc)
        row["lastUpdate"] = stamp if isinstance(stamp, str) else stamp.isoformat()
    return row


def to_json(rows: list[ExportRow], pretty: bool = True) -> str:
    if pretty:
        return json.dumps(rows, indent=2)
    return json.dumps(rows, separators=(",", ":"))


def to_csv(rows: list[ExportRow]) -> str:
    if not rows:
        return ""
    headers = list(rows[0])
    lines = [",".join(headers)]
    lines.extend(
        ",".join(f'"{row.get(header, "")}"' for header in headers) for row in rows
    )
    return "\n".join(lines)


def to_txt(rows: list[ExportRow]) -> str:
    return "\n\n".join(
        "\n".join(f"{key}: {value}" for key, value in row.items()) for row in rows
    )


def to_yaml(rows: list[ExportRow]) -> str:
    """Same paragraphs as TXT, each one a list item led by its name."""
    blocks = []
    for row in rows:
        first, *rest = (f"{key}: {value}" for key, value in row.items())
        blocks.append("\n".join([f"- {first}", *(f"  {line}" for line in rest)]))
    return "\n\n".join(blocks)


SERIALIZERS: dict[FileFormat, Callable[[list[ExportRow]], str]] = {
    FileFormat.CSV: to_csv,
    FileFormat.YAML: to_yaml,
    FileFormat.TXT: to_txt,
}


def export_filename(
    fmt: FileFormat, entity: str = DEFAULT_ENTITY, today: date | None = None
) -> str:
    day = today or datetime.now(timezone.utc).date()
    return f"{entity}-{day.isoformat()}.{fmt.value}"


def export_records(
    records: Sequence[Any],
    options: ExportOptions,
    *,
    entity: str = DEFAULT_ENTITY,
    today: date | None = None,
) -> ExportResult:
    """Serialize ``records`` into one of the supported file formats.

    Records may be models or plain mappings. Failures are returned in
    ``ExportResult.error`` instead of being raised.
    """
    try:
        fmt = FileFormat(options.format)
        rows = [_row(record, options.include_timestamps) for record in records]
        if fmt is FileFormat.JSON:
            data = to_json(rows, pretty=options.pretty_format)
        else:
            data = SERIALIZERS[fmt](rows)
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        logger.warning("Export to %s failed: %s", options.format, exc)
        return ExportResult(success=False, error=str(exc))

    filename = export_filename(fmt, entity=entity, today=today)
    logger.debug("Exported %d record(s) as %s", len(rows), filename)
    return ExportResult(success=True, filename=filename, data=data)
