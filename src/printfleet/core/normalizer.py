from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from printfleet.models import ImportableRecord, ImportIssue, IssueKind

from .aliases import FIELD_ALIASES


def _first_match(fields: Mapping[str, Any], aliases: tuple[str, ...]) -> str:
    for alias in aliases:
        value = fields.get(alias)
        if value is None:
            continue
        if not isinstance(value, str):
            raise TypeError(
                f"field '{alias}' must be a string, got {type(value).__name__}"
            )
        if value:
            return value
    return ""


def normalize(
    raw: Any, line: int, errors: list[ImportIssue]
) -> ImportableRecord | None:
    """Resolve alias spellings of the canonical fields into an ``ImportableRecord``.

    Returns None, after recording an issue, when the input cannot be read as a
    record at all.
    """
    try:
        if not isinstance(raw, Mapping):
            raise TypeError(f"expected an object, got {type(raw).__name__}")
        values = {
            canonical: _first_match(raw, aliases)
            for canonical, aliases in FIELD_ALIASES.items()
        }
    except TypeError as exc:
        errors.append(
            ImportIssue(
                line=line,
                message=f"Failed to normalize record: {exc}",
                kind=IssueKind.ROW,
            )
        )
        return None

    return ImportableRecord.model_validate(values)
