"""Printer record models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class FileFormat(StrEnum):
    """File formats understood on import and export."""

    JSON = "json"
    CSV = "csv"
    YAML = "yaml"
    TXT = "txt"


class ImportableRecord(BaseModel):
    """One printer configuration in canonical shape."""

    model_config = {"frozen": True, "populate_by_name": True}

    name: str = ""
    model: str = ""
    ip: str = ""
    access_code: str = Field(default="", alias="accessCode")
    serial: str = ""


class PrinterRecord(ImportableRecord):
    """Printer as stored in the registry."""

    last_update: datetime | None = Field(default=None, alias="lastUpdate")


class PrinterRegistry(BaseModel):
    """Registered printers keyed by serial."""

    model_config = {"extra": "forbid"}

    printers: dict[str, PrinterRecord] = Field(default_factory=dict)


@dataclass(frozen=True)
class RawRecord:
    """Loosely-typed field map produced by a parser, tagged with its source line."""

    line: int
    fields: Any  # normally dict[str, Any]; JSON elements arrive unchecked
