"""Registry collaborators used by the import pipeline."""

from __future__ import annotations

from typing import Protocol

from printfleet.models import ImportableRecord


class Registry(Protocol):
    """Store of known printers.

    ``add`` raises on any failure (duplicate, storage, connectivity); the
    importer turns that into a per-record issue.
    """

    async def list_existing(self) -> list[ImportableRecord]: ...

    async def add(self, record: ImportableRecord) -> None: ...


class InMemoryRegistry:
    """List-backed registry; does not enforce serial uniqueness."""

    def __init__(self, records: list[ImportableRecord] | None = None) -> None:
        self._records = list(records or [])

    @property
    def records(self) -> list[ImportableRecord]:
        return list(self._records)

    async def list_existing(self) -> list[ImportableRecord]:
        return list(self._records)

    async def add(self, record: ImportableRecord) -> None:
        self._records.append(record)
