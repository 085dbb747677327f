from __future__ import annotations

from printfleet.exceptions import RegistryError
from printfleet.models import ImportableRecord

from .database import Database


class DatabaseRegistry:
    """Registry backed by the printers file of a ``Database``."""

    def __init__(self, db: Database) -> None:
        self._db = db

    async def list_existing(self) -> list[ImportableRecord]:
        try:
            registry = self._db.load_printers()
        except (OSError, ValueError) as exc:
            raise RegistryError(str(exc)) from exc
        return [printer for _, printer in sorted(registry.printers.items())]

    async def add(self, record: ImportableRecord) -> None:
        try:
            self._db.add_printer(record)
        except (OSError, ValueError) as exc:
            raise RegistryError(
                f"could not store printer {record.serial}: {exc}"
            ) from exc
