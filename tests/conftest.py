from __future__ import annotations

import pytest

from printfleet.config import get_settings
from printfleet.models import ImportableRecord
from printfleet.registry import InMemoryRegistry


@pytest.fixture(autouse=True)
def _isolate_settings_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("PRINTFLEET_CONFIG", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class RecordingRegistry(InMemoryRegistry):
    """In-memory registry that logs calls and can reject chosen serials."""

    def __init__(
        self,
        records: list[ImportableRecord] | None = None,
        fail_serials: set[str] | None = None,
    ) -> None:
        super().__init__(records)
        self.fail_serials = fail_serials or set()
        self.add_calls: list[str] = []
        self.list_calls = 0

    async def list_existing(self) -> list[ImportableRecord]:
        self.list_calls += 1
        return await super().list_existing()

    async def add(self, record: ImportableRecord) -> None:
        self.add_calls.append(record.serial)
        if record.serial in self.fail_serials:
            raise ConnectionError("printer unreachable")
        await super().add(record)


def make_record(
    serial: str, name: str | None = None, **fields: str
) -> ImportableRecord:
    return ImportableRecord(
        name=name or f"Printer {serial}",
        model=fields.get("model", "X1C"),
        ip=fields.get("ip", "192.168.1.10"),
        access_code=fields.get("access_code", "12345678"),
        serial=serial,
    )
