from __future__ import annotations

import logging
import tomllib
from datetime import datetime, timezone
from pathlib import Path

from pydantic import ValidationError

from printfleet.models import ImportableRecord, PrinterRecord, PrinterRegistry
from printfleet.utils.toml import toml_string

logger = logging.getLogger(__name__)

PRINTERS_FILE = "printers.toml"


def _render_printers_toml(registry: PrinterRegistry) -> str:
    lines = [
        "# printfleet printer registry",
        "# Printers keyed by serial number",
        "",
        "[printers]",
    ]

    for serial, printer in sorted(registry.printers.items()):
        fields = [
            f"name = {toml_string(printer.name)}",
            f"model = {toml_string(printer.model)}",
            f"ip = {toml_string(printer.ip)}",
            f"access_code = {toml_string(printer.access_code)}",
        ]
        if printer.last_update:
            stamp = printer.last_update.isoformat()
            fields.append(f"last_update = {toml_string(stamp)}")
        lines.append(f"{toml_string(serial)} = {{ {', '.join(fields)} }}")

    lines.append("")
    return "\n".join(lines)


class Database:
    def __init__(self, data_dir: Path) -> None:
        self._data_dir = data_dir
        self._printers_path = data_dir / PRINTERS_FILE

    @property
    def path(self) -> Path:
        return self._data_dir

    @property
    def printers_path(self) -> Path:
        return self._printers_path

    def ensure_dirs(self) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)

    def load_printers(self) -> PrinterRegistry:
        if not self._printers_path.exists():
            return PrinterRegistry()

        try:
            with self._printers_path.open("rb") as handle:
                data = tomllib.load(handle) or {}
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(
                f"Invalid TOML in printers file: {self._printers_path}\n{exc}"
            ) from exc

        printers = {
            serial: {**fields, "serial": serial}
            for serial, fields in data.get("printers", {}).items()
        }

        try:
            return PrinterRegistry.model_validate({"printers": printers})
        except ValidationError as exc:
            raise ValueError(
                f"Invalid printers file: {self._printers_path}\n{exc}"
            ) from exc

    def save_printers(self, registry: PrinterRegistry) -> None:
        self.ensure_dirs()
        content = _render_printers_toml(registry)
        self._printers_path.write_text(content, encoding="utf-8")

    def add_printer(self, record: ImportableRecord) -> PrinterRecord:
        """Add a printer, replacing any printer with the same serial."""
        registry = self.load_printers()
        printer = PrinterRecord(
            **record.model_dump(exclude={"last_update"}),
            last_update=datetime.now(timezone.utc),
        )
        if printer.serial in registry.printers:
            logger.debug("Replacing printer with serial %s", printer.serial)
        registry.printers[printer.serial] = printer
        self.save_printers(registry)
        return printer

    def remove_printer(self, serial: str) -> bool:
        registry = self.load_printers()
        if serial in registry.printers:
            del registry.printers[serial]
            self.save_printers(registry)
            return True
        return False

    def init(self, force: bool = False) -> bool:
        """Create the data directory; returns False if it was already set up."""
        self.ensure_dirs()
        if self._printers_path.exists() and not force:
            return False
        self.save_printers(PrinterRegistry())
        return True
