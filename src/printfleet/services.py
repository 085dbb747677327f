"""Import/export service bound to a registry."""

from __future__ import annotations

import logging
from datetime import date

from printfleet.core import (
    create_preview,
    detect_format,
    export_records,
    import_records,
    parse_file,
)
from printfleet.models import (
    ExportOptions,
    ExportResult,
    FileFormat,
    ImportableRecord,
    ImportIssue,
    ImportOptions,
    ImportPreview,
    ImportResult,
    ImportValidationResult,
    IssueKind,
)
from printfleet.registry import Registry

logger = logging.getLogger(__name__)


class ImportService:
    """Runs the import/export pipeline against one registry.

    Usage:
        service = ImportService(registry)
        preview = await service.create_preview(content, "printers.csv")
        result = await service.import_printers(content, "printers.csv")
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def detect_format(self, filename: str, content: str) -> FileFormat:
        return detect_format(filename, content)

    def parse_file(self, content: str, fmt: FileFormat) -> ImportValidationResult:
        return parse_file(content, fmt)

    async def create_preview(self, content: str, filename: str) -> ImportPreview:
        """Preview against a snapshot of the registry taken now."""
        existing: list[ImportableRecord] = []
        registry_issue = None
        try:
            existing = await self._registry.list_existing()
        except Exception as exc:
            logger.warning("Could not read registry: %s", exc)
            registry_issue = ImportIssue(
                message=f"Could not read existing printers: {exc}",
                kind=IssueKind.REGISTRY,
            )

        preview = create_preview(content, filename, existing)
        if registry_issue is None:
            return preview
        return preview.model_copy(update={"errors": [*preview.errors, registry_issue]})

    async def import_printers(
        self,
        content: str,
        filename: str,
        options: ImportOptions | None = None,
    ) -> ImportResult:
        return await import_records(
            content, filename, options or ImportOptions(), self._registry
        )

    async def export_printers(
        self, options: ExportOptions, today: date | None = None
    ) -> ExportResult:
        try:
            records = await self._registry.list_existing()
        except Exception as exc:
            logger.warning("Could not read registry: %s", exc)
            return ExportResult(success=False, error=str(exc))
        return export_records(records, options, today=today)
