"""Import and export result models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field, computed_field

from .records import FileFormat, ImportableRecord


class IssueKind(StrEnum):
    FORMAT = "format"
    ROW = "row"
    VALIDATION = "validation"
    WARNING = "warning"
    REGISTRY = "registry"


class ImportIssue(BaseModel):
    """A diagnostic pointing at the input line/field it came from."""

    model_config = {"frozen": True}

    message: str
    line: int | None = None
    field: str | None = None
    data: ImportableRecord | None = None
    kind: IssueKind = IssueKind.FORMAT

    def __str__(self) -> str:
        location = []
        if self.line is not None:
            location.append(f"line {self.line}")
        if self.field:
            location.append(self.field)
        if location:
            return f"{', '.join(location)}: {self.message}"
        return self.message


class ImportValidationResult(BaseModel):
    model_config = {"frozen": True}

    errors: list[ImportIssue] = Field(default_factory=list)
    warnings: list[ImportIssue] = Field(default_factory=list)
    records: list[ImportableRecord] = Field(default_factory=list)
    # Every normalized record, trimmed, including those that failed validation.
    normalized: list[ImportableRecord] = Field(default_factory=list, repr=False)
    total_records: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.errors


class ImportPreview(BaseModel):
    """Read-only analysis of an import candidate."""

    model_config = {"frozen": True}

    format: FileFormat
    total_records: int
    valid_records: int
    invalid_records: int
    duplicate_serials: list[str] = Field(default_factory=list)
    existing_serials: list[str] = Field(default_factory=list)
    sample_data: list[ImportableRecord] = Field(default_factory=list)
    errors: list[ImportIssue] = Field(default_factory=list)
    warnings: list[ImportIssue] = Field(default_factory=list)


class ImportResult(BaseModel):
    model_config = {"frozen": True}

    success: bool
    imported: int = 0
    skipped: int = 0
    errors: list[ImportIssue] = Field(default_factory=list)
    records: list[ImportableRecord] = Field(default_factory=list)
    validate_only: bool = False


class ExportResult(BaseModel):
    model_config = {"frozen": True}

    success: bool
    filename: str = ""
    data: str = ""
    error: str | None = None
