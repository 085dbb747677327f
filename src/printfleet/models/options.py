"""Import/export option models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel

from .records import FileFormat


class DuplicatePolicy(StrEnum):
    """What to do with a record whose serial is already registered."""

    SKIP = "skip"
    OVERWRITE = "overwrite"
    ALLOW = "allow"


class ImportOptions(BaseModel):
    model_config = {"frozen": True}

    skip_duplicates: bool = True
    # only meaningful when skip_duplicates is False
    overwrite_existing: bool = False
    validate_only: bool = False

    @classmethod
    def from_policy(
        cls, policy: DuplicatePolicy, validate_only: bool = False
    ) -> ImportOptions:
        return cls(
            skip_duplicates=policy is DuplicatePolicy.SKIP,
            overwrite_existing=policy is DuplicatePolicy.OVERWRITE,
            validate_only=validate_only,
        )

    @property
    def policy(self) -> DuplicatePolicy:
        if self.skip_duplicates and not self.overwrite_existing:
            return DuplicatePolicy.SKIP
        if self.overwrite_existing:
            return DuplicatePolicy.OVERWRITE
        return DuplicatePolicy.ALLOW


class ExportOptions(BaseModel):
    model_config = {"frozen": True}

    format: FileFormat = FileFormat.JSON
    include_timestamps: bool = False
    # JSON only
    pretty_format: bool = True
