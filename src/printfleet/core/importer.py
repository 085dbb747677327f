from __future__ import annotations

import logging

from printfleet.models import (
    DuplicatePolicy,
    ImportableRecord,
    ImportIssue,
    ImportOptions,
    ImportResult,
    IssueKind,
)
from printfleet.registry import Registry

from .detector import detect_format
from .pipeline import parse_file

logger = logging.getLogger(__name__)


async def import_records(
    content: str,
    filename: str,
    options: ImportOptions,
    registry: Registry,
) -> ImportResult:
    """Parse ``content`` and add its records to ``registry`` one at a time.

    Nothing is added when the file has any error. Registry failures are
    recorded per record and do not stop the batch; records already added are
    kept.
    """
    fmt = detect_format(filename, content)
    validation = parse_file(content, fmt)

    if not validation.valid:
        logger.info(
            "Import of '%s' rejected: %d error(s)", filename, len(validation.errors)
        )
        return ImportResult(
            success=False,
            errors=validation.errors,
            validate_only=options.validate_only,
        )

    if options.validate_only:
        return ImportResult(
            success=True,
            imported=len(validation.records),
            records=validation.records,
            validate_only=True,
        )

    try:
        existing = await registry.list_existing()
    except Exception as exc:
        logger.warning("Could not read registry: %s", exc)
        return ImportResult(
            success=False,
            errors=[
                ImportIssue(
                    message=f"Could not read existing printers: {exc}",
                    kind=IssueKind.REGISTRY,
                )
            ],
        )

    existing_serials = {record.serial for record in existing}
    skip_existing = options.policy is DuplicatePolicy.SKIP

    imported = 0
    skipped = 0
    errors: list[ImportIssue] = list(validation.errors)
    added: list[ImportableRecord] = []

    # Sequential on purpose: results must line up with the file top to bottom.
    for record in validation.records:
        if skip_existing and record.serial in existing_serials:
            logger.debug("Skipping existing serial %s", record.serial)
            skipped += 1
            continue

        try:
            await registry.add(record)
        except Exception as exc:
            logger.warning("Failed to import printer '%s': %s", record.name, exc)
            errors.append(
                ImportIssue(
                    message=f'Failed to import printer "{record.name}": {exc}',
                    data=record,
                    kind=IssueKind.REGISTRY,
                )
            )
            continue

        imported += 1
        added.append(record)

    logger.info(
        "Imported %d printer(s) from '%s' (%d skipped, %d failed)",
        imported,
        filename,
        skipped,
        len(errors),
    )
    return ImportResult(
        success=not errors,
        imported=imported,
        skipped=skipped,
        errors=errors,
        records=added,
    )
