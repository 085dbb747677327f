from __future__ import annotations

import logging
from pathlib import PurePath

from printfleet.models import FileFormat

logger = logging.getLogger(__name__)

EXTENSION_FORMATS = {
    "json": FileFormat.JSON,
    "csv": FileFormat.CSV,
    "yaml": FileFormat.YAML,
    "yml": FileFormat.YAML,
    "txt": FileFormat.TXT,
}


def detect_format(filename: str, content: str) -> FileFormat:
    """Pick a parser from the file extension, falling back to content sniffing."""
    # Text after the last dot, so a bare ".json" still counts as JSON.
    _, dot, extension = PurePath(filename).name.rpartition(".")
    extension = extension.lower() if dot else ""
    if extension in EXTENSION_FORMATS:
        return EXTENSION_FORMATS[extension]

    trimmed = content.strip()
    if trimmed.startswith(("[", "{")):
        detected = FileFormat.JSON
    elif "," in trimmed and "\n" in trimmed:
        detected = FileFormat.CSV
    elif "name:" in trimmed:
        detected = FileFormat.YAML
    else:
        detected = FileFormat.TXT

    logger.debug("Detected %s from content of '%s'", detected, filename)
    return detected
