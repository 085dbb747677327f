from __future__ import annotations


class PrintfleetError(Exception):
    """Base class for printfleet errors."""


class RegistryError(PrintfleetError):
    """The registry could not store a record."""
