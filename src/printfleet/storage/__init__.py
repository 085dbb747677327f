from __future__ import annotations

from .database import Database
from .registry import DatabaseRegistry

__all__ = ["Database", "DatabaseRegistry"]
