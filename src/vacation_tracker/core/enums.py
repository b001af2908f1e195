from __future__ import annotations

from enum import Enum


class StorageBackend(str, Enum):
    """Where employee and vacation data lives."""

    MEMORY = "memory"
    MYSQL = "mysql"
