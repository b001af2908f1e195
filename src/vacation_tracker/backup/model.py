from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Attachment:
    filename: str
    content: bytes
    mimetype: str


@dataclass(frozen=True)
class OutgoingMail:
    recipient: str
    subject: str
    body: str
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class BackupResult:
    recipient: str
    employee_count: int
    vacation_count: int
    size_bytes: int
    completed_at: datetime

    @property
    def size_label(self) -> str:
        kb = round(self.size_bytes / 1024)
        return f"{kb / 1024:.1f} MB" if kb > 1024 else f"{kb} KB"
