from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ArticleRecord:
    """Represents a row from the articles table (read only here)."""

    id: str
    title: str = ""
    content: str = ""
    author_id: str | None = None


@dataclass(frozen=True)
class AttachmentRecord:
    """Represents a row from the attachments table.

    Bytes live in blob storage under ``storage_path``, or behind
    ``public_url`` for attachments uploaded elsewhere.
    """

    id: str
    article_id: str
    filename: str
    mime_type: str = "application/octet-stream"
    storage_path: str | None = None
    public_url: str | None = None


@dataclass
class OriginalityReport:
    """Represents a row from the originality_reports table."""

    id: str
    article_id: str
    run_by: str | None
    status: str
    similarity_summary: dict[str, Any] = field(default_factory=dict)
    report_storage_path: str | None = None
    report_public_url: str | None = None
    created_at: datetime | None = None
