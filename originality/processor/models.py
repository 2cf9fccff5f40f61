from dataclasses import dataclass, field
from typing import Any

from originality.database.models import AttachmentRecord
from originality.similarity.models import Document, SimilarityPair


@dataclass(frozen=True)
class FetchedAttachment:
    """Attachment metadata together with its downloaded bytes."""

    attachment: AttachmentRecord
    content: bytes


@dataclass
class OriginalityOutcome:
    """What the originality check returns to its caller."""

    report_id: str
    report_url: str | None
    summary: dict[str, Any] = field(default_factory=dict)


@dataclass
class SimilarityCheckOutcome:
    """Filtered TF-IDF pairs of the lightweight similarity check."""

    docs: list[Document]
    pairs: list[SimilarityPair]
    threshold: float
    top: int
