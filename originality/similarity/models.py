from dataclasses import dataclass, field


@dataclass(frozen=True)
class Document:
    """Normalized text of one attachment, web page, or article body."""

    id: str
    filename: str
    text: str


@dataclass(frozen=True)
class SimilarityPair:
    """Cosine similarity of two documents; each unordered pair appears once."""

    a_id: str
    b_id: str
    score: float

    def involves(self, doc_id: str) -> bool:
        return doc_id in (self.a_id, self.b_id)

    def other(self, doc_id: str) -> str:
        """Return the id on the opposite side of ``doc_id``."""
        return self.b_id if self.a_id == doc_id else self.a_id


@dataclass
class SimilarityResult:
    """Output of the TF-IDF engine."""

    docs: list[Document]
    pairs: list[SimilarityPair] = field(default_factory=list)
