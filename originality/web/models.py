from dataclasses import dataclass, field


@dataclass(frozen=True)
class WebCheckConfig:
    """Tunables for web corroboration."""

    min_text_length: int = 100
    query_max_chars: int = 150
    search_limit: int = 5
    search_delay_seconds: float = 0.5
    max_pages: int = 5
    page_min_chars: int = 200
    source_threshold: float = 0.2
    max_sources: int = 5
    # Raw cosine similarity treated as complete overlap.
    full_overlap_score: float = 0.9
    top_terms: int = 800
    # Cap on the input text, matching attachment extraction.
    max_chars: int = 200_000


@dataclass
class WebCheckResult:
    """Normalized overlap with public web pages, 0-100."""

    score: float = 0.0
    sources: list[str] = field(default_factory=list)
