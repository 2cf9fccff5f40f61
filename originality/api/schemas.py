from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class OriginalityCheckRequest(BaseModel):
    run_by: str | None = None
    language: str | None = Field(
        default=None, description="Source-language hint for the external similarity tool."
    )


class OriginalityCheckData(BaseModel):
    report_id: str
    report_url: str | None = None
    summary: dict[str, Any] = Field(
        default_factory=dict,
        description=(
            "External tool summary (or a notice) merged with ai_score, ai_details, "
            "web_score and web_sources. ai_score is an advisory heuristic, "
            "not a calibrated probability."
        ),
    )


class OriginalityCheckResponse(BaseModel):
    status: str = "success"
    message: str = "Plagiarism & AI check completed"
    data: OriginalityCheckData


class SimilarityDocOut(BaseModel):
    id: str
    filename: str
    text_excerpt: str


class SimilarityPairOut(BaseModel):
    a_id: str
    b_id: str
    score: float


class SimilarityMeta(BaseModel):
    method: str = "tfidf"
    threshold: float
    top: int


class SimilarityCheckData(BaseModel):
    docs: list[SimilarityDocOut]
    pairs: list[SimilarityPairOut]
    meta: SimilarityMeta


class SimilarityCheckResponse(BaseModel):
    status: str = "success"
    message: str = "Similarity check completed"
    data: SimilarityCheckData


class ReportOut(BaseModel):
    id: str
    article_id: str
    run_by: str | None = None
    status: str
    similarity_summary: dict[str, Any] = Field(default_factory=dict)
    report_storage_path: str | None = None
    report_public_url: str | None = None
    created_at: datetime | None = None


class LatestReportResponse(BaseModel):
    status: str = "success"
    data: ReportOut


class ErrorResponse(BaseModel):
    status: str = "error"
    message: str
