import math

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, status
from fastapi.responses import FileResponse

from originality.api.dependencies import AppServices, get_services
from originality.api.schemas import (
    LatestReportResponse,
    OriginalityCheckData,
    OriginalityCheckRequest,
    OriginalityCheckResponse,
    ReportOut,
    SimilarityCheckData,
    SimilarityCheckResponse,
    SimilarityDocOut,
    SimilarityMeta,
    SimilarityPairOut,
)
from originality.storage.exceptions import InvalidBlobPathError

EXCERPT_CHARS = 200

articles_router = APIRouter(prefix="/articles", tags=["originality"])
storage_router = APIRouter(prefix="/storage", tags=["storage"])


def _parse_float(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return math.nan


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        return None


@articles_router.post(
    "/{article_id}/originality-check",
    status_code=status.HTTP_201_CREATED,
    response_model=OriginalityCheckResponse,
)
async def run_originality_check(
    article_id: str,
    body: OriginalityCheckRequest | None = None,
    services: AppServices = Depends(get_services),
) -> OriginalityCheckResponse:
    body = body or OriginalityCheckRequest()
    outcome = await services.processor.process(
        article_id, run_by=body.run_by, language=body.language
    )
    return OriginalityCheckResponse(
        data=OriginalityCheckData(
            report_id=outcome.report_id,
            report_url=outcome.report_url,
            summary=outcome.summary,
        )
    )


@articles_router.post("/{article_id}/similarity", response_model=SimilarityCheckResponse)
async def run_similarity_check(
    article_id: str,
    threshold: str | None = Query(default=None),
    top: str | None = Query(default=None),
    services: AppServices = Depends(get_services),
) -> SimilarityCheckResponse:
    outcome = await services.similarity_checker.run(
        article_id, threshold=_parse_float(threshold), top=_parse_int(top)
    )
    return SimilarityCheckResponse(
        data=SimilarityCheckData(
            docs=[
                SimilarityDocOut(id=doc.id, filename=doc.filename, text_excerpt=doc.text[:EXCERPT_CHARS])
                for doc in outcome.docs
            ],
            pairs=[
                SimilarityPairOut(a_id=pair.a_id, b_id=pair.b_id, score=pair.score)
                for pair in outcome.pairs
            ],
            meta=SimilarityMeta(threshold=outcome.threshold, top=outcome.top),
        )
    )


@articles_router.get(
    "/{article_id}/originality-reports/latest", response_model=LatestReportResponse
)
async def get_latest_report(
    article_id: str,
    services: AppServices = Depends(get_services),
) -> LatestReportResponse:
    report = await services.report_repo.find_latest(article_id)
    if report is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, f"No report for article {article_id}")
    return LatestReportResponse(
        data=ReportOut(
            id=report.id,
            article_id=report.article_id,
            run_by=report.run_by,
            status=report.status,
            similarity_summary=report.similarity_summary,
            report_storage_path=report.report_storage_path,
            report_public_url=report.report_public_url,
            created_at=report.created_at,
        )
    )


@storage_router.get("/{path:path}")
async def download_blob(
    path: str,
    expires: int = Query(...),
    signature: str = Query(...),
    services: AppServices = Depends(get_services),
) -> FileResponse:
    storage = services.storage
    if not storage.verify(path, expires, signature):
        raise HTTPException(status.HTTP_403_FORBIDDEN, "Invalid or expired signature")
    try:
        file_path = storage.resolve(path)
    except InvalidBlobPathError as exc:
        raise HTTPException(status.HTTP_403_FORBIDDEN, str(exc)) from exc
    if not file_path.is_file():
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Not found")
    return FileResponse(file_path, filename=file_path.name)


def register_routes(app: FastAPI) -> None:
    app.include_router(articles_router)
    app.include_router(storage_router)
