from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from originality.logging.logger import Log
from originality.processor.exceptions import (
    AnalysisInProgressError,
    ArticleNotFoundError,
    NothingToAnalyzeError,
    ProcessorError,
)

_STATUS_BY_ERROR: list[tuple[type[ProcessorError], int]] = [
    (ArticleNotFoundError, status.HTTP_404_NOT_FOUND),
    (NothingToAnalyzeError, status.HTTP_400_BAD_REQUEST),
    (AnalysisInProgressError, status.HTTP_409_CONFLICT),
]


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"status": "error", "message": message})


async def processor_error_handler(request: Request, exc: Exception) -> JSONResponse:
    for error_cls, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_cls):
            break
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    Log.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return _error(status_code, str(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"{request.method} {request.url.path} failed: {exc!r}")
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Originality check failed")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProcessorError, processor_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
