import tempfile
import uuid
from pathlib import Path

import httpx

from originality.config.settings import Settings
from originality.database.repositories.article_repository import ArticleRepository
from originality.database.repositories.report_repository import ReportRepository
from originality.detection.ai_detector import HeuristicAIDetector
from originality.external.jplag_runner import JPlagRunner
from originality.external.submissions import SubmissionWriter, safe_filename
from originality.extraction.factory import TextExtractorFactory
from originality.logging.logger import Log
from originality.processor.attachment_fetcher import AttachmentFetcher
from originality.processor.exceptions import ProcessorError
from originality.processor.locks import ArticleLockRegistry
from originality.processor.models import OriginalityOutcome
from originality.processor.pipeline import PipelineContext, PipelineStep
from originality.processor.report_archiver import ReportArchiver
from originality.processor.report_assembler import ReportAssembler
from originality.processor.steps import (
    ArchiveReportStep,
    DetectAIContentStep,
    ExtractTextStep,
    FetchAttachmentsStep,
    LoadArticleStep,
    PersistReportStep,
    RunExternalToolStep,
    WebCorroborationStep,
    WriteSubmissionsStep,
)
from originality.storage.base import BaseBlobStorage
from originality.web.factory import WebCorroboratorFactory


class Processor:
    """Orchestrates one originality check run.

    Pipeline: load -> fetch -> extract -> AI heuristic -> web check ->
    write submissions -> external tool -> archive -> persist report.

    The run holds the article's lock and a private temporary directory; both
    are released on every exit path.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        locks: ArticleLockRegistry,
        default_language: str = "python3",
        temp_root: Path | None = None,
    ) -> None:
        self._steps = steps
        self._locks = locks
        self._default_language = default_language
        self._temp_root = temp_root

    async def process(
        self,
        article_id: str,
        run_by: str | None = None,
        language: str | None = None,
    ) -> OriginalityOutcome:
        """Run the full originality check for an article.

        Raises:
            ArticleNotFoundError: if the article does not exist.
            NothingToAnalyzeError: if it has neither content nor attachments.
            AnalysisInProgressError: if a check for it is already running.
        """
        Log.info(f"Starting originality check for article {article_id}")
        async with self._locks.hold(article_id):
            with tempfile.TemporaryDirectory(
                prefix=f"jplag-{safe_filename(article_id)}-", dir=self._temp_root
            ) as work_root:
                context = PipelineContext(
                    article_id=article_id,
                    report_id=str(uuid.uuid4()),
                    work_root=Path(work_root),
                    language=language or self._default_language,
                    run_by=run_by,
                )
                try:
                    for step in self._steps:
                        context = await step.run(context)
                except ProcessorError:
                    raise
                except Exception:
                    Log.exception(f"Originality check failed for article {article_id}")
                    raise

        if context.report is None:
            raise RuntimeError("Pipeline finished without persisting a report")
        return OriginalityOutcome(
            report_id=context.report.id,
            report_url=context.report.report_public_url,
            summary=context.report.similarity_summary,
        )


def build_processor(
    settings: Settings,
    storage: BaseBlobStorage,
    http_client: httpx.AsyncClient,
    locks: ArticleLockRegistry | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    article_repo = ArticleRepository()
    steps: list[PipelineStep] = [
        LoadArticleStep(article_repo, settings.extraction_max_chars),
        FetchAttachmentsStep(AttachmentFetcher(storage, http_client)),
        ExtractTextStep(TextExtractorFactory.create(settings)),
        DetectAIContentStep(HeuristicAIDetector.from_settings(settings)),
        WebCorroborationStep(WebCorroboratorFactory.create(settings, http_client)),
        WriteSubmissionsStep(SubmissionWriter()),
        RunExternalToolStep(JPlagRunner.from_settings(settings)),
        ArchiveReportStep(ReportArchiver(storage, settings.storage_signed_url_ttl_seconds)),
        PersistReportStep(ReportAssembler(), ReportRepository()),
    ]
    return Processor(
        steps=steps,
        locks=locks or ArticleLockRegistry(),
        default_language=settings.jplag_default_language,
    )
