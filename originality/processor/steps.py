import asyncio

from originality.database.repositories.article_repository import ArticleRepository
from originality.database.repositories.report_repository import ReportRepository
from originality.detection.ai_detector import HeuristicAIDetector
from originality.external.jplag_runner import JPlagRunner
from originality.external.models import WorkingFile
from originality.external.submissions import SubmissionWriter
from originality.extraction.text_extractor import TextExtractor, html_to_text
from originality.logging.logger import Log
from originality.processor.attachment_fetcher import AttachmentFetcher
from originality.processor.exceptions import NothingToAnalyzeError
from originality.processor.pipeline import PipelineContext, PipelineStep
from originality.processor.report_archiver import ReportArchiver
from originality.processor.report_assembler import ReportAssembler
from originality.similarity.models import Document
from originality.web.corroboration import WebCorroborator
from originality.web.models import WebCheckResult

MAIN_CONTENT_ID = "main-content"


class LoadArticleStep(PipelineStep):
    def __init__(self, article_repo: ArticleRepository, max_chars: int = 200_000) -> None:
        self._article_repo = article_repo
        self._max_chars = max_chars

    async def run(self, context: PipelineContext) -> PipelineContext:
        article = await self._article_repo.find_by_id(context.article_id)
        attachments = await self._article_repo.list_attachments(context.article_id)
        article_text = html_to_text(article.content, self._max_chars)
        if not article_text and not attachments:
            raise NothingToAnalyzeError("No content or attachments found to run checks on")
        context.article = article
        context.attachments = attachments
        context.article_text = article_text
        Log.info(
            f"Loaded article {context.article_id}: {len(article_text)} chars, "
            f"{len(attachments)} attachments"
        )
        return context


class FetchAttachmentsStep(PipelineStep):
    def __init__(self, fetcher: AttachmentFetcher) -> None:
        self._fetcher = fetcher

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.fetched_attachments = await self._fetcher.fetch_all(context.attachments)
        Log.info(
            f"Downloaded {len(context.fetched_attachments)}/{len(context.attachments)} "
            f"attachments for article {context.article_id}"
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        documents: list[Document] = []
        if context.article_text:
            documents.append(
                Document(id=MAIN_CONTENT_ID, filename="Article Content", text=context.article_text)
            )
        for fetched in context.fetched_attachments:
            attachment = fetched.attachment
            text = await asyncio.to_thread(
                self._text_extractor.extract, attachment.filename, fetched.content
            )
            documents.append(Document(id=attachment.id, filename=attachment.filename, text=text))
        context.documents = documents
        context.combined_text = "\n\n".join(doc.text for doc in documents if doc.text)
        Log.info(
            f"Extracted {len(context.combined_text)} chars of text for article {context.article_id}"
        )
        return context


class DetectAIContentStep(PipelineStep):
    def __init__(self, detector: HeuristicAIDetector) -> None:
        self._detector = detector

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.ai_result = self._detector.detect(context.combined_text)
        Log.info(f"AI heuristic score for article {context.article_id}: {context.ai_result.score}")
        return context


class WebCorroborationStep(PipelineStep):
    def __init__(self, corroborator: WebCorroborator) -> None:
        self._corroborator = corroborator

    async def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.web_result = await self._corroborator.check(context.combined_text)
        except Exception as exc:
            Log.warning(f"Web check failed for article {context.article_id}: {exc}")
            context.web_result = WebCheckResult()
        Log.info(
            f"Web overlap for article {context.article_id}: {context.web_result.score} "
            f"({len(context.web_result.sources)} sources)"
        )
        return context


class WriteSubmissionsStep(PipelineStep):
    def __init__(self, writer: SubmissionWriter) -> None:
        self._writer = writer

    async def run(self, context: PipelineContext) -> PipelineContext:
        files: list[WorkingFile] = []
        if context.article_text:
            files.append(
                WorkingFile(
                    name=f"article_content_{context.article_id}.txt",
                    content=context.article_text.encode("utf-8"),
                )
            )
        for fetched in context.fetched_attachments:
            attachment = fetched.attachment
            files.append(
                WorkingFile(name=f"{attachment.id}-{attachment.filename}", content=fetched.content)
            )
        submissions_dir = context.work_root / JPlagRunner.SUBMISSIONS_DIR
        written = await asyncio.to_thread(self._writer.write, submissions_dir, files)
        Log.info(f"Wrote {len(written)} submission files to {submissions_dir}")
        return context


class RunExternalToolStep(PipelineStep):
    def __init__(self, runner: JPlagRunner) -> None:
        self._runner = runner

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.tool_result = await self._runner.run(context.work_root, context.language)
        return context


class ArchiveReportStep(PipelineStep):
    def __init__(self, archiver: ReportArchiver) -> None:
        self._archiver = archiver

    async def run(self, context: PipelineContext) -> PipelineContext:
        tool_result = context.tool_result
        if tool_result is None or not tool_result.success or tool_result.report_dir is None:
            return context
        if not tool_result.report_dir.is_dir():
            Log.warning(f"Report directory {tool_result.report_dir} is missing, nothing to archive")
            return context
        storage_path, url = await self._archiver.archive(
            tool_result.report_dir, context.article_id, context.report_id
        )
        context.report_storage_path = storage_path
        context.report_public_url = url
        return context


class PersistReportStep(PipelineStep):
    def __init__(self, assembler: ReportAssembler, report_repo: ReportRepository) -> None:
        self._assembler = assembler
        self._report_repo = report_repo

    async def run(self, context: PipelineContext) -> PipelineContext:
        report = self._assembler.assemble(
            report_id=context.report_id,
            article_id=context.article_id,
            run_by=context.run_by,
            tool_result=context.tool_result,
            ai_result=context.ai_result,
            web_result=context.web_result,
            report_storage_path=context.report_storage_path,
            report_public_url=context.report_public_url,
        )
        context.report = await self._report_repo.create(report)
        Log.info(f"Persisted originality report {report.id} for article {context.article_id}")
        return context
