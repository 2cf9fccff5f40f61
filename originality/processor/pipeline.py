from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from originality.database.models import ArticleRecord, AttachmentRecord, OriginalityReport
from originality.detection.models import AIDetectionResult
from originality.external.models import ExternalToolResult
from originality.processor.models import FetchedAttachment
from originality.similarity.models import Document
from originality.web.models import WebCheckResult


@dataclass(slots=True)
class PipelineContext:
    article_id: str
    report_id: str
    work_root: Path
    language: str
    run_by: str | None = None
    article: ArticleRecord | None = None
    attachments: list[AttachmentRecord] = field(default_factory=list)
    fetched_attachments: list[FetchedAttachment] = field(default_factory=list)
    article_text: str = ""
    documents: list[Document] = field(default_factory=list)
    combined_text: str = ""
    ai_result: AIDetectionResult | None = None
    web_result: WebCheckResult = field(default_factory=WebCheckResult)
    tool_result: ExternalToolResult | None = None
    report_storage_path: str | None = None
    report_public_url: str | None = None
    report: OriginalityReport | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
