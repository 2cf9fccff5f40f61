from dataclasses import dataclass

import httpx
from fastapi import Request

from originality.config.settings import Settings
from originality.database.repositories.report_repository import ReportRepository
from originality.processor.processor import Processor
from originality.processor.similarity_check import SimilarityChecker
from originality.storage.local_storage import LocalBlobStorage


@dataclass
class AppServices:
    """Long-lived collaborators shared by all requests."""

    settings: Settings
    storage: LocalBlobStorage
    http_client: httpx.AsyncClient
    processor: Processor
    similarity_checker: SimilarityChecker
    report_repo: ReportRepository


def get_services(request: Request) -> AppServices:
    return request.app.state.services
