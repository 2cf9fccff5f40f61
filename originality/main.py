from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from originality.api.dependencies import AppServices
from originality.api.errors import register_error_handlers
from originality.api.routes import register_routes
from originality.config.settings import Settings
from originality.database.connection import close_pool, init_pool
from originality.database.repositories.report_repository import ReportRepository
from originality.logging.logger import Log
from originality.processor.locks import ArticleLockRegistry
from originality.processor.processor import build_processor
from originality.processor.similarity_check import build_similarity_checker
from originality.storage.factory import BlobStorageFactory

USER_AGENT = "originality-checker/0.1"


def build_services(settings: Settings, http_client: httpx.AsyncClient) -> AppServices:
    """Wire long-lived collaborators from settings."""
    storage = BlobStorageFactory.create(settings)
    return AppServices(
        settings=settings,
        storage=storage,
        http_client=http_client,
        processor=build_processor(settings, storage, http_client, ArticleLockRegistry()),
        similarity_checker=build_similarity_checker(settings, storage, http_client),
        report_repo=ReportRepository(),
    )


def create_app(settings: Settings | None = None, services: AppServices | None = None) -> FastAPI:
    """Create the API application.

    Pre-built ``services`` skip database and HTTP client start-up.
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if services is not None:
            app.state.services = services
            yield
            return
        await init_pool(settings)
        http_client = httpx.AsyncClient(headers={"User-Agent": USER_AGENT})
        try:
            app.state.services = build_services(settings, http_client)
            Log.info(f"Originality service started ({settings.app_env})")
            yield
        finally:
            await http_client.aclose()
            await close_pool()
            Log.info("Originality service stopped")

    app = FastAPI(title="Originality Check", lifespan=lifespan)

    @app.get("/healthz")
    async def healthz() -> dict[str, bool]:
        return {"ok": True}

    register_error_handlers(app)
    register_routes(app)
    return app


def main() -> None:
    """Entry point: configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.http_host, port=settings.http_port)


if __name__ == "__main__":
    main()
