import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import setup_logging
from app.api.routes.airports import router as airports_router
from app.data.airports_repo import AirportsRepo
from app.services.airport_search import AirportSearch

logger = logging.getLogger(__name__)


def build_repo() -> AirportsRepo:
    return AirportsRepo(
        csv_path=settings.airports_csv_path,
        id_column=settings.airports_id_column,
        name_column=settings.airports_name_column,
    )


def create_app(repo: Optional[AirportsRepo] = None) -> FastAPI:
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        airports_repo = repo if repo is not None else build_repo()
        # DatasetLoadError propagates and aborts startup
        airports_repo.load()
        search = AirportSearch(
            airports_repo.all(),
            workers=settings.search_workers,
            parallel_threshold=settings.search_parallel_threshold,
        )
        app.state.airports_repo = airports_repo
        app.state.airport_search = search
        try:
            yield
        finally:
            search.close()

    app = FastAPI(title=settings.app_name, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    @app.get("/healthz")
    async def healthz(request: Request):
        return {"ok": True, "airports": len(request.app.state.airports_repo)}

    app.include_router(airports_router, prefix="/api", tags=["airports"])

    return app

app = create_app()
