import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncEngine

from portal.api.routes import catalog, health, papers, syllabus, timetable
from portal.core.config import Settings, get_settings
from portal.core.exceptions import AppError, StoreError
from portal.core.logging import setup_logging
from portal.core.middleware import RequestLoggingMiddleware
from portal.db.bootstrap import ensure_schema
from portal.db.session import build_session_factory, engine as default_engine
from portal.services.seeder import seed_if_empty

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, StoreError):
        logger.error("Store error on %s %s", request.method, request.url.path, exc_info=exc.cause)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "details": exc.details},
    )


def create_app(engine: AsyncEngine | None = None, settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    engine = engine or default_engine
    setup_logging(environment=settings.environment, level=settings.log_level)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        # Schema and sample data are in place before any request is served.
        await ensure_schema(engine)
        if settings.seed_sample_data:
            await seed_if_empty(session_factory)
        yield
        await engine.dispose()

    app = FastAPI(title=settings.project_name, lifespan=lifespan)
    app.state.session_factory = session_factory
    app.add_exception_handler(AppError, app_error_handler)

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
    app.include_router(catalog.router, prefix=settings.api_prefix, tags=["catalog"])
    app.include_router(timetable.router, prefix=f"{settings.api_prefix}/timetable", tags=["timetable"])
    app.include_router(papers.router, prefix=f"{settings.api_prefix}/papers", tags=["papers"])
    app.include_router(syllabus.router, prefix=f"{settings.api_prefix}/syllabus", tags=["syllabus"])
    return app


app = create_app()
