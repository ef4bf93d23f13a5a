"""
Main entry point for FastAPI application.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.routes import projects, seasons
from app.utils.db_async import (
    build_engine,
    build_session_factory,
    describe_database_url,
    dispose_engine,
    init_db,
)
from app.utils.errors import CustomError, ErrorKind

from app.logging_config import setup_logging
from app.config import settings

import logging
logger = logging.getLogger(__name__)

setup_logging(
    level=settings.log_level,
    access_log=settings.access_log,
    sql_echo=settings.sql_echo,
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = build_engine(settings.database_url)
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    logger.info(f"DB target: {describe_database_url(settings.database_url)}")

    if settings.is_dev and settings.auto_init_db:
        logger.info("Running init_db()…")
        try:
            await init_db(engine)
            logger.info("DB ready.")
        except Exception:
            logger.exception("init_db failed")
            raise
    else:
        logger.info("Skipping init_db(); schema is managed by Alembic")

    yield

    try:
        logger.info("Disposing DB engine…")
        await dispose_engine(engine)
        logger.info("DB engine disposed.")
    except Exception:
        logger.exception("Failed to dispose DB engine")


async def custom_error_handler(request: Request, exc: CustomError) -> JSONResponse:
    """Map service errors to HTTP responses."""
    if exc.kind is ErrorKind.INTERNAL_SERVER:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


app = FastAPI(title="Season Admin", lifespan=lifespan)
app.add_exception_handler(CustomError, custom_error_handler)  # type: ignore[arg-type]
app.include_router(projects.router)
app.include_router(seasons.router)

@app.get("/health")
async def health_check():
    """Health Check Endpoint"""
    return {"status": "ok"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
