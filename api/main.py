from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from articles import repository as articles_repository
from articles import router as articles_router
from bookmarks import router as bookmarks_router
from core.db import Database
from core.dependencies import get_db
from core.errors import database_failure, register_error_handlers
from core.log import configure_logging
from core.settings import Settings, load_settings
from users import router as users_router

logger = logging.getLogger(__name__)


def create_app(database: Database | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the API.

    When `database` is given the app uses it as-is and leaves its lifecycle
    to the caller; otherwise a pool is opened on startup and closed on
    shutdown.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if database is not None:
            app.state.db = database
            yield
            return

        app.state.db = await Database.connect(settings)
        try:
            yield
        finally:
            await app.state.db.close()
            app.state.db = None

    app = FastAPI(title="Articles API", lifespan=lifespan)
    app.state.db = database

    origins = list(settings.cors_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentialed responses with a wildcard origin.
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(articles_router.router, tags=["articles"])
    app.include_router(bookmarks_router.router, tags=["bookmarks"])
    app.include_router(users_router.router, tags=["users"])

    @app.get("/")
    def root() -> dict:
        return {"message": "New Articles API is running!"}

    @app.get("/test-db")
    async def test_db(db: Database = Depends(get_db)) -> dict:
        with database_failure("Database connection failed", log=logger, event="test_db_failed"):
            count = await articles_repository.count_articles(db)
        return {"message": "Database connected!", "articleCount": count}

    return app


app = create_app()


def run() -> None:
    settings = load_settings()
    logger.info("server_starting host=%s port=%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
