from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from backend.core.config import get_cors_origins, get_database_url, get_host, get_port
from backend.core.database import create_db_engine, create_session_factory, init_db
from backend.core.logging_config import configure_logging
from backend.modules.exercises.routes import router as exercises_router
from backend.modules.users.routes import router as users_router

BASE_DIR = Path(__file__).resolve().parent
VIEWS_DIR = BASE_DIR / "views"
PUBLIC_DIR = BASE_DIR / "public"

logger = logging.getLogger("exercise_tracker")


def create_app(database_url: Optional[str] = None, configure_logs: bool = True) -> FastAPI:
    """
    Build the API application.

    Args:
        database_url: SQLAlchemy URL; read from the environment when omitted
        configure_logs: Install file and console log handlers

    Raises:
        ConfigurationException: If no connection string is configured
    """
    log_path = configure_logging() if configure_logs else None

    url = database_url or get_database_url()
    engine = create_db_engine(url)
    init_db(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if log_path:
            logger.info(f"Exercise Tracker API started. Logging to: {log_path}")
        yield
        logger.info("Shutting down Exercise Tracker API")
        engine.dispose()

    app = FastAPI(
        title="Exercise Tracker API",
        description="Register users, log exercises and query exercise logs",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", include_in_schema=False)
    async def root():
        return FileResponse(VIEWS_DIR / "index.html")

    app.include_router(users_router)
    app.include_router(exercises_router)

    # Static assets are served from the site root; mounted last so API routes win
    app.mount("/", StaticFiles(directory=PUBLIC_DIR), name="public")

    return app


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn
    uvicorn.run(create_app(), host=get_host(), port=get_port())


if __name__ == "__main__":
    run()
