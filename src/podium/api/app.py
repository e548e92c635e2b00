"""FastAPI application factory.

Configuration is read from the environment:
- PODIUM_DATA_PATH: JSON snapshot (default data/olympic.json)
- PODIUM_DB_PATH: serve from the SQLite snapshot store instead, if set
- PODIUM_CORS_ORIGINS: comma-separated origins allowed to call the API
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from podium.models.domain import Dataset
from podium.source.loader import (
    DatasetLoadError,
    DatasetSource,
    DbDatasetSource,
    JsonDatasetSource,
)

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path("data/olympic.json")
DEFAULT_CORS_ORIGINS = "http://localhost:4200,http://127.0.0.1:4200"


def source_from_env() -> DatasetSource:
    """Build the dataset source selected by environment variables."""
    db_path = os.environ.get("PODIUM_DB_PATH")
    if db_path:
        return DbDatasetSource(Path(db_path))
    return JsonDatasetSource(Path(os.environ.get("PODIUM_DATA_PATH", DEFAULT_DATA_PATH)))


def get_source(request: Request) -> DatasetSource:
    """Dependency returning the app's dataset source."""
    return request.app.state.dataset_source


def get_dataset(request: Request) -> Dataset:
    """Dependency returning the current snapshot.

    Raises:
        HTTPException: 503 if the snapshot cannot be loaded.
    """
    try:
        return get_source(request).snapshot()
    except DatasetLoadError as e:
        raise HTTPException(status_code=503, detail=f"Dataset unavailable: {e}") from e


def create_app(source: DatasetSource | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        source: Dataset source. Defaults to the one configured by the
            environment. The snapshot is loaded on first request.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(
        title="Podium API",
        description="Olympic participation statistics for the dashboard",
        version="0.1.0",
    )
    app.state.dataset_source = source if source is not None else source_from_env()
    logger.info(f"Serving dataset from {app.state.dataset_source.describe()}")

    # Add CORS middleware for dashboard access
    origins = os.environ.get("PODIUM_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Include routes
    from podium.api.routes import countries, stats

    app.include_router(stats.router, prefix="/api")
    app.include_router(countries.router, prefix="/api")

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
