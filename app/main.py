"""FastAPI application entry point.

Store Inventory API - tracks the store's employees and products with CRUD
and field-filtered search over SQLite, and keeps a JSON snapshot of the data
for backup and seeding.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.database import store_file_exists
from config.settings import Settings, settings as default_settings
from repositories.store_db import StoreDB
from routers import router as api_router
from services.snapshot_service import SnapshotError, SnapshotService

# Configure logging
logging.basicConfig(
    level=default_settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stdout),
    ],
)

logger = logging.getLogger(__name__)


def save_snapshot(snapshots: SnapshotService, path: str) -> None:
    try:
        snapshots.save_to_json(path)
    except SnapshotError:
        logger.exception("Failed to save snapshot to %s", path)


def seed_from_snapshot(snapshots: SnapshotService, path: str) -> None:
    """Import the snapshot into a freshly created store and write it back out."""
    logger.info("Store not found, trying to load data from %s", path)
    try:
        snapshots.load_from_json(path)
    except SnapshotError:
        logger.exception("Failed to load snapshot, starting with an empty store")
        return
    save_snapshot(snapshots, path)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Configuration to use; defaults to the environment settings.

    Returns:
        The FastAPI application. The store is opened when the application
        starts and closed, after a final snapshot, when it shuts down.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store_existed = store_file_exists(settings.database_url)

        store = StoreDB.from_settings(settings)
        store.init_schema()
        snapshots = SnapshotService(store)

        if store_existed:
            logger.info("Store already exists, skipping snapshot import")
        else:
            seed_from_snapshot(snapshots, settings.snapshot_path)

        app.state.store = store
        logger.info("Store Inventory API ready")
        try:
            yield
        finally:
            logger.info("Shutting down, saving snapshot to %s", settings.snapshot_path)
            try:
                save_snapshot(snapshots, settings.snapshot_path)
            finally:
                store.close()

    app = FastAPI(
        title="Store Inventory API",
        description="""
        Inventory backend for a small store.

        ## Features

        - CRUD for employees and products
        - Search by any combination of fields
        - JSON snapshot import on first start and export on shutdown
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health Check",
        description="Check if the service is running.",
    )
    async def health_check() -> dict:
        """Return service health status."""
        return {
            "status": "healthy",
            "service": "store-inventory",
            "version": "1.0.0",
        }

    app.include_router(api_router)
    return app


app = create_app()


def run() -> None:
    """Serve the application; SIGINT and SIGTERM trigger a graceful shutdown."""
    uvicorn.run(
        "app.main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
