"""
Image Gateway - Main FastAPI Application
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path

import PIL
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Add parent directory to path
sys.path.append(str(Path(__file__).parent))

from api.exceptions import register_exception_handlers  # noqa: E402
from api.routers import image, metadata, system  # noqa: E402
from api.routers.system import get_health_stats  # noqa: E402
from config import get_settings  # noqa: E402
from schemas import HealthStats, VersionInfo  # noqa: E402
from services.metadata_service import MetadataService  # noqa: E402

VERSION = "1.0.0"

# Get configuration
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.system.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Suppress watchfiles debug messages
logging.getLogger("watchfiles").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""
    # Startup
    logger.info("Starting Image Gateway server...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.system.debug}")

    app.state.metadata_service = MetadataService(
        max_upload_bytes=settings.image.max_upload_bytes
    )
    app.state.config = settings.to_dict()
    app.state.debug = settings.system.debug

    logger.info("Services initialized successfully")

    yield

    # Shutdown
    logger.info("Server shutdown complete")


# Create FastAPI app
app = FastAPI(
    title="Image Gateway",
    description="HTTP image gateway with EXIF metadata normalization",
    version=VERSION,
    lifespan=lifespan,
)

if settings.api.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register exception handlers
register_exception_handlers(app)

# Include routers
app.include_router(image.router, prefix="/api/image", tags=["Image"])
app.include_router(metadata.router, prefix="/api/metadata", tags=["Metadata"])
app.include_router(system.router, prefix="/api/system", tags=["System"])


# Root endpoint
@app.get("/")
async def root() -> VersionInfo:
    return VersionInfo(name="Image Gateway", version=VERSION, pillow_version=PIL.__version__)


# Health check endpoint
@app.get("/health")
async def health_check() -> HealthStats:
    return get_health_stats()


if __name__ == "__main__":
    reload_excludes = (
        ["*.log", "*.pyc", "__pycache__", ".git", ".venv", "venv"]
        if settings.system.debug
        else None
    )

    server_config = uvicorn.Config(
        "main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.system.debug,
        reload_excludes=reload_excludes,
        log_level=settings.system.log_level.lower(),
        loop="asyncio",
    )

    server = uvicorn.Server(server_config)

    try:
        server.run()
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        logger.info("Server exiting...")
