# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from .api import user_router, register_exception_handlers
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .infrastructure.db.mongo_connection import MongoConnection

logger = logging.getLogger(__name__)

ENV_PATH = Path(__file__).resolve().parent.parent / ".env"


def load_environment() -> None:
    """Load variables from the project's .env file without overriding the process environment."""
    load_dotenv(ENV_PATH)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Opens the MongoDB connection, ensures the unique email index and builds
    the DI container on startup; closes the connection on shutdown. When a
    container was injected into create_application() nothing is opened.
    """
    connection: Optional[MongoConnection] = None
    
    if getattr(app.state, "container", None) is None:
        settings = get_settings()
        connection = MongoConnection.from_settings(settings)
        connection.connect()
        try:
            await connection.ensure_indexes()
        except Exception as e:
            # Requests still run; uniqueness then relies on the pre-insert lookup only
            logger.error(f"Failed to ensure MongoDB indexes: {e}", exc_info=True)
        app.state.container = DIContainer(connection)
        logger.info("Application startup complete")
    
    yield
    
    if connection is not None:
        connection.close()
        app.state.container = None
    logger.info("Application shutdown complete")


def create_application(container: Optional[BaseContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Exception handlers translating domain errors to HTTP responses
    - API route registration
    
    Args:
        container: Pre-built DI container; when given, the lifespan does not
            open a database connection
    
    Returns:
        Configured FastAPI application instance
    """
    load_environment()
    
    application = FastAPI(
        title="Users API",
        version="1.0.0",
        description="REST API for managing user records",
        lifespan=lifespan
    )
    application.state.container = container
    
    register_exception_handlers(application)
    application.include_router(user_router, prefix="/api/users")
    
    return application


def run() -> None:
    """Configure logging and serve the application on the configured port."""
    import uvicorn
    
    load_environment()
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(f"Starting Users API on {settings.host}:{settings.port}")
    uvicorn.run(
        create_application(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


# Create application instance
app = create_application()
