# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, employee_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import DIContainer, reset_container, set_container
from .domain.repositories.user_repository import UserRepository
from .infrastructure.db.mongo_connection import close_database, connect_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connects to MongoDB and builds the DI container before the first
    request is accepted. A failed connection aborts startup.
    """
    settings = get_settings()
    settings.validate()

    try:
        database = await connect_database(settings)
    except Exception as e:
        logger.error(f"Startup aborted, database unavailable: {e}")
        raise

    container = DIContainer(database=database, settings=settings)
    await container.get(UserRepository).ensure_indexes()
    set_container(container)
    logger.info("Employee backend ready to accept requests")

    yield

    reset_container()
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    configure_logging(settings.log_level)

    application = FastAPI(
        title="Employee Backend API",
        version="1.0.0",
        description="User signup/login and token-gated employee records",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @application.get("/")
    async def root():
        return {"status": "Employee Backend API Running"}

    application.include_router(auth_router)
    application.include_router(employee_router, prefix="/employees")

    return application


# Create application instance
app = create_application()
