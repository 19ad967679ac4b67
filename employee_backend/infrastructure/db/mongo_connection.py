# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

# Local application imports
from ...core.config import Settings
from ...core.exceptions import PersistenceFailure

logger = logging.getLogger(__name__)

USER_COLLECTION = "users"
EMPLOYEE_COLLECTION = "employees"

# Process-wide client, owned by the application lifespan
_mongo_client: Optional[AsyncIOMotorClient] = None


async def connect_database(settings: Settings) -> AsyncIOMotorDatabase:
    """
    Open the MongoDB client and verify the server answers before serving requests.

    Every operation issued through the client is bounded by
    ``settings.mongo_timeout_ms``.

    Args:
        settings: Application settings (URI, database name, timeout)

    Returns:
        MongoDB database handle to inject into repositories

    Raises:
        PersistenceFailure: If the server cannot be reached
    """
    global _mongo_client

    client = AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_timeout_ms,
        connectTimeoutMS=settings.mongo_timeout_ms,
        timeoutMS=settings.mongo_timeout_ms,
    )
    try:
        await client.admin.command("ping")
    except PyMongoError as e:
        client.close()
        logger.error(f"Failed to connect to MongoDB: {e}")
        raise PersistenceFailure(f"Failed to connect to MongoDB: {e}", operation="connect") from e

    _mongo_client = client
    logger.info(f"Connected to MongoDB database '{settings.mongo_database_name}'")
    return client[settings.mongo_database_name]


def close_database() -> None:
    """Close the process-wide client if one is open"""
    global _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
        _mongo_client = None
        logger.info("MongoDB connection closed")
