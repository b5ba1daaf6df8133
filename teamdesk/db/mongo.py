import logging
import threading

from motor.motor_asyncio import AsyncIOMotorClient

from teamdesk.core.config import get_settings

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_client_lock = threading.Lock()


def get_client() -> AsyncIOMotorClient:
    """Get or create the process-wide Motor client."""
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                settings = get_settings()
                _client = AsyncIOMotorClient(
                    settings.mongodb_uri,
                    serverSelectionTimeoutMS=5000,
                    connectTimeoutMS=10000,
                    retryWrites=True,
                )
                logger.info("MongoDB client created")
    return _client


def close_client() -> None:
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None
            logger.info("MongoDB client closed")


def get_db():
    # database named in the connection string wins over MONGODB_DB
    return get_client().get_default_database(default=get_settings().mongodb_db)


def get_teams_collection():
    """
    FastAPI dependency that returns the teams collection
    """
    return get_db()[get_settings().teams_collection]
