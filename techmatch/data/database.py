"""
MongoDB connection management for TechMatch.

Matching reads run on an asynchronous Motor client. Administrative work
(health checks, index creation) from the CLI and the server entry point
uses a synchronous PyMongo client. Both are created lazily.
"""

from typing import Any, Optional
from urllib.parse import quote_plus

from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ASCENDING, DESCENDING, IndexModel, MongoClient
from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError

from techmatch.utils.config import DatabaseSettings, get_settings
from techmatch.utils.logger import get_logger

logger = get_logger(__name__)

# Fail fast when the database is unreachable instead of hanging a request
CLIENT_TIMEOUT_MS = 5000

PROFILE_INDEXES = [
    IndexModel([("user_type", ASCENDING)]),
    IndexModel([("user_id", ASCENDING)]),
]

JOB_POSTING_INDEXES = [
    IndexModel([("status", ASCENDING), ("created_at", DESCENDING)]),
    IndexModel(
        [("employer_id", ASCENDING), ("status", ASCENDING), ("created_at", DESCENDING)]
    ),
]


def build_connection_uri(db_settings: DatabaseSettings) -> str:
    """
    Build a MongoDB URI from settings.

    Credentials are URL-encoded; hosts containing shell metacharacters
    are rejected.
    """
    host = db_settings.host.strip()
    if not host or any(c in host for c in ";&|$`"):
        raise ValueError(f"Invalid database host: {host!r}")

    auth = ""
    if db_settings.username and db_settings.password:
        auth = f"{quote_plus(db_settings.username)}:{quote_plus(db_settings.password)}@"

    return f"mongodb://{auth}{host}:{db_settings.port}"


class DatabaseManager:
    """Holds the MongoDB clients for one database."""

    def __init__(self, db_settings: Optional[DatabaseSettings] = None) -> None:
        self._settings = db_settings or get_settings().database
        self._uri = build_connection_uri(self._settings)
        self._sync_client: Optional[MongoClient] = None
        self._async_client: Optional[AsyncIOMotorClient] = None

    @property
    def database_name(self) -> str:
        return self._settings.name

    # -------------------------------------------------------------------------
    # Clients
    # -------------------------------------------------------------------------

    def get_sync_client(self) -> MongoClient:
        """Get or create the synchronous client used for admin tasks."""
        if self._sync_client is None:
            logger.info(f"Connecting to MongoDB at {self._settings.host}:{self._settings.port}")
            self._sync_client = MongoClient(
                self._uri,
                serverSelectionTimeoutMS=CLIENT_TIMEOUT_MS,
                connectTimeoutMS=CLIENT_TIMEOUT_MS,
            )
        return self._sync_client

    def get_async_client(self) -> AsyncIOMotorClient:
        """Get or create the asynchronous client used for matching reads."""
        if self._async_client is None:
            self._async_client = AsyncIOMotorClient(
                self._uri,
                serverSelectionTimeoutMS=CLIENT_TIMEOUT_MS,
                connectTimeoutMS=CLIENT_TIMEOUT_MS,
            )
        return self._async_client

    def get_async_collection(self, collection_name: str) -> Any:
        """Get an asynchronous collection in the configured database."""
        return self.get_async_client()[self.database_name][collection_name]

    # -------------------------------------------------------------------------
    # Administration
    # -------------------------------------------------------------------------

    def check_sync_connection(self) -> bool:
        """Ping the server; False if it cannot be reached."""
        try:
            self.get_sync_client().admin.command("ping")
            return True
        except (ConnectionFailure, ServerSelectionTimeoutError) as e:
            logger.error(f"MongoDB ping failed: {e}")
            self.close_all()
            return False

    def ensure_indexes(self) -> None:
        """Create the indexes behind the candidate and job posting queries."""
        db = self.get_sync_client()[self.database_name]
        db[self._settings.profiles_collection].create_indexes(PROFILE_INDEXES)
        db[self._settings.job_postings_collection].create_indexes(JOB_POSTING_INDEXES)
        logger.info(
            f"Indexes ensured on {self._settings.profiles_collection} "
            f"and {self._settings.job_postings_collection}"
        )

    def close_all(self) -> None:
        """Close any open clients."""
        for client in (self._sync_client, self._async_client):
            if client is not None:
                client.close()
        self._sync_client = None
        self._async_client = None


# Global database manager instance
_db_manager: Optional[DatabaseManager] = None


def get_database_manager() -> DatabaseManager:
    """Get the global database manager instance."""
    global _db_manager
    if _db_manager is None:
        _db_manager = DatabaseManager()
    return _db_manager
