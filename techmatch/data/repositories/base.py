"""
Base repository class and store interfaces.

Matching only reads from the external store, so repositories expose
read operations. The ``CandidateStore`` and ``JobPostingStore``
protocols are what the matching service depends on; the MongoDB
repositories and the in-memory stores both satisfy them.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, Protocol, TypeVar

from bson import ObjectId
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import PyMongoError

from techmatch.core.exceptions import UpstreamFetchError
from techmatch.data.database import DatabaseManager, get_database_manager
from techmatch.data.models import BaseDocument, CandidateProfile, JobPosting
from techmatch.utils.logger import get_logger

logger = get_logger(__name__)

# Type variable for document models
T = TypeVar("T", bound=BaseDocument)


class CandidateStore(Protocol):
    """Source of candidate profiles for matching."""

    async def fetch_candidates(self) -> list[CandidateProfile]:
        """Fetch every candidate profile that has a skills attribute."""
        ...

    async def get_candidate(self, candidate_id: str) -> Optional[CandidateProfile]:
        ...


class JobPostingStore(Protocol):
    """Source of job postings for matching."""

    async def get_posting(self, job_id: str) -> Optional[JobPosting]:
        ...

    async def fetch_active_postings(
        self, employer_id: Optional[str] = None
    ) -> list[JobPosting]:
        ...


class BaseRepository(ABC, Generic[T]):
    """
    Abstract base repository providing read operations.

    Subclasses must define the collection name and model class. Driver
    failures are raised as ``UpstreamFetchError``.
    """

    @property
    @abstractmethod
    def collection_name(self) -> str:
        """Name of the MongoDB collection."""
        pass

    @property
    @abstractmethod
    def model_class(self) -> type[T]:
        """Pydantic model class for this repository."""
        pass

    def __init__(self, db_manager: Optional[DatabaseManager] = None) -> None:
        """Initialize repository with database connection."""
        self._db_manager = db_manager or get_database_manager()

    # -------------------------------------------------------------------------
    # Collection Access
    # -------------------------------------------------------------------------

    def _get_async_collection(self) -> Any:
        """Get asynchronous collection instance."""
        return self._db_manager.get_async_collection(self.collection_name)

    # -------------------------------------------------------------------------
    # Document Conversion
    # -------------------------------------------------------------------------

    def _to_model(self, document: Optional[dict[str, Any]]) -> Optional[T]:
        """Convert a stored document to a model, or None if it cannot be read."""
        if document is None:
            return None
        try:
            return self.model_class.model_validate(document)
        except PydanticValidationError as e:
            logger.warning(
                f"Skipping malformed {self.collection_name} document "
                f"{document.get('_id', document.get('id'))}: {e.error_count()} invalid field(s)"
            )
            return None

    def _to_models(self, documents: list[dict[str, Any]]) -> list[T]:
        """Convert documents to models, skipping unreadable ones."""
        models = (self._to_model(doc) for doc in documents)
        return [model for model in models if model is not None]

    # -------------------------------------------------------------------------
    # Asynchronous Read Operations
    # -------------------------------------------------------------------------

    async def find_all_async(
        self,
        query: dict[str, Any],
        sort_by: Optional[str] = None,
        sort_order: int = -1,
    ) -> list[T]:
        """Find every document matching a query, without pagination."""
        try:
            collection = self._get_async_collection()
            cursor = collection.find(query)
            if sort_by:
                cursor = cursor.sort(sort_by, sort_order)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Query on {self.collection_name} failed: {e}")
            raise UpstreamFetchError(str(e)) from e
        return self._to_models(documents)

    async def find_one_async(self, query: dict[str, Any]) -> Optional[T]:
        """Find a single document matching a query."""
        try:
            document = await self._get_async_collection().find_one(query)
        except PyMongoError as e:
            logger.error(f"Lookup on {self.collection_name} failed: {e}")
            raise UpstreamFetchError(str(e)) from e
        return self._to_model(document)

    async def get_by_id_async(self, id_value: str) -> Optional[T]:
        """Get a document by its stored identifier."""
        return await self.find_one_async({"_id": self._to_id_query(id_value)})

    @staticmethod
    def _to_id_query(id_value: str) -> Any:
        """Match both ObjectId and plain string identifiers."""
        if ObjectId.is_valid(id_value):
            return {"$in": [ObjectId(id_value), id_value]}
        return id_value
