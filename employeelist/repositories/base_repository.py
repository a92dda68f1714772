"""
Base repository with generic CRUD operations for MongoDB.
All entity-specific repositories should inherit from this.

Driver errors (``pymongo.errors.PyMongoError``) are not caught here;
the service layer maps them to ``DatabaseError``.
"""
from typing import Optional, List, Dict, Any, Tuple
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from pymongo import ReturnDocument
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"


def utcnow() -> datetime:
    # MongoDB stores milliseconds; truncate so returned values match stored ones
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class BaseRepository:
    """
    Generic repository for MongoDB CRUD operations.

    Provides standard methods: create, find_by_id, find_all, update, delete.
    Documents are returned with ``_id`` rendered as a string ``id``.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with MongoDB collection.

        Args:
            collection: Motor AsyncIOMotorCollection instance
        """
        self.collection = collection

    @staticmethod
    def is_valid_id(doc_id: Any) -> bool:
        """Check identifier syntax without touching the database."""
        return isinstance(doc_id, str) and ObjectId.is_valid(doc_id)

    @staticmethod
    def _to_dict(document: Dict[str, Any]) -> Dict[str, Any]:
        if '_id' in document:
            document['id'] = str(document.pop('_id'))
        return document

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a new document.

        Args:
            document: Document data

        Returns:
            The stored document, including its new ``id`` and timestamps
        """
        now = utcnow()
        document = dict(document)
        document.setdefault(CREATED_AT, now)
        document.setdefault(UPDATED_AT, now)

        result = await self.collection.insert_one(document)
        logger.info(f"Created document in {self.collection.name}: {result.inserted_id}")

        created = dict(document)
        created['_id'] = result.inserted_id
        return self._to_dict(created)

    async def find_by_id(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Find document by ID.

        Returns:
            Document data or None if not found
        """
        document = await self.collection.find_one({"_id": ObjectId(doc_id)})
        return self._to_dict(document) if document else None

    async def find_all(
        self,
        filter_query: Optional[Dict[str, Any]] = None,
        sort: Optional[List[Tuple[str, int]]] = None
    ) -> List[Dict[str, Any]]:
        """
        Find all documents matching filter.

        Args:
            filter_query: MongoDB filter query (None for all documents)
            sort: List of (field, direction) tuples for sorting

        Returns:
            List of documents
        """
        cursor = self.collection.find(filter_query or {})

        if sort:
            cursor = cursor.sort(sort)

        documents = await cursor.to_list(length=None)
        return [self._to_dict(doc) for doc in documents]

    async def update(
        self,
        doc_id: str,
        update_data: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Atomically apply ``$set`` to a document and return its new state.

        Args:
            doc_id: Document ID
            update_data: Fields to set

        Returns:
            Updated document, or None if no document has this ID
        """
        fields = dict(update_data)
        fields[UPDATED_AT] = utcnow()

        document = await self.collection.find_one_and_update(
            {"_id": ObjectId(doc_id)},
            {"$set": fields},
            return_document=ReturnDocument.AFTER
        )

        if document is None:
            return None

        logger.info(f"Updated document in {self.collection.name}: {doc_id}")
        return self._to_dict(document)

    async def delete(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Delete document by ID.

        Returns:
            The removed document, or None if no document has this ID
        """
        document = await self.collection.find_one_and_delete({"_id": ObjectId(doc_id)})

        if document is None:
            return None

        logger.info(f"Deleted document from {self.collection.name}: {doc_id}")
        return self._to_dict(document)
