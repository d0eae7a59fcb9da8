"""
Progress update storage.

Handles progress update document storage and retrieval.
"""

import logging
from typing import List, Dict, Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING

logger = logging.getLogger(__name__)


class ProgressUpdateStore:
    """
    Handles progress update storage and retrieval.
    Pure CRUD - no business logic.
    """

    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str = "progressUpdates"):
        """
        Initialize ProgressUpdateStore.

        Args:
            db: MongoDB database connection
            collection_name: Collection holding progress update documents
        """
        self._db = db
        self._collection = db[collection_name]

    async def ensure_indexes(self) -> None:
        """Create the index backing find_by_user_id."""
        await self._collection.create_index(
            [("userId", ASCENDING), ("_id", ASCENDING)],
            name="userId_id",
        )

    async def save(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a progress update document.

        Every call inserts a new document. An "_id" already present on the
        document is kept, otherwise MongoDB assigns one.

        Args:
            document: Progress update fields in stored (camelCase) form

        Returns:
            Saved progress update in API form
        """
        doc = dict(document)
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id

        logger.info(f"Saved progress update {result.inserted_id} for user {doc.get('userId')}")
        return self._format_progress_update(doc)

    async def find_by_user_id(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get all progress updates for a user, oldest first.

        Args:
            user_id: User ID

        Returns:
            List of progress update dicts in insertion order
        """
        cursor = self._collection.find({"userId": user_id})
        cursor = cursor.sort("_id", ASCENDING)

        updates = await cursor.to_list(length=None)
        logger.debug(f"Found {len(updates)} progress updates for user {user_id}")
        return [self._format_progress_update(u) for u in updates]

    @staticmethod
    def _format_progress_update(doc: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "id": str(doc["_id"]),
            "userId": doc.get("userId"),
            "templateType": doc.get("templateType"),
            "content": doc.get("content"),
            "learningPlanId": doc.get("learningPlanId"),
            "createdAt": doc.get("createdAt"),
        }
