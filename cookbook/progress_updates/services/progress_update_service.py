"""
Progress update creation service.

Validates input for a new progress update and persists it through
ProgressUpdateStore.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, List, Dict, Any

from pymongo.errors import PyMongoError

from cookbook.progress_updates.exceptions import (
    InvalidProgressUpdateError,
    ProgressUpdateStoreError,
)
from cookbook.progress_updates.services.progress_update_store import ProgressUpdateStore

logger = logging.getLogger(__name__)


class ProgressUpdateService:
    """
    Creates progress updates.

    Records are write-once: there is no update or delete operation.
    """

    def __init__(
        self,
        store: ProgressUpdateStore,
        allowed_template_types: Optional[List[str]] = None,
        content_max_length: Optional[int] = None,
    ):
        """
        Initialize ProgressUpdateService.

        Args:
            store: Storage for progress update documents
            allowed_template_types: Accepted template types; None or empty accepts any
            content_max_length: Maximum content length; None for no limit
        """
        self._store = store
        self._allowed_template_types = allowed_template_types or []
        self._content_max_length = content_max_length

    async def create_progress_update(
        self,
        user_id: Optional[str],
        template_type: Optional[str],
        content: Optional[str],
        learning_plan_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Create and persist a new progress update.

        Args:
            user_id: Owner of the update
            template_type: Template used to render the content
            content: Free-text progress report (may be empty)
            learning_plan_id: Optional learning plan the update belongs to

        Returns:
            Created progress update with its new id

        Raises:
            InvalidProgressUpdateError: Input failed validation
            ProgressUpdateStoreError: Database write failed
        """
        user_id = self._require_text(user_id, "User id")
        template_type = self._require_text(template_type, "Template type")

        if self._allowed_template_types and template_type not in self._allowed_template_types:
            raise InvalidProgressUpdateError(
                f"Unsupported template type '{template_type}'. "
                f"Expected one of: {', '.join(self._allowed_template_types)}"
            )

        if content is None:
            raise InvalidProgressUpdateError("Content is required")

        if self._content_max_length is not None and len(content) > self._content_max_length:
            raise InvalidProgressUpdateError(
                f"Content must be at most {self._content_max_length} characters"
            )

        if learning_plan_id is not None:
            learning_plan_id = learning_plan_id if learning_plan_id.strip() else None

        progress_doc = {
            "userId": user_id,
            "templateType": template_type,
            "content": content,
            "learningPlanId": learning_plan_id,
            "createdAt": datetime.now(timezone.utc),
        }

        try:
            progress_update = await self._store.save(progress_doc)
        except PyMongoError as e:
            logger.error(f"Failed to save progress update for user {user_id}: {e}")
            raise ProgressUpdateStoreError(f"Could not save progress update: {e}") from e

        logger.info(
            f"Created progress update {progress_update['id']} for user {user_id} "
            f"(template: {template_type}, learning plan: {learning_plan_id})"
        )
        return progress_update

    @staticmethod
    def _require_text(value: Optional[str], label: str) -> str:
        if value is None or not value.strip():
            raise InvalidProgressUpdateError(f"{label} is required")
        return value
