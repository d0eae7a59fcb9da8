"""
FastAPI dependencies for Progress Updates.

Provides dependency injection for progress update services.
"""

from typing import Optional, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from cookbook.progress_updates.services.progress_update_store import ProgressUpdateStore
from cookbook.progress_updates.services.progress_update_service import ProgressUpdateService


_progress_update_store: Optional[ProgressUpdateStore] = None
_progress_update_service: Optional[ProgressUpdateService] = None


def init_progress_update_services(
    db: AsyncIOMotorDatabase,
    collection_name: str = "progressUpdates",
    allowed_template_types: Optional[List[str]] = None,
    content_max_length: Optional[int] = None,
) -> None:
    """
    Initialize progress update services with database connection.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        collection_name: Collection holding progress updates
        allowed_template_types: Accepted template types; empty accepts any
        content_max_length: Maximum content length
    """
    global _progress_update_store, _progress_update_service

    _progress_update_store = ProgressUpdateStore(db=db, collection_name=collection_name)
    _progress_update_service = ProgressUpdateService(
        store=_progress_update_store,
        allowed_template_types=allowed_template_types,
        content_max_length=content_max_length,
    )


def get_progress_update_store() -> ProgressUpdateStore:
    """Get progress update store instance."""
    if _progress_update_store is None:
        raise RuntimeError("Progress update services not initialized. Call init_progress_update_services first.")
    return _progress_update_store


def get_progress_update_service() -> ProgressUpdateService:
    """Get progress update service instance."""
    if _progress_update_service is None:
        raise RuntimeError("Progress update services not initialized. Call init_progress_update_services first.")
    return _progress_update_service
