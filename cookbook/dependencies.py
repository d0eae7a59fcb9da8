"""
FastAPI dependencies for the CookBook application.

Wires every service at startup.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from cookbook.config import Settings
from cookbook.progress_updates.dependencies import (
    init_progress_update_services,
    get_progress_update_store,
)


def init_all_services(db: AsyncIOMotorDatabase, settings: Settings) -> None:
    """
    Initialize all services at application startup.

    Args:
        db: Main MongoDB database connection
        settings: Application settings
    """
    init_progress_update_services(
        db,
        collection_name=settings.PROGRESS_UPDATES_COLLECTION,
        allowed_template_types=settings.get_allowed_template_types(),
        content_max_length=settings.PROGRESS_CONTENT_MAX_LENGTH,
    )


async def ensure_all_indexes() -> None:
    """Create indexes for every initialized store."""
    await get_progress_update_store().ensure_indexes()
