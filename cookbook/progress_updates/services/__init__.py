"""Progress update services."""

from cookbook.progress_updates.services.progress_update_store import ProgressUpdateStore
from cookbook.progress_updates.services.progress_update_service import ProgressUpdateService

__all__ = [
    "ProgressUpdateStore",
    "ProgressUpdateService",
]
