"""
Progress Updates

Lets a user record progress against a learning plan and list their own
updates. Each update names a template type that tells the client how to
render its content.
"""

from cookbook.progress_updates.services.progress_update_store import ProgressUpdateStore
from cookbook.progress_updates.services.progress_update_service import ProgressUpdateService
from cookbook.progress_updates.exceptions import (
    ProgressUpdateError,
    InvalidProgressUpdateError,
    ProgressUpdateStoreError,
)

__all__ = [
    "ProgressUpdateStore",
    "ProgressUpdateService",
    "ProgressUpdateError",
    "InvalidProgressUpdateError",
    "ProgressUpdateStoreError",
]
