"""
CookBook API Routers.

All routers are imported here for easy access.
"""

from cookbook.routers.progress_updates import router as progress_updates_router

__all__ = [
    "progress_updates_router",
]
