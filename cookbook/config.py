"""
CookBook application settings.

Extends the base settings with CookBook-specific configuration.
"""

from typing import Optional

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """CookBook-specific settings."""

    # ==========================================================================
    # Progress Updates
    # ==========================================================================
    PROGRESS_UPDATES_COLLECTION: str = "progressUpdates"

    # Comma-separated template types accepted on create; empty accepts any
    ALLOWED_TEMPLATE_TYPES: str = ""

    # Maximum content length on create; unset means no limit
    PROGRESS_CONTENT_MAX_LENGTH: Optional[int] = None

    def get_allowed_template_types(self) -> list:
        """Parse ALLOWED_TEMPLATE_TYPES into a list."""
        return [t.strip() for t in self.ALLOWED_TEMPLATE_TYPES.split(",") if t.strip()]


# Global settings instance
settings = Settings()
