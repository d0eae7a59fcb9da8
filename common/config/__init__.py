"""
Configuration module - pydantic-settings base class shared by applications.
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
