"""
Pydantic models for Progress Update request/response validation.

Field names are camelCase to match the JSON the web client sends.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel


class ProgressUpdateRequest(BaseModel):
    """
    Request body for creating a progress update.

    Only types are checked here. Presence and blank values are checked by
    ProgressUpdateService so every invalid create fails the same way.
    """
    userId: Optional[str] = None
    templateType: Optional[str] = None
    content: Optional[str] = None
    learningPlanId: Optional[str] = None


class ProgressUpdateResponse(BaseModel):
    """Progress update in API responses."""
    id: str
    userId: str
    templateType: str
    content: str
    learningPlanId: Optional[str] = None
    createdAt: Optional[datetime] = None
