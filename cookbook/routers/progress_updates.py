"""
FastAPI router for Progress Update endpoints.

Provides endpoints for creating a progress update and listing a user's
updates.
"""

import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends

from cookbook.progress_updates.dependencies import (
    get_progress_update_service,
    get_progress_update_store,
)
from cookbook.progress_updates.exceptions import (
    InvalidProgressUpdateError,
    ProgressUpdateStoreError,
)
from cookbook.progress_updates.models import ProgressUpdateRequest, ProgressUpdateResponse
from cookbook.progress_updates.services.progress_update_service import ProgressUpdateService
from cookbook.progress_updates.services.progress_update_store import ProgressUpdateStore
from common.utils import BadRequestException, InternalServerException

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress-updates", tags=["progress-updates"])


@router.post("/create", response_model=ProgressUpdateResponse)
async def create_progress_update(
    body: ProgressUpdateRequest,
    progress_update_service: Annotated[ProgressUpdateService, Depends(get_progress_update_service)],
):
    """
    Create a progress update.

    Invalid input returns 400; a failed database write returns 500.
    """
    try:
        progress_update = await progress_update_service.create_progress_update(
            user_id=body.userId,
            template_type=body.templateType,
            content=body.content,
            learning_plan_id=body.learningPlanId,
        )
    except InvalidProgressUpdateError as e:
        raise BadRequestException(message=e.message, code="INVALID_PROGRESS_UPDATE")
    except ProgressUpdateStoreError as e:
        raise InternalServerException(message=e.message, code="PROGRESS_UPDATE_STORE_ERROR")

    return ProgressUpdateResponse(**progress_update)


@router.get("/user/{user_id}", response_model=List[ProgressUpdateResponse])
async def get_progress_updates_by_user_id(
    user_id: str,
    progress_update_store: Annotated[ProgressUpdateStore, Depends(get_progress_update_store)],
):
    """Get all progress updates for a user, oldest first."""
    updates = await progress_update_store.find_by_user_id(user_id)
    return [ProgressUpdateResponse(**u) for u in updates]
