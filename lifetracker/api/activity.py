"""Activity statistics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from lifetracker.api.dependencies import get_activity_service, get_current_user
from lifetracker.models.user import User
from lifetracker.schemas.activity import ActivityResponse
from lifetracker.services.activity_service import ActivityService

router = APIRouter(prefix="/activity", tags=["activity"])


@router.get("", response_model=ActivityResponse)
async def get_activity(
    current_user: Annotated[User, Depends(get_current_user)],
    activity_service: Annotated[ActivityService, Depends(get_activity_service)],
):
    """Get calorie summary statistics for the current user."""
    return ActivityResponse.model_validate({"stats": activity_service.summary(current_user.id)})
