"""Nutrition API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from lifetracker.api.dependencies import (
    authed_user_owns_nutrition,
    get_current_user,
    get_nutrition_service,
)
from lifetracker.models.nutrition import Nutrition
from lifetracker.models.user import User
from lifetracker.schemas.nutrition import (
    NutritionCreateRequest,
    NutritionEnvelope,
    NutritionListResponse,
    NutritionResponse,
)
from lifetracker.services.nutrition_service import NutritionService

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


@router.get("", response_model=NutritionListResponse)
async def list_nutrition(
    current_user: Annotated[User, Depends(get_current_user)],
    nutrition_service: Annotated[NutritionService, Depends(get_nutrition_service)],
):
    """Get all nutrition entries for the current user."""
    entries = nutrition_service.list_for_user(current_user.id)
    return NutritionListResponse(
        nutritions=[NutritionResponse.model_validate(entry) for entry in entries]
    )


@router.post("", response_model=NutritionEnvelope, status_code=status.HTTP_201_CREATED)
async def create_nutrition(
    request: NutritionCreateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    nutrition_service: Annotated[NutritionService, Depends(get_nutrition_service)],
):
    """Log a nutrition entry for the current user."""
    entry = nutrition_service.create(request.nutrition.model_dump(), current_user.id)
    return NutritionEnvelope(nutrition=NutritionResponse.model_validate(entry))


@router.get("/{nutrition_id}", response_model=NutritionEnvelope)
async def get_nutrition(
    nutrition: Annotated[Nutrition, Depends(authed_user_owns_nutrition)],
):
    """Get a nutrition entry owned by the current user."""
    return NutritionEnvelope(nutrition=NutritionResponse.model_validate(nutrition))
