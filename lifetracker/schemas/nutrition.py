"""Nutrition schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NutritionCreate(BaseModel):
    """Create a nutrition entry. Presence is checked by the nutrition service."""

    name: str | None = Field(None, max_length=255)
    category: str | None = Field(None, max_length=100)
    calories: int | None = None
    image_url: str | None = None


class NutritionCreateRequest(BaseModel):
    """Request envelope for creating a nutrition entry."""

    nutrition: NutritionCreate


class NutritionResponse(BaseModel):
    """Nutrition entry response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    category: str
    calories: int
    image_url: str
    user_id: int
    created_at: datetime | None = None


class NutritionEnvelope(BaseModel):
    """A single nutrition entry."""

    nutrition: NutritionResponse


class NutritionListResponse(BaseModel):
    """All nutrition entries for the current user."""

    nutritions: list[NutritionResponse]
