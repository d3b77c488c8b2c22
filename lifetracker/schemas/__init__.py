"""Pydantic schemas for API requests and responses."""

from lifetracker.schemas.activity import (
    ActivityResponse,
    ActivityStats,
    CalorieStats,
    CategoryCalories,
    DailyCalories,
)
from lifetracker.schemas.auth import AuthResponse, MeResponse, UserLogin, UserRegister, UserResponse
from lifetracker.schemas.nutrition import (
    NutritionCreate,
    NutritionCreateRequest,
    NutritionEnvelope,
    NutritionListResponse,
    NutritionResponse,
)

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "MeResponse",
    "NutritionCreate",
    "NutritionCreateRequest",
    "NutritionResponse",
    "NutritionEnvelope",
    "NutritionListResponse",
    "DailyCalories",
    "CategoryCalories",
    "CalorieStats",
    "ActivityStats",
    "ActivityResponse",
]
