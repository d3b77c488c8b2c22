"""Activity summary schemas."""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class DailyCalories(BaseModel):
    """Total calories logged on one UTC day."""

    model_config = ConfigDict(populate_by_name=True)

    date: datetime.date
    total_calories_per_day: int = Field(alias="totalCaloriesPerDay")


class CategoryCalories(BaseModel):
    """Average calories per entry within a category."""

    model_config = ConfigDict(populate_by_name=True)

    category: str
    avg_calories_per_category: float = Field(alias="avgCaloriesPerCategory")


class CalorieStats(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    per_day: list[DailyCalories] = Field(alias="perDay")
    per_category: list[CategoryCalories] = Field(alias="perCategory")


class NutritionStats(BaseModel):
    calories: CalorieStats


class ActivityStats(BaseModel):
    nutrition: NutritionStats


class ActivityResponse(BaseModel):
    """Summary statistics for the current user."""

    stats: ActivityStats
