"""SQLAlchemy models."""

from lifetracker.models.nutrition import Nutrition
from lifetracker.models.user import User

__all__ = [
    "User",
    "Nutrition",
]
