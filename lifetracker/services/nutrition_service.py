"""Nutrition service for logging and reading a user's entries."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.orm import Session

from lifetracker.errors import BadRequestError, NotFoundError
from lifetracker.models.nutrition import Nutrition

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "category", "calories", "image_url")


class NutritionService:
    """Service for nutrition entries. Every entry belongs to exactly one user."""

    def __init__(self, db: Session):
        self.db = db

    def create(
        self,
        fields: dict[str, Any],
        owner_id: int | None,
        created_at: datetime | None = None,
    ) -> Nutrition:
        """Insert a nutrition entry for a user.

        created_at defaults to the database's current time. An explicit value
        is stored in UTC so per-day grouping sees the right calendar day.
        """
        if not owner_id or any(not fields.get(field) for field in REQUIRED_FIELDS):
            raise BadRequestError("Missing required field")
        calories = fields["calories"]
        if not isinstance(calories, int) or isinstance(calories, bool) or calories < 1:
            raise BadRequestError("Calories must be a positive integer")

        entry = Nutrition(
            name=fields["name"],
            category=fields["category"],
            calories=calories,
            image_url=fields["image_url"],
            user_id=owner_id,
        )
        if created_at is not None:
            if created_at.tzinfo is None:
                created_at = created_at.replace(tzinfo=UTC)
            entry.created_at = created_at.astimezone(UTC)

        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)

        logger.debug(f"Created nutrition {entry.id} for user {owner_id}")
        return entry

    def fetch_by_id(self, nutrition_id: int) -> Nutrition:
        """Get a nutrition entry by id, regardless of owner.

        Callers that act on behalf of a user go through the ownership check.
        """
        entry = self.db.query(Nutrition).filter(Nutrition.id == nutrition_id).first()
        if entry is None:
            raise NotFoundError(f"No nutrition found with id {nutrition_id}")
        return entry

    def list_for_user(self, owner_id: int) -> list[Nutrition]:
        """Get all nutrition entries owned by a user, oldest id first."""
        return (
            self.db.query(Nutrition)
            .filter(Nutrition.user_id == owner_id)
            .order_by(Nutrition.id)
            .all()
        )
