"""Activity service computing calorie summary statistics."""

from datetime import date
from typing import Any

from sqlalchemy import func, literal_column
from sqlalchemy.orm import Session

from lifetracker.models.nutrition import Nutrition


class ActivityService:
    """Grouped calorie aggregates over one user's nutrition entries.

    Every query filters on the user id in SQL; rows belonging to other users
    never leave the database.
    """

    def __init__(self, db: Session):
        self.db = db

    def _utc_day(self):
        """SQL expression for the UTC calendar day of an entry's created_at."""
        if self.db.get_bind().dialect.name == "postgresql":
            # Literal, not a bind param, so the SELECT and GROUP BY expressions match
            return func.date(func.timezone(literal_column("'UTC'"), Nutrition.created_at))
        # SQLite keeps timestamps as UTC wall time
        return func.date(Nutrition.created_at)

    def daily_calorie_summary(self, user_id: int) -> list[dict[str, Any]]:
        """Total calories per UTC day, oldest day first."""
        day = self._utc_day()
        rows = (
            self.db.query(day.label("date"), func.sum(Nutrition.calories).label("total"))
            .filter(Nutrition.user_id == user_id)
            .group_by(day)
            .order_by(day)
            .all()
        )
        return [
            {
                "date": day_value if isinstance(day_value, date) else date.fromisoformat(day_value),
                "totalCaloriesPerDay": int(total),
            }
            for day_value, total in rows
        ]

    def category_calorie_summary(self, user_id: int) -> list[dict[str, Any]]:
        """Mean calories per entry for each category, rounded to one decimal."""
        rows = (
            self.db.query(
                Nutrition.category,
                func.round(func.avg(Nutrition.calories), 1).label("average"),
            )
            .filter(Nutrition.user_id == user_id)
            .group_by(Nutrition.category)
            .order_by(Nutrition.category)
            .all()
        )
        return [
            {"category": category, "avgCaloriesPerCategory": float(average)}
            for category, average in rows
        ]

    def summary(self, user_id: int) -> dict[str, Any]:
        """All calorie statistics for a user, nested the way the API returns them."""
        return {
            "nutrition": {
                "calories": {
                    "perDay": self.daily_calorie_summary(user_id),
                    "perCategory": self.category_calorie_summary(user_id),
                }
            }
        }
