"""Nutrition entry model."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from lifetracker.database import Base
from lifetracker.models.mixins import TimestampMixin


class Nutrition(Base, TimestampMixin):
    """A food or drink logged by a user."""

    __tablename__ = "nutrition"
    __table_args__ = (CheckConstraint("calories > 0", name="ck_nutrition_calories_positive"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    category = Column(String(100), nullable=False)  # Free text: "fruit", "drink", ...
    calories = Column(Integer, nullable=False)
    image_url = Column(Text, nullable=False)

    # Relationships
    user = relationship("User", back_populates="nutritions")
