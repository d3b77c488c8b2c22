"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from lifetracker.database import Base
from lifetracker.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)

    # Relationships
    nutritions = relationship(
        "Nutrition",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Nutrition.id",
    )
