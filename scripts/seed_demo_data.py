#!/usr/bin/env python3
"""Seed demo data.

Creates a demo user with a few days of nutrition entries so the activity
page has something to show.

Usage:
    # From project root, against the database configured in .env / DATABASE_URL:
    python scripts/seed_demo_data.py
"""

import os
import sys
from datetime import UTC, datetime, timedelta

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from lifetracker.database import SessionLocal, init_db
from lifetracker.models import User
from lifetracker.services.nutrition_service import NutritionService
from lifetracker.services.user_service import UserService

DEMO_EMAIL = "demo@example.com"
DEMO_USERNAME = "demo"
DEMO_PASSWORD = "demopass123"

# (days ago, name, category, calories)
DEMO_ENTRIES = [
    (2, "Oatmeal", "breakfast", 300),
    (2, "Orange juice", "drink", 110),
    (2, "Chicken salad", "lunch", 520),
    (1, "Greek yogurt", "breakfast", 150),
    (1, "Latte", "drink", 190),
    (1, "Apple", "fruit", 95),
    (1, "Salmon and rice", "dinner", 640),
    (0, "Banana", "fruit", 105),
    (0, "Bagel", "breakfast", 280),
]

IMAGE_URL = "https://images.example.com/food/{slug}.jpg"


def seed_demo_data():
    """Seed the database with a demo user and their entries."""
    init_db()
    session = SessionLocal()

    try:
        # Check if demo user already exists
        existing_user = session.query(User).filter_by(email=DEMO_EMAIL).first()
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            # Entries go with the user (cascade)
            session.delete(existing_user)
            session.commit()

        print("Creating demo user...")
        user = UserService(session).register(
            email=DEMO_EMAIL,
            username=DEMO_USERNAME,
            first_name="Demo",
            last_name="User",
            password=DEMO_PASSWORD,
        )

        print("Creating nutrition entries...")
        nutrition_service = NutritionService(session)
        today = datetime.now(UTC).replace(hour=12, minute=0, second=0, microsecond=0)
        for days_ago, name, category, calories in DEMO_ENTRIES:
            nutrition_service.create(
                {
                    "name": name,
                    "category": category,
                    "calories": calories,
                    "image_url": IMAGE_URL.format(slug=name.lower().replace(" ", "-")),
                },
                user.id,
                created_at=today - timedelta(days=days_ago),
            )

        print(f"Demo data seeded successfully! Log in as {DEMO_EMAIL} / {DEMO_PASSWORD}")

    except Exception as e:
        session.rollback()
        print(f"Error seeding demo data: {e}")
        raise
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
