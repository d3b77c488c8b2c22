"""User service: registration, login and lookups."""

import logging
import re

from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from lifetracker.errors import BadRequestError, NotFoundError, UnauthorizedError
from lifetracker.models.user import User
from lifetracker.services.auth import dummy_verify_password, get_password_hash, verify_password

logger = logging.getLogger(__name__)

# Something@something.something, no whitespace in any part
EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")

INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


class UserService:
    """Service for user accounts and credential checks."""

    def __init__(self, db: Session):
        self.db = db

    def register(
        self,
        email: str | None,
        username: str | None,
        first_name: str | None,
        last_name: str | None,
        password: str | None,
    ) -> User:
        """Create a new user after validating the input.

        Raises BadRequestError for missing fields, a malformed email, or an
        email/username that is already taken. Nothing is written in those cases.
        """
        if not all([email, username, first_name, last_name, password]):
            raise BadRequestError("Missing required fields")
        if not EMAIL_PATTERN.search(email):
            raise BadRequestError(f"Invalid email: {email}")

        existing_user = (
            self.db.query(User)
            .filter(or_(User.email == email, User.username == username))
            .order_by((User.email == email).desc())
            .first()
        )
        if existing_user:
            if existing_user.email == email:
                raise BadRequestError(f"Duplicate email: {email}")
            raise BadRequestError(f"Duplicate username: {username}")

        user = User(
            email=email,
            username=username,
            first_name=first_name,
            last_name=last_name,
            password_hash=get_password_hash(password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration
            self.db.rollback()
            raise BadRequestError("Duplicate email or username") from e
        self.db.refresh(user)

        logger.info(f"Registered user {user.id} ({user.username})")
        return user

    def login(self, email: str | None, password: str | None) -> User:
        """Check an email/password pair and return the matching user.

        Unknown emails and wrong passwords fail with the same message.
        """
        if not email or not password:
            raise UnauthorizedError("Missing credentials")

        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            dummy_verify_password()
            logger.warning("Failed login attempt")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)
        if not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        return user

    def fetch_by_email(self, email: str) -> User:
        """Get a user by email, including the password hash. Internal use only."""
        user = self.db.query(User).filter(User.email == email).first()
        if user is None:
            raise NotFoundError(f"No account exists with email: {email}")
        return user

    def fetch_by_id(self, user_id: int) -> User:
        """Get a user by id."""
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError(f"No account exists with id: {user_id}")
        return user
