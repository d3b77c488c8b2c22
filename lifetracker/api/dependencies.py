"""FastAPI dependencies for sessions, ownership checks and services.

Authentication is split in two steps. ``parse_authorization_header`` reads an
optional bearer token and never rejects a request; ``require_authenticated_user``
turns a missing identity into a 401. Routes that need a user compose both.
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from lifetracker.database import get_db
from lifetracker.errors import ForbiddenError, NotFoundError, UnauthorizedError
from lifetracker.models.nutrition import Nutrition
from lifetracker.models.user import User
from lifetracker.services.activity_service import ActivityService
from lifetracker.services.auth import decode_access_token
from lifetracker.services.nutrition_service import NutritionService
from lifetracker.services.user_service import UserService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def parse_authorization_header(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> dict | None:
    """Get the session claim from the bearer token, or None if there is none."""
    if credentials is None or not credentials.credentials:
        return None
    return decode_access_token(credentials.credentials)


def require_authenticated_user(
    claim: Annotated[dict | None, Depends(parse_authorization_header)],
) -> dict:
    """Reject the request unless it carries a valid session claim."""
    if not claim or not claim.get("email"):
        raise UnauthorizedError("Not logged in")
    return claim


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service with dependencies."""
    return UserService(db)


def get_nutrition_service(
    db: Annotated[Session, Depends(get_db)],
) -> NutritionService:
    """Get nutrition service with dependencies."""
    return NutritionService(db)


def get_activity_service(
    db: Annotated[Session, Depends(get_db)],
) -> ActivityService:
    """Get activity service with dependencies."""
    return ActivityService(db)


def get_current_user(
    claim: Annotated[dict, Depends(require_authenticated_user)],
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> User:
    """Get the current authenticated user from the session claim.

    A validly signed token whose account no longer exists is treated as no session.
    """
    try:
        return user_service.fetch_by_email(claim["email"])
    except NotFoundError as e:
        raise UnauthorizedError("Not logged in") from e


def authed_user_owns_nutrition(
    nutrition_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    nutrition_service: Annotated[NutritionService, Depends(get_nutrition_service)],
) -> Nutrition:
    """Load a nutrition entry, making sure the current user owns it.

    Raises NotFoundError if the entry does not exist and ForbiddenError if it
    belongs to someone else. The loaded entry is handed to the route.
    """
    nutrition = nutrition_service.fetch_by_id(nutrition_id)
    if nutrition.user_id != current_user.id:
        logger.warning(f"User {current_user.id} denied access to nutrition {nutrition_id}")
        raise ForbiddenError()
    return nutrition
