"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from lifetracker.api.dependencies import get_current_user, get_user_service
from lifetracker.models.user import User
from lifetracker.schemas.auth import AuthResponse, MeResponse, UserLogin, UserRegister, UserResponse
from lifetracker.services.auth import create_access_token
from lifetracker.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user."""
    user = user_service.register(
        email=user_data.email,
        username=user_data.username,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        password=user_data.password,
    )

    return AuthResponse(
        token=create_access_token(user.email),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    user_service: Annotated[UserService, Depends(get_user_service)],
):
    """Login with email and password."""
    user = user_service.login(credentials.email, credentials.password)

    return AuthResponse(
        token=create_access_token(user.email),
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=MeResponse)
async def get_me(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get current user information."""
    return MeResponse(user=UserResponse.model_validate(current_user))
