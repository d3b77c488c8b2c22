"""Authentication helpers for JWT session tokens and password hashing."""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from lifetracker.config import get_settings

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_work_factor,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def dummy_verify_password() -> None:
    """Spend the same time as a real verification when there is no hash to check."""
    pwd_context.dummy_verify()


def create_access_token(email: str) -> str:
    """Create a JWT carrying the user's email as its identity claim."""
    to_encode: dict[str, Any] = {"email": email}
    if settings.token_expires:
        to_encode["exp"] = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, secret: str | None = None) -> dict | None:
    """Decode and validate a JWT token.

    Returns None, rather than raising, when the supplied secret is not the
    configured one or the token is malformed, tampered with or expired.
    """
    if secret is None:
        secret = settings.jwt_secret
    if secret != settings.jwt_secret:
        return None
    try:
        payload = jwt.decode(token, secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    if not isinstance(payload, dict):
        return None
    return payload
