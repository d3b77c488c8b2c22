"""Tests for the user service."""

import pytest

from lifetracker.errors import BadRequestError, NotFoundError, UnauthorizedError
from lifetracker.models.user import User
from lifetracker.services.user_service import UserService

NEW_USER = {
    "email": "new@example.com",
    "username": "newbie",
    "first_name": "New",
    "last_name": "User",
    "password": "password123",
}


def test_register_creates_user(db):
    """Test that registration stores the user with a hashed password."""
    user = UserService(db).register(**NEW_USER)

    assert user.id is not None
    assert user.email == "new@example.com"
    assert user.username == "newbie"
    assert user.first_name == "New"
    assert user.last_name == "User"
    assert user.password_hash != "password123"


@pytest.mark.parametrize("missing", ["email", "username", "first_name", "last_name", "password"])
def test_register_missing_field(db, missing):
    """Test that every field is required."""
    data = {**NEW_USER, missing: ""}

    with pytest.raises(BadRequestError, match="Missing required fields"):
        UserService(db).register(**data)

    assert db.query(User).count() == 0


@pytest.mark.parametrize("email", ["plainaddress", "no-at.example.com", "user@nodot", "@example.com"])
def test_register_invalid_email(db, email):
    """Test the email format check."""
    with pytest.raises(BadRequestError, match="Invalid email"):
        UserService(db).register(**{**NEW_USER, "email": email})


def test_register_duplicate_email(db, user):
    """Test that a taken email is reported by name."""
    with pytest.raises(BadRequestError) as exc_info:
        UserService(db).register(**{**NEW_USER, "email": user.email})

    assert exc_info.value.message == f"Duplicate email: {user.email}"
    assert exc_info.value.status_code == 400


def test_register_duplicate_username(db, user):
    """Test that a taken username is reported by name."""
    with pytest.raises(BadRequestError) as exc_info:
        UserService(db).register(**{**NEW_USER, "username": user.username})

    assert exc_info.value.message == f"Duplicate username: {user.username}"


def test_register_duplicate_both_reports_email(db, user):
    """Test that email wins when both fields collide."""
    with pytest.raises(BadRequestError, match="Duplicate email"):
        UserService(db).register(**{**NEW_USER, "email": user.email, "username": user.username})


def test_register_email_reported_before_username_on_another_account(db, user_factory):
    """Test that email wins when the two fields collide with different accounts."""
    username_owner = user_factory("first@example.com", "taken")
    email_owner = user_factory("taken@example.com", "second")

    with pytest.raises(BadRequestError) as exc_info:
        UserService(db).register(
            **{**NEW_USER, "email": email_owner.email, "username": username_owner.username}
        )

    assert exc_info.value.message == "Duplicate email: taken@example.com"


def test_login_success(db, user):
    """Test logging in with the right password."""
    logged_in = UserService(db).login(user.email, "testpass123")
    assert logged_in.id == user.id
    assert logged_in.email == user.email


def test_login_missing_credentials(db, user):
    """Test login without email or password."""
    service = UserService(db)

    with pytest.raises(UnauthorizedError, match="Missing credentials"):
        service.login(user.email, "")
    with pytest.raises(UnauthorizedError, match="Missing credentials"):
        service.login(None, "testpass123")


def test_login_wrong_password_and_unknown_email_look_the_same(db, user):
    """Test that both login failures share one message."""
    service = UserService(db)

    with pytest.raises(UnauthorizedError) as wrong_password:
        service.login(user.email, "wrongpass")
    with pytest.raises(UnauthorizedError) as unknown_email:
        service.login("nobody@example.com", "testpass123")

    assert wrong_password.value.message == "Invalid credentials"
    assert unknown_email.value.message == wrong_password.value.message
    assert unknown_email.value.status_code == 401


def test_fetch_by_email(db, user):
    """Test looking a user up by email."""
    fetched = UserService(db).fetch_by_email(user.email)
    assert fetched.id == user.id
    assert fetched.password_hash


def test_fetch_by_email_not_found(db):
    """Test looking up an unknown email."""
    with pytest.raises(NotFoundError, match="No account exists"):
        UserService(db).fetch_by_email("nobody@example.com")


def test_fetch_by_id(db, user):
    """Test looking a user up by id."""
    assert UserService(db).fetch_by_id(user.id).email == user.email
    with pytest.raises(NotFoundError):
        UserService(db).fetch_by_id(user.id + 1000)
