"""Registration, login and principal lookup."""

from protean.utils.globals import current_domain

from storefront.errors import Unauthorized, flatten_errors
from storefront.identity.passwords import hash_password, verify_password
from storefront.identity.registration import RegisterUser
from storefront.identity.tokens import issue_token
from storefront.identity.user import User
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def public_profile(user: User) -> dict:
    """Everything about a user that may leave the service; never the hash."""
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "is_admin": user.is_admin,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


@flatten_errors("Failed to register user")
def register(name: str, email: str, password: str, is_admin: bool = False) -> dict:
    command = RegisterUser(
        name=name,
        email=email,
        password_hash=hash_password(password),
        is_admin=is_admin,
    )
    user_id = current_domain.process(command, asynchronous=False)
    user = current_domain.repository_for(User).get(user_id)

    logger.info("user.registered", user_id=user_id, is_admin=user.is_admin)
    return {
        "message": "User registered successfully",
        "user": public_profile(user),
        "access_token": issue_token(user.id, user.email),
    }


@flatten_errors("Login failed")
def login(email: str, password: str) -> dict:
    """Exchange credentials for a token.

    An unknown email and a wrong password fail identically.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("user.login_rejected")
        raise Unauthorized(INVALID_CREDENTIALS)

    logger.info("user.logged_in", user_id=user.id)
    return {
        "message": "Login successful",
        "user": public_profile(user),
        "access_token": issue_token(user.id, user.email),
    }


def validate_user(user_id: str) -> dict | None:
    """Re-hydrate a principal from a token's user id; ``None`` if the account is gone."""
    user = current_domain.repository_for(User).get_or_none(user_id)
    if user is None:
        return None
    return public_profile(user)
