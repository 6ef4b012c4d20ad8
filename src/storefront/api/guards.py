"""Access guards, composed as FastAPI dependencies.

``current_principal`` resolves the bearer token to a principal;
``admin_principal`` builds on it and additionally requires the admin flag.
Both run before the route body and abort the request on failure.
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront.errors import Forbidden, Unauthorized
from storefront.identity.authentication import validate_user
from storefront.identity.tokens import decode_token
from storefront.utils.logging import add_context

bearer_scheme = HTTPBearer(auto_error=False)


async def current_principal(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict:
    if credentials is None or not credentials.credentials:
        raise Unauthorized("Missing bearer token")

    claims = decode_token(credentials.credentials)
    principal = validate_user(claims["userId"])
    if principal is None:
        raise Unauthorized("User no longer exists")

    request.state.principal = principal
    add_context(user_id=principal["id"])
    return principal


async def admin_principal(principal: dict = Depends(current_principal)) -> dict:
    if not principal["is_admin"]:
        raise Forbidden("You do not have admin privileges")
    return principal
