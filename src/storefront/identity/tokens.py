"""Signed, time-bound bearer tokens (JWT, HS256 by default)."""

from datetime import UTC, datetime, timedelta

import jwt
from protean.utils.globals import current_domain

from storefront.errors import Unauthorized


def issue_token(user_id: str, email: str) -> str:
    """Sign a token carrying the user id and email as claims."""
    now = datetime.now(UTC)
    claims = {
        "sub": str(user_id),
        "userId": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + timedelta(seconds=int(current_domain.jwt_expires_in)),
    }
    return jwt.encode(claims, current_domain.jwt_secret, algorithm=current_domain.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Verify signature and expiry and return the claims.

    Raises ``Unauthorized`` for expired, tampered or malformed tokens.
    """
    try:
        claims = jwt.decode(
            token,
            current_domain.jwt_secret,
            algorithms=[current_domain.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token has expired") from None
    except jwt.PyJWTError:
        raise Unauthorized("Invalid token") from None

    if not claims.get("userId"):
        raise Unauthorized("Invalid token")
    return claims
