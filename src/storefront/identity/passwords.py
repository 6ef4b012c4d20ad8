"""Password hashing with bcrypt.

bcrypt only reads the first 72 bytes of a secret, and current releases raise
on anything longer. Passwords are encoded and cut to that limit on both the
hashing and the checking side, so any length of password can be used.
"""

import bcrypt
from protean.utils.globals import current_domain

BCRYPT_MAX_BYTES = 72


def _secret(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Salt and hash ``password`` at the configured bcrypt cost."""
    salt = bcrypt.gensalt(rounds=int(current_domain.bcrypt_rounds))
    return bcrypt.hashpw(_secret(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(_secret(password), password_hash.encode("utf-8"))
