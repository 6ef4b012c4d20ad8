"""User aggregate: the credential record behind every principal."""

from datetime import datetime

from protean.fields import Boolean, DateTime, String

from storefront.domain import storefront


def normalize_email(email: str) -> str:
    return email.strip().lower()


@storefront.aggregate(limit=-1)
class User:
    """A registered account.

    Emails are unique and stored lower-cased. Only the bcrypt hash of the
    password is ever kept.
    """

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254, unique=True)
    password_hash: String(required=True, max_length=128)
    is_admin: Boolean(default=False)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @classmethod
    def register(cls, name, email, password_hash, is_admin=False):
        from storefront.identity.events import UserRegistered

        now = datetime.now()
        user = cls(
            name=name.strip(),
            email=normalize_email(email),
            password_hash=password_hash,
            is_admin=bool(is_admin),
            created_at=now,
            updated_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                name=user.name,
                email=user.email,
                is_admin=user.is_admin,
                registered_at=now,
            )
        )
        return user
