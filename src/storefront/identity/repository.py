"""Repository for the User aggregate."""

from storefront.domain import storefront
from storefront.identity.user import User, normalize_email


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        """Find a user by email, ignoring case and surrounding whitespace."""
        return self._dao.query.filter(email=normalize_email(email)).all().first

    def email_taken(self, email: str) -> bool:
        return self._dao.query.filter(email=normalize_email(email)).count() > 0
