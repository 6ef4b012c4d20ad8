"""Domain events for the User aggregate."""

from protean.fields import Boolean, DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new account was created through registration."""

    __version__ = 1

    user_id: Identifier(required=True)
    name: String(required=True)
    email: String(required=True)
    is_admin: Boolean(default=False)
    registered_at: DateTime(required=True)
