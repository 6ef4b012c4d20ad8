"""User registration: command and handler."""

from protean import handle
from protean.fields import Boolean, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.errors import Conflict
from storefront.identity.user import User


@storefront.command(part_of="User")
class RegisterUser:
    """Create an account. The password arrives already hashed."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password_hash: String(required=True, max_length=128)
    is_admin: Boolean(default=False)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.email_taken(command.email):
            raise Conflict("User with this email already exists")

        user = User.register(
            name=command.name,
            email=command.email,
            password_hash=command.password_hash,
            is_admin=command.is_admin,
        )
        repo.add(user)
        return str(user.id)
