"""Account registration: command and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from identity.account.account import Account
from identity.domain import identity, logger
from shared.errors import Conflict


@identity.command(part_of="Account")
class RegisterAccount:
    """Open a new account under a username nobody else holds."""

    username: String(required=True, max_length=100)
    password: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    role: String(required=True, max_length=20)


@identity.command_handler(part_of=Account)
class RegisterAccountHandler:
    @handle(RegisterAccount)
    def register_account(self, command):
        repo = current_domain.repository_for(Account)
        if repo.find_by_username(command.username) is not None:
            raise Conflict("Email or username already exists")

        account = Account.register(
            username=command.username,
            password=command.password,
            email=command.email,
            role=command.role,
        )
        repo.add(account)
        logger.info("account_registered", username=account.username, role=account.role)
        return str(account.id)
