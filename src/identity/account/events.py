"""Domain events for the Account aggregate."""

from protean.fields import DateTime, Identifier, String

from identity.domain import identity


@identity.event(part_of="Account")
class AccountRegistered:
    """A new account was opened."""

    __version__ = "v1"

    account_id: Identifier(required=True)
    username: String(required=True)
    email: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)
