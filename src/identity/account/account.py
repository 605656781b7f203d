"""Account aggregate with password hashing helpers."""

import hashlib
import hmac
import secrets
from datetime import datetime
from enum import Enum

from protean.fields import DateTime, String, ValueObject

from identity.domain import identity
from identity.shared.email import EmailAddress

_HASH_ITERATIONS = 260_000


class AccountRole(Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


def hash_password(password: str, salt: str | None = None) -> str:
    """Return ``salt$digest`` for a PBKDF2-SHA256 hash of ``password``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), _HASH_ITERATIONS)
    return f"{salt}${digest.hex()}"


@identity.aggregate
class Account:
    """Someone who can place orders (a customer) or manage the menu (an admin).

    The username is the public handle orders are filed under. Roles are stored
    here but only ever evaluated at the HTTP edge.
    """

    username: String(required=True, max_length=100)
    password_hash: String(required=True, max_length=255)
    email: ValueObject(EmailAddress, required=True)
    role: String(choices=AccountRole, default=AccountRole.CUSTOMER.value)
    registered_at: DateTime(default=datetime.now)

    @classmethod
    def register(cls, username, password, email, role=AccountRole.CUSTOMER.value):
        from identity.account.events import AccountRegistered

        now = datetime.now()
        account = cls(
            username=username,
            password_hash=hash_password(password),
            email=EmailAddress(address=email),
            role=role,
            registered_at=now,
        )
        account.raise_(
            AccountRegistered(
                account_id=account.id,
                username=username,
                email=email,
                role=role,
                registered_at=now,
            )
        )
        return account

    def verify_password(self, password: str) -> bool:
        salt, _, _ = self.password_hash.partition("$")
        return hmac.compare_digest(self.password_hash, hash_password(password, salt))
