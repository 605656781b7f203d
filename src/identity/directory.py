"""Account existence lookup handed to other contexts."""

from identity.account.account import Account
from identity.domain import identity


class AccountDirectory:
    def __init__(self, domain=identity):
        self._domain = domain

    def exists(self, username: str) -> bool:
        with self._domain.domain_context():
            return self._domain.repository_for(Account).find_by_username(username) is not None
