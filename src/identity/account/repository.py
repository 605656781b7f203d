"""Repository for the Account aggregate."""

from identity.account.account import Account
from identity.domain import identity


@identity.repository(part_of=Account)
class AccountRepository:
    def find_by_username(self, username: str) -> Account | None:
        accounts = self._dao.query.filter(username=username).limit(None).all().items
        return accounts[0] if accounts else None
