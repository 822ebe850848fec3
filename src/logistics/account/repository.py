"""Account repository with role lookups."""

from protean.exceptions import ObjectNotFoundError

from logistics.account.account import Account, AccountRole
from logistics.domain import logistics


@logistics.repository(part_of=Account)
class AccountRepository:
    def find_by_id(self, account_id: str) -> Account | None:
        try:
            return self.get(account_id)
        except ObjectNotFoundError:
            return None

    def find_by_role(self, role: AccountRole | str) -> list[Account]:
        role = AccountRole(role)
        return self._dao.query.filter(role=role.value).all().items
