"""Account creation: command and handler."""

import structlog
from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from logistics.account.account import Account
from logistics.domain import logistics

logger = structlog.get_logger(__name__)


@logistics.command(part_of="Account")
class CreateAccount:
    """Register a shipper or courier account."""

    name = String(required=True, max_length=255)
    role = String(required=True, max_length=20)


@logistics.command_handler(part_of=Account)
class CreateAccountHandler:
    @handle(CreateAccount)
    def create_account(self, command):
        account = Account.create(name=command.name, role=command.role)
        current_domain.repository_for(Account).add(account)
        logger.info("Account created", account_id=str(account.id), role=account.role)
        return account
