"""Static user directory used to produce a caller identity."""

import hmac
from collections.abc import Iterable
from dataclasses import dataclass

from citywatch.models.incident import Role
from citywatch.models.user import User


@dataclass(frozen=True)
class Account:
    """Directory entry: an identity plus its password."""

    user: User
    password: str


DEFAULT_ACCOUNTS: tuple[Account, ...] = (
    Account(
        user=User(id="1", name="Police Officer", role=Role.POLICE, email="police@example.com"),
        password="password123",
    ),
    Account(
        user=User(id="2", name="Medical Staff", role=Role.MEDICAL, email="medical@example.com"),
        password="password123",
    ),
    Account(
        user=User(id="3", name="Firefighter", role=Role.FIREFIGHTER, email="fire@example.com"),
        password="password123",
    ),
)


class UserDirectory:
    """Credential lookup. Issues no tokens; the caller keeps the identity."""

    def __init__(self, accounts: Iterable[Account] = DEFAULT_ACCOUNTS):
        self._accounts = {account.user.email: account for account in accounts}

    def authenticate(self, email: str, password: str) -> User | None:
        account = self._accounts.get(email)
        if account is None:
            return None
        if not hmac.compare_digest(account.password.encode(), password.encode()):
            return None
        return account.user
