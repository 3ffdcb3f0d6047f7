from __future__ import annotations

from typing import List, Optional, Protocol

from .models import Account


class AccountDirectory(Protocol):
    """
    Maps usernames to accounts.

    Implementations are responsible for:
    - Keeping usernames unique; registering a taken name replaces the
      previous account.
    - Returning the registered object itself from `lookup`, not a copy.
    """

    def register(self, username: str, account: Account) -> None:
        """Associate `username` with `account`, replacing any previous one."""

        ...

    def lookup(self, username: str) -> Optional[Account]:
        """Return the account registered for `username`, or None if not found."""

        ...

    def usernames(self) -> List[str]:
        """Return all registered usernames in registration order."""

        ...
