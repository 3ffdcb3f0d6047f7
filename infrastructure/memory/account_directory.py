from __future__ import annotations

import logging
from typing import Dict, List, Optional

from domain.models import Account
from domain.repositories import AccountDirectory


logger = logging.getLogger(__name__)


class InMemoryAccountDirectory(AccountDirectory):
    """
    Dict-backed implementation of `AccountDirectory`.

    Lives for as long as the instance does; nothing is written anywhere.
    """

    def __init__(self) -> None:
        self._accounts: Dict[str, Account] = {}

    def register(self, username: str, account: Account) -> None:
        if username in self._accounts:
            logger.debug("Replacing account registered for %r", username)
        self._accounts[username] = account
        logger.debug("Registered %s account for %r", account.kind.value, username)

    def lookup(self, username: str) -> Optional[Account]:
        return self._accounts.get(username)

    def usernames(self) -> List[str]:
        return list(self._accounts)
