from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from domain.models import Account, create_account
from domain.repositories import AccountDirectory
from domain.withdrawal import (
    FAST_WITHDRAW_LIMIT,
    PolicyKind,
    WithdrawalResult,
    WithdrawalStatus,
    policy_for,
)


logger = logging.getLogger(__name__)

DEFAULT_ACCOUNTS = (
    ("user1", "Savings"),
    ("user2", "Checking"),
)

UNKNOWN_USERNAME_MESSAGE = "Fel användarnamn."
INSUFFICIENT_FUNDS_MESSAGE = "Otillräcklig balans."


@dataclass
class LoginResult:
    """Result of looking up the account for a username."""

    success: bool
    account: Optional[Account] = None
    error_message: Optional[str] = None


@dataclass
class OperationResult:
    """A withdrawal outcome together with the text shown to the user."""

    success: bool
    message: str
    result: WithdrawalResult


def register_default_accounts(directory: AccountDirectory) -> None:
    """Register the two fixed accounts: user1 (Savings) and user2 (Checking)."""

    for username, account_type in DEFAULT_ACCOUNTS:
        directory.register(username, create_account(account_type))


def login(username: str, directory: AccountDirectory) -> LoginResult:
    account = directory.lookup(username)
    if account is None:
        logger.info("Login attempt for unknown username %r", username)
        return LoginResult(success=False, error_message=UNKNOWN_USERNAME_MESSAGE)
    return LoginResult(success=True, account=account)


def choose_policy(choice: int) -> PolicyKind:
    """
    Map the numeric menu choice to a policy.

    Only `1` means Normal; every other number, including out-of-menu ones,
    selects Fast.
    """

    return PolicyKind.NORMAL if choice == 1 else PolicyKind.FAST


def describe_result(result: WithdrawalResult) -> str:
    if result.status is WithdrawalStatus.LIMIT_EXCEEDED:
        return f"Snabbuttag är begränsat till {FAST_WITHDRAW_LIMIT}."
    if result.status is WithdrawalStatus.INSUFFICIENT_FUNDS:
        return INSUFFICIENT_FUNDS_MESSAGE
    if result.policy is PolicyKind.FAST:
        return f"Du har snabbt tagit ut {result.amount}. Ny balans: {result.balance}"
    return f"Du har tagit ut {result.amount}. Ny balans: {result.balance}"


def withdraw(account: Account, amount: Decimal, policy_kind: PolicyKind) -> OperationResult:
    """
    Apply a single withdrawal with the selected policy.

    Raises `InvalidAmountError` for negative or non-finite amounts; all
    business outcomes are returned.
    """

    result = policy_for(policy_kind).apply(account, amount)
    return OperationResult(
        success=result.success,
        message=describe_result(result),
        result=result,
    )
