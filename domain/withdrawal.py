from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Protocol

from .models import Account


logger = logging.getLogger(__name__)

FAST_WITHDRAW_LIMIT = Decimal(500)


class InvalidAmountError(ValueError):
    """Raised for negative or non-finite withdrawal amounts."""


class PolicyKind(Enum):
    NORMAL = "normal"
    FAST = "fast"


class WithdrawalStatus(Enum):
    SUCCESS = "success"
    INSUFFICIENT_FUNDS = "insufficient_funds"
    LIMIT_EXCEEDED = "limit_exceeded"


@dataclass
class WithdrawalResult:
    """Outcome of a single withdrawal attempt."""

    status: WithdrawalStatus
    policy: PolicyKind
    amount: Decimal
    balance: Decimal

    @property
    def success(self) -> bool:
        return self.status is WithdrawalStatus.SUCCESS


class WithdrawalPolicy(Protocol):
    """
    Strategy for applying a withdrawal to an account.

    Business-rule failures (insufficient funds, limits) are reported through
    the returned `WithdrawalResult`; only invalid amounts raise.
    """

    kind: PolicyKind

    def apply(self, account: Account, amount: Decimal) -> WithdrawalResult:
        ...


def _validate_amount(amount: Decimal) -> None:
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {amount}.")
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative, got {amount}.")


def _debit(account: Account, amount: Decimal, kind: PolicyKind) -> WithdrawalResult:
    if account.balance >= amount:
        account.balance -= amount
        logger.info("%s withdrawal of %s, new balance %s", kind.value, amount, account.balance)
        return WithdrawalResult(WithdrawalStatus.SUCCESS, kind, amount, account.balance)

    logger.info("Insufficient balance %s for withdrawal of %s", account.balance, amount)
    return WithdrawalResult(WithdrawalStatus.INSUFFICIENT_FUNDS, kind, amount, account.balance)


class NormalWithdrawalPolicy:
    """Withdraw any amount the balance covers."""

    kind = PolicyKind.NORMAL

    def apply(self, account: Account, amount: Decimal) -> WithdrawalResult:
        _validate_amount(amount)
        return _debit(account, amount, self.kind)


class FastWithdrawalPolicy:
    """Withdraw at most `FAST_WITHDRAW_LIMIT`; the limit is checked first."""

    kind = PolicyKind.FAST
    limit = FAST_WITHDRAW_LIMIT

    def apply(self, account: Account, amount: Decimal) -> WithdrawalResult:
        _validate_amount(amount)
        if amount > self.limit:
            logger.info("Fast withdrawal of %s exceeds limit %s", amount, self.limit)
            return WithdrawalResult(
                WithdrawalStatus.LIMIT_EXCEEDED, self.kind, amount, account.balance
            )
        return _debit(account, amount, self.kind)


def policy_for(kind: PolicyKind) -> WithdrawalPolicy:
    if kind is PolicyKind.NORMAL:
        return NormalWithdrawalPolicy()
    return FastWithdrawalPolicy()
