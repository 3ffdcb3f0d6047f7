from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class InvalidAccountTypeError(ValueError):
    """Raised when an account is requested for an unknown type label."""


class AccountKind(Enum):
    SAVINGS = "Savings"
    CHECKING = "Checking"


INITIAL_BALANCES = {
    AccountKind.SAVINGS: Decimal(1000),
    AccountKind.CHECKING: Decimal(500),
}


@dataclass
class Account:
    """
    Domain representation of a bank account.

    The kind only decides the opening balance; both kinds behave the same
    once created. `balance` is only changed by a withdrawal policy.
    """

    kind: AccountKind
    balance: Decimal


def create_account(account_type: str) -> Account:
    """Create a new account for the `"Savings"` or `"Checking"` label."""

    try:
        kind = AccountKind(account_type)
    except ValueError:
        raise InvalidAccountTypeError(f"Unknown account type: {account_type!r}") from None
    return Account(kind=kind, balance=INITIAL_BALANCES[kind])
