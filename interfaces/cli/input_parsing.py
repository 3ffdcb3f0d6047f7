from __future__ import annotations

import re
from decimal import Decimal


_AMOUNT_RE = re.compile(r"^[+-]?\d+([.,]\d+)?$")


def parse_policy_choice(text: str) -> int:
    """Parse the strategy menu answer; surrounding whitespace is ignored."""

    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"Invalid policy choice: {text!r}") from None


def parse_amount(text: str) -> Decimal:
    """
    Parse a withdrawal amount.

    Accepts plain decimal numbers, both `200.50` and the Swedish `200,50`.
    Exponents, digit separators and NaN/Infinity are rejected. The typed
    scale is kept so the amount prints back the way it was entered.
    """

    normalized = text.strip()
    if not _AMOUNT_RE.match(normalized):
        raise ValueError(f"Invalid amount: {text!r}")

    amount = Decimal(normalized.replace(",", "."))
    if amount == 0:
        # "-0" would otherwise print back with its sign.
        amount = abs(amount)
    return amount
