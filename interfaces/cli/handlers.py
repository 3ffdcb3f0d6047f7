from __future__ import annotations

import sys
from typing import List, TextIO

import click

from application.services import (
    choose_policy,
    login,
    register_default_accounts,
    withdraw,
)
from domain.repositories import AccountDirectory
from interfaces.cli.input_parsing import parse_amount, parse_policy_choice


POLICY_PROMPT ="Välj uttagsstrategi: 1 för Normal Uttag, 2 för Snabb Uttag"
AMOUNT_PROMPT = "Ange belopp att ta ut:"


def username_prompt(usernames: List[str]) -> str:
    """Login prompt listing the registered usernames, e.g. "user1 eller user2"."""

    if len(usernames) > 1:
        names = ", ".join(usernames[:-1]) + " eller " + usernames[-1]
    else:
        names = "".join(usernames)
    return f"Ange användarnamn {names}:"


def _ask(stdin: TextIO, prompt: str) -> str:
    """Print `prompt` on its own line and block for one line of input."""

    click.echo(prompt)
    line = stdin.readline()
    return line.rstrip("\r\n")


def create_atm_cli(directory: AccountDirectory) -> click.Command:
    """
    Build the interactive teller session bound to `directory`.

    This module only deals with the terminal: prompting, reading lines and
    turning bad input into a click error. Everything else is delegated to
    the application services.
    """

    @click.command(name="bankomat")
    def atm_session():
        """Log in as user1 or user2 and make one withdrawal."""

        stdin = sys.stdin
        register_default_accounts(directory)

        username = _ask(stdin, username_prompt(directory.usernames()))
        login_result = login(username, directory)
        if not login_result.success:
            click.echo(login_result.error_message)
            return

        answer = _ask(stdin, POLICY_PROMPT)
        try:
            policy_kind = choose_policy(parse_policy_choice(answer))
        except ValueError:
            raise click.ClickException(f"Ogiltigt val av uttagsstrategi: {answer!r}") from None

        answer = _ask(stdin, AMOUNT_PROMPT)
        try:
            amount = parse_amount(answer)
            result = withdraw(login_result.account, amount, policy_kind)
        except ValueError:
            # Covers InvalidAmountError for negative amounts as well.
            raise click.ClickException(f"Ogiltigt belopp: {answer!r}") from None

        click.echo(result.message)

    return atm_session
