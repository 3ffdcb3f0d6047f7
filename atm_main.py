import logging
import os

from dotenv import load_dotenv

from infrastructure.memory.account_directory import InMemoryAccountDirectory
from interfaces.cli.handlers import create_atm_cli


load_dotenv()

LOG_LEVEL = os.environ.get("ATM_LOG_LEVEL", "WARNING")


def resolve_log_level(name: str) -> int:
    """Map a level name to its number; unknown names fall back to WARNING."""

    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def main() -> None:
    logging.basicConfig(
        level=resolve_log_level(LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    directory = InMemoryAccountDirectory()

    cli = create_atm_cli(directory)
    cli()


if __name__ == "__main__":
    main()
