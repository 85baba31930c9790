"""Plain-text account export."""
import logging
from pathlib import Path
from typing import Iterable

from workshop.core.models import Account
from workshop.core.settings import get_setting

logger = logging.getLogger(__name__)


def format_account(account: Account, separator: str | None = None) -> str:
    """Render an account as NUMBER|AMOUNT|CURRENCY."""
    separator = separator or get_setting("accounts_file_separator")
    return separator.join((account.number, str(account.amount), account.currency.value))


def write_accounts(path: str | Path, accounts: Iterable[Account]) -> int:
    """
    Write one line per account to path, in the order given.

    Returns the number of lines written. OSError from opening or writing
    propagates to the caller; the file is closed either way.
    """
    path = Path(path)
    written = 0

    with path.open("w", encoding=get_setting("accounts_file_encoding")) as fh:
        for account in accounts:
            fh.write(format_account(account) + "\n")
            written += 1

    logger.debug("Wrote %d accounts to %s", written, path)
    return written
