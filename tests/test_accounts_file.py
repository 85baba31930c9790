"""Tests for the plain-text account export."""
from decimal import Decimal

import pytest

from workshop.adapters.accounts_file import format_account, write_accounts
from workshop.core.models import Account, AccountType, Currency


@pytest.fixture
def accounts():
    return [
        Account(Decimal("150.00"), Currency.PLN, "001", AccountType.ROR1),
        Account(Decimal("12.5"), Currency.USD, "002", AccountType.LO2),
    ]


def test_format_account(accounts) -> None:
    assert format_account(accounts[0]) == "001|150.00|PLN"
    assert format_account(accounts[1], separator=";") == "002;12.5;USD"


def test_write_accounts(accounts, tmp_path) -> None:
    path = tmp_path / "accounts.txt"

    assert write_accounts(path, accounts) == 2
    assert path.read_text(encoding="utf-8") == "001|150.00|PLN\n002|12.5|USD\n"


def test_write_accounts_overwrites(accounts, tmp_path) -> None:
    path = tmp_path / "accounts.txt"
    path.write_text("stale\n", encoding="utf-8")

    write_accounts(path, accounts[:1])
    assert path.read_text(encoding="utf-8") == "001|150.00|PLN\n"


def test_write_accounts_closes_file_on_error(accounts, tmp_path) -> None:
    path = tmp_path / "accounts.txt"

    def broken():
        yield accounts[0]
        raise RuntimeError("source failed")

    with pytest.raises(RuntimeError):
        write_accounts(path, broken())

    # the first line was flushed when the file was closed
    assert path.read_text(encoding="utf-8") == "001|150.00|PLN\n"
