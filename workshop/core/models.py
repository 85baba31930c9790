"""Data models for the workshop."""
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Tuple


class Sex(str, Enum):
    MAN = "man"
    WOMAN = "woman"
    OTHER = "other"


class AccountType(str, Enum):
    ROR1 = "ROR1"
    ROR2 = "ROR2"
    LO1 = "LO1"
    LO2 = "LO2"


class Currency(str, Enum):
    """Account currency with its exchange rate to PLN."""

    PLN = ("PLN", "1.00")
    USD = ("USD", "3.72")
    EUR = ("EUR", "4.23")
    CHF = ("CHF", "3.83")

    def __new__(cls, code: str, rate: str):
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.rate = Decimal(rate)
        return obj


@dataclass(frozen=True)
class Account:
    amount: Decimal
    currency: Currency
    number: str = ""
    type: AccountType = AccountType.ROR1


@dataclass(frozen=True)
class User:
    first_name: str
    last_name: str
    age: int
    sex: Sex
    accounts: Tuple[Account, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Company:
    name: str
    users: Tuple[User, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Holding:
    name: str
    companies: Tuple[Company, ...] = field(default_factory=tuple)
