"""Deterministic holdings dataset used by the workshop."""
import logging
from decimal import Decimal
from typing import Tuple

from workshop.core.models import (
    Account,
    AccountType,
    Company,
    Currency,
    Holding,
    Sex,
    User,
)

logger = logging.getLogger(__name__)


def _account(number: str, amount: str, currency: Currency, type: AccountType) -> Account:
    return Account(amount=Decimal(amount), currency=currency, number=number, type=type)


def _user(first_name: str, last_name: str, age: int, sex: Sex, *accounts: Account) -> User:
    return User(first_name=first_name, last_name=last_name, age=age, sex=sex, accounts=accounts)


class HoldingMockGenerator:
    """Builds the fixed holdings -> companies -> users -> accounts graph."""

    def generate(self) -> Tuple[Holding, ...]:
        holdings = (
            Holding("Nestle", (self._nescafe(), self._gerber(), self._nestea())),
            Holding("Coca-Cola", (self._fanta(), self._sprite(), self._lays())),
            Holding("Pepsico", (self._pepsi(), self._mirinda())),
        )
        logger.debug("Generated %d holdings", len(holdings))
        return holdings

    def _nescafe(self) -> Company:
        return Company("Nescafe", (
            _user("Adam", "Wojcik", 34, Sex.MAN,
                  _account("11102010260000040200001001", "2500.00", Currency.PLN, AccountType.ROR1),
                  _account("11102010260000040200001002", "1200.00", Currency.EUR, AccountType.LO1)),
            _user("Alfred", "Pasibrzuch", 42, Sex.MAN,
                  _account("24105014451000002276471032", "4300.50", Currency.PLN, AccountType.ROR1)),
            _user("Kasia", "Warszawska", 28, Sex.WOMAN,
                  _account("37114020040000330277124813", "3120.00", Currency.PLN, AccountType.ROR1),
                  _account("37114020040000330277124814", "9960.58", Currency.PLN, AccountType.LO2)),
            _user("Zenon", "Kucowski", 45, Sex.MAN,
                  _account("49124010371111001020304055", "800.00", Currency.USD, AccountType.ROR2),
                  _account("49124010371111001020304056", "1500.00", Currency.PLN, AccountType.ROR1)),
        ))

    def _gerber(self) -> Company:
        return Company("Gerber", (
            _user("Zosia", "Psikuta", 67, Sex.WOMAN,
                  _account("52116022020000000061540817", "250000.00", Currency.PLN, AccountType.ROR1),
                  _account("52116022020000000061540818", "12000.00", Currency.CHF, AccountType.LO1)),
            _user("Bartek", "Mocarz", 31, Sex.MAN,
                  _account("60109010140000071219812874", "900.00", Currency.PLN, AccountType.ROR1),
                  _account("60109010140000071219812875", "10000.00", Currency.USD, AccountType.LO2)),
            _user("Filip", "Nowicki", 24, Sex.OTHER,
                  _account("73102055581111123456789012", "650.00", Currency.EUR, AccountType.ROR2)),
        ))

    def _nestea(self) -> Company:
        return Company("Nestea", (
            _user("Amadeusz", "Kowalczyk", 38, Sex.MAN,
                  _account("81109024020000000123456789", "7300.00", Currency.PLN, AccountType.ROR1),
                  _account("81109024020000000123456790", "5000.00", Currency.EUR, AccountType.LO2)),
        ))

    def _fanta(self) -> Company:
        return Company("Fanta", (
            _user("Zenek", "Jawowy", 44, Sex.MAN,
                  _account("92105010381000009011223344", "2100.00", Currency.PLN, AccountType.ROR1)),
            _user("Karol", "Zawadzki", 55, Sex.MAN,
                  _account("13124047221111000048812001", "15000.00", Currency.PLN, AccountType.ROR1),
                  _account("13124047221111000048812002", "5000.24", Currency.CHF, AccountType.LO2),
                  _account("13124047221111000048812003", "3000.00", Currency.USD, AccountType.LO1)),
            _user("Monika", "Lisowska", 33, Sex.WOMAN,
                  _account("26160014621821440720000001", "4100.00", Currency.PLN, AccountType.ROR2)),
        ))

    def _sprite(self) -> Company:
        return Company("Sprite", (
            _user("Jan", "Bazuka", 47, Sex.MAN,
                  _account("34102028920000520201567890", "1900.00", Currency.PLN, AccountType.ROR1),
                  _account("34102028920000520201567891", "250.00", Currency.USD, AccountType.ROR2),
                  _account("34102028920000520201567892", "4000.00", Currency.EUR, AccountType.LO1)),
            _user("Tomasz", "Grabowski", 29, Sex.MAN,
                  _account("45187010452078100471850001", "3300.00", Currency.PLN, AccountType.ROR1)),
        ))

    def _lays(self) -> Company:
        return Company("Lays", (
            _user("Ula", "Sowa", 22, Sex.WOMAN,
                  _account("57103015080000000550127001", "2200.00", Currency.PLN, AccountType.ROR1),
                  _account("57103015080000000550127002", "6000.00", Currency.PLN, AccountType.LO1)),
            _user("Mateusz", "Kot", 26, Sex.OTHER,
                  _account("68114011240000250117001001", "1400.00", Currency.CHF, AccountType.ROR2)),
        ))

    def _pepsi(self) -> Company:
        return Company("Pepsi", (
            _user("Jan", "Kowalski", 36, Sex.MAN,
                  _account("70105012981000002312340001", "5400.00", Currency.PLN, AccountType.ROR1),
                  _account("70105012981000002312340002", "300.00", Currency.EUR, AccountType.ROR2)),
            _user("Piotr", "Wrona", 40, Sex.MAN,
                  _account("83116022020000000277345001", "1100.00", Currency.USD, AccountType.ROR1),
                  _account("83116022020000000277345002", "2500.00", Currency.PLN, AccountType.LO1)),
            _user("Marek", "Sikora", 26, Sex.MAN,
                  _account("95249000050000460012345001", "800.00", Currency.PLN, AccountType.ROR1),
                  _account("95249000050000460012345002", "20000.00", Currency.PLN, AccountType.LO1)),
        ))

    def _mirinda(self) -> Company:
        return Company("Mirinda", (
            _user("Rafal", "Dudek", 20, Sex.MAN,
                  _account("16102055610000390200112233", "1200.00", Currency.PLN, AccountType.ROR2)),
            _user("Sasza", "Wilk", 17, Sex.OTHER,
                  _account("28109017950000000112233001", "700.00", Currency.CHF, AccountType.ROR1),
                  _account("28109017950000000112233002", "900.00", Currency.EUR, AccountType.LO1)),
        ))
