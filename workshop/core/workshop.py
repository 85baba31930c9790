"""Collection queries over the holdings dataset."""
import functools
import itertools
import logging
import operator
import random
from collections import Counter, deque
from decimal import Decimal
from typing import Callable, Deque, Dict, Iterable, Iterator, List, Optional, Set, Tuple, TypeVar

from workshop.adapters.accounts_file import write_accounts
from workshop.adapters.fx_static import convert_to_pln
from workshop.core.errors import (
    EmptyAccountsError,
    NoAccountsError,
    NotEnoughUsersError,
    UserNotFoundError,
)
from workshop.core.mock import HoldingMockGenerator
from workshop.core.models import Account, AccountType, Company, Currency, Holding, Sex, User
from workshop.core.settings import get_int_setting

logger = logging.getLogger(__name__)

T = TypeVar("T")

NO_USER = "Brak użytkownika"


def is_woman(user: User) -> bool:
    return user.sex == Sex.WOMAN


def _peek(items: Iterable[T], action: Callable[[T], object]) -> Iterator[T]:
    """Pass items through unchanged, calling action on each as it goes by."""
    for item in items:
        action(item)
        yield item


def _distinct(items: Iterable[T]) -> Iterator[T]:
    """Lazily drop items that were already yielded."""
    seen = set()
    for item in items:
        if item not in seen:
            seen.add(item)
            yield item


class WorkShop:
    """Read-only queries over holdings -> companies -> users -> accounts."""

    def __init__(self, generator: HoldingMockGenerator | None = None, rng: random.Random | None = None):
        self.holdings: Tuple[Holding, ...] = (generator or HoldingMockGenerator()).generate()
        self._rng = rng or random.Random()

    # Counting

    def get_holdings_where_are_companies(self) -> int:
        """Number of holdings with at least one company."""
        return sum(1 for h in self.holdings if len(h.companies) >= 1)

    def get_companies_amount(self) -> int:
        return sum(len(h.companies) for h in self.holdings)

    def get_all_user_amount(self) -> int:
        return sum(1 for _ in self._users())

    def get_all_user_accounts_amount(self) -> int:
        return sum(1 for _ in self._accounts())

    def get_woman_amount(self) -> int:
        return sum(1 for _ in filter(is_woman, self._users()))

    def get_age_squares_sum(self) -> int:
        return sum(u.age ** 2 for u in self._users())

    # Names

    def get_holding_names(self) -> List[str]:
        """Lower-cased holding names in dataset order."""
        return [h.name.lower() for h in self.holdings]

    def get_holding_names_as_string(self) -> str:
        """Sorted holding names in the form (Coca-Cola, Nestle, Pepsico)."""
        return "(" + ", ".join(sorted(h.name for h in self.holdings)) + ")"

    def get_all_companies_names(self) -> List[str]:
        return [c.name for c in self._companies()]

    def get_all_companies_names_as_linked_list(self) -> Deque[str]:
        return deque(c.name for c in self._companies())

    def get_all_companies_names_as_string(self) -> str:
        return "+".join(c.name for c in self._companies())

    def get_all_companies_names_as_string_using_string_builder(self) -> str:
        """Same as get_all_companies_names_as_string, folded name by name."""
        return functools.reduce(
            lambda acc, name: f"{acc}+{name}" if acc else name,
            (c.name for c in self._companies()),
            "",
        )

    def get_user_names(self) -> str:
        """Sorted, unique first names separated by single spaces."""
        return " ".join(sorted({u.first_name for u in self._users()}))

    # Currencies

    def get_all_currencies(self) -> str:
        return ", ".join(c.value for c in self._currencies())

    def get_all_currencies_using_generate(self) -> str:
        currencies = self._currencies()
        source = iter(currencies)
        generated = (next(source) for _ in itertools.count())
        return ", ".join(c.value for c in itertools.islice(generated, len(currencies)))

    # Money

    def get_account_amount_in_pln(self, account: Account) -> Decimal:
        return convert_to_pln(account.amount, account.currency)

    def get_total_cash_in_pln(self, accounts: Iterable[Account]) -> Decimal:
        """
        Sum of the given accounts converted to PLN.

        Raises EmptyAccountsError when no accounts are passed.
        """
        amounts = [self.get_account_amount_in_pln(a) for a in accounts]
        if not amounts:
            raise EmptyAccountsError("Cannot total an empty list of accounts")
        return functools.reduce(operator.add, amounts)

    def get_money_on_accounts(self) -> Dict[AccountType, Decimal]:
        """PLN total per account type."""
        money: Dict[AccountType, Decimal] = {}
        for account in self._accounts():
            money[account.type] = money.get(account.type, Decimal("0")) + self.get_account_amount_in_pln(account)
        return money

    def get_total_money_in_pln(self) -> Decimal:
        return sum((self.get_account_amount_in_pln(a) for a in self._accounts()), Decimal("0"))

    def get_men_money_per_account_type(self) -> Dict[AccountType, Dict[User, Decimal]]:
        """
        For each account type held by a man, map every such man to the PLN
        total of his accounts of that type.
        """
        result: Dict[AccountType, Dict[User, Decimal]] = {}
        for user in self._users():
            if user.sex != Sex.MAN:
                continue
            for account in user.accounts:
                per_user = result.setdefault(account.type, {})
                per_user[user] = per_user.get(user, Decimal("0")) + self.get_account_amount_in_pln(account)
        return result

    def get_other_sex_money_in_pln(self) -> Decimal:
        """PLN total held by users who are neither men nor women."""
        return sum(
            (
                self.get_account_amount_in_pln(a)
                for u in self._users()
                if u.sex == Sex.OTHER
                for a in u.accounts
            ),
            Decimal("0"),
        )

    # Finders

    def get_users_for_predicate(self, predicate: Callable[[User], bool]) -> Set[str]:
        """First names of users matching predicate."""
        return {u.first_name for u in self._users() if predicate(u)}

    def get_user(self, predicate: Callable[[User], bool]) -> User:
        """First user matching predicate. Raises UserNotFoundError if none does."""
        user = self.find_user(predicate)
        if user is None:
            raise UserNotFoundError("No user matches the given predicate")
        return user

    def find_user(self, predicate: Callable[[User], bool]) -> Optional[User]:
        return next(filter(predicate, self._users()), None)

    def get_richest_woman(self) -> Optional[User]:
        """Woman with the largest PLN total across all her accounts, if any."""
        return max(
            filter(is_woman, self._users()),
            key=lambda u: sum((self.get_account_amount_in_pln(a) for a in u.accounts), Decimal("0")),
            default=None,
        )

    def get_most_popular_account_type(self) -> AccountType:
        """
        Account type used by most accounts.

        Equal counts go to the type declared first in AccountType. Raises
        NoAccountsError when the dataset has no accounts.
        """
        counts = Counter(a.type for a in self._accounts())
        if not counts:
            raise NoAccountsError("No accounts to pick the most popular type from")
        return max((t for t in AccountType if t in counts), key=counts.__getitem__)

    # Grouping

    def get_user_per_company(self) -> Dict[str, List[User]]:
        return self.get_user_per_company_mapped(lambda u: u)

    def get_user_per_company_as_string(self) -> Dict[str, List[str]]:
        return self.get_user_per_company_mapped(lambda u: u.full_name)

    def get_user_per_company_mapped(self, converter: Callable[[User], T]) -> Dict[str, List[T]]:
        """Company name -> users of that company, each passed through converter."""
        return {c.name: [converter(u) for u in c.users] for c in self._companies()}

    def get_user_by_sex(self) -> Dict[bool, Set[str]]:
        """
        Last names split by sex: True for men, False for women. Users of
        any other sex are left out.
        """
        result: Dict[bool, Set[str]] = {True: set(), False: set()}
        for user in self._users():
            if user.sex == Sex.OTHER:
                continue
            result[user.sex == Sex.MAN].add(user.last_name)
        return result

    def create_accounts_map(self) -> Dict[str, Account]:
        return {a.number: a for a in self._accounts()}

    def execute_for_each_company(self, consumer: Callable[[Company], object]) -> None:
        for company in self._companies():
            consumer(company)

    # Limits

    def get_first_n_company(self, n: int) -> Set[str]:
        return {c.name for c in itertools.islice(self._companies(), n)}

    def get_users(self) -> Set[User]:
        return set(itertools.islice(self._users(), get_int_setting("users_limit")))

    def get_old_woman(self, age: int) -> List[str]:
        """
        First names of women older than age. Every user older than age is
        printed before the women are picked out.
        """
        older = _peek((u for u in self._users() if u.age > age), print)
        return [u.first_name for u in older if is_woman(u)]

    # Display

    def show_all_user(self) -> None:
        """Print every user's full name, first names from z to a."""
        for user in sorted(self._users(), key=lambda u: u.first_name, reverse=True):
            print(user.full_name)

    def get_adultant_status(self, user: Optional[User]) -> str:
        if user is None:
            return NO_USER
        return f"{user.full_name} ma lat {user.age}"

    # Export

    def save_accounts_in_file(self, file_name: str) -> None:
        """Write every account as NUMBER|AMOUNT|CURRENCY, one per line."""
        write_accounts(file_name, self._accounts())

    # Sampling

    def get_random_users(self, n: int) -> List[User]:
        """
        n distinct users picked uniformly at random.

        Raises NotEnoughUsersError if n is negative or larger than the
        number of users.
        """
        pool = tuple(self._users())
        if n < 0 or n > len(pool):
            raise NotEnoughUsersError(n, len(pool))
        draws = (self._rng.choice(pool) for _ in itertools.count())
        return list(itertools.islice(_distinct(draws), n))

    # Streams

    def _companies(self) -> Iterator[Company]:
        return itertools.chain.from_iterable(h.companies for h in self.holdings)

    def _users(self) -> Iterator[User]:
        return itertools.chain.from_iterable(c.users for c in self._companies())

    def _accounts(self) -> Iterator[Account]:
        return itertools.chain.from_iterable(u.accounts for u in self._users())

    def _currencies(self) -> List[Currency]:
        """Distinct account currencies sorted by code."""
        return sorted({a.currency for a in self._accounts()}, key=lambda c: c.value)
