"""Tests for the static FX adapter."""
from decimal import Decimal

import pytest

from workshop.adapters.fx_static import convert_to_pln, get_current_rates
from workshop.core.models import Currency


def test_current_rates_cover_every_currency() -> None:
    rates = get_current_rates()
    assert set(rates) == set(Currency)
    assert rates[Currency.PLN] == Decimal("1.00")
    assert rates[Currency.USD] == Decimal("3.72")


def test_only_pln_quote_is_supported() -> None:
    with pytest.raises(ValueError):
        get_current_rates("EUR")


def test_convert_pln_is_identity() -> None:
    amount = Decimal("10.5")
    assert convert_to_pln(amount, Currency.PLN) is amount


def test_convert_keeps_full_scale() -> None:
    assert str(convert_to_pln(Decimal("100"), Currency.USD)) == "372.00"
    assert str(convert_to_pln(Decimal("1.0"), Currency.CHF)) == "3.830"


def test_convert_with_custom_rates() -> None:
    rates = {Currency.EUR: Decimal("4.5")}
    assert convert_to_pln(Decimal("2"), Currency.EUR, rates) == Decimal("9.0")

    with pytest.raises(KeyError):
        convert_to_pln(Decimal("2"), Currency.USD, rates)
