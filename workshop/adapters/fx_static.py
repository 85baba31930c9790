"""Fixed FX rate table backed by the Currency enum."""
from decimal import Decimal
from typing import Dict

from workshop.core.models import Currency
from workshop.core.settings import get_setting


def get_current_rates(quote_currency: str | None = None) -> Dict[Currency, Decimal]:
    """
    Return the exchange rates of every known currency.

    Returns dict of {currency: rate_to_PLN}. PLN itself maps to 1.00.
    """
    quote_currency = quote_currency or get_setting("base_currency")
    if quote_currency != Currency.PLN.value:
        raise ValueError("Static rates only support PLN as quote currency")

    return {currency: currency.rate for currency in Currency}


def convert_to_pln(amount: Decimal, from_ccy: Currency, rates: Dict[Currency, Decimal] | None = None) -> Decimal:
    """
    Convert amount from given currency to PLN.

    PLN amounts are returned untouched. Other amounts are multiplied by the
    rate without rounding, so the result keeps the combined scale of both
    operands (Decimal("1.0") USD -> Decimal("3.720")).

    Args:
        amount: Amount to convert
        from_ccy: Source currency
        rates: Optional rate table (defaults to the Currency enum rates)

    Raises:
        KeyError: if the rate table has no entry for from_ccy
    """
    if from_ccy == Currency.PLN:
        return amount

    if rates is None:
        return amount * from_ccy.rate

    return amount * rates[from_ccy]
