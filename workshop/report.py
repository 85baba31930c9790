"""Tabular views of the workshop dataset."""
from decimal import Decimal
from typing import Dict

import pandas as pd

from workshop.adapters.fx_static import get_current_rates
from workshop.core.models import Sex
from workshop.core.workshop import WorkShop


def users_table(ws: WorkShop) -> pd.DataFrame:
    """One row per user, in dataset order."""
    data = []
    for holding in ws.holdings:
        for company in holding.companies:
            for user in company.users:
                total = ws.get_total_cash_in_pln(user.accounts) if user.accounts else Decimal("0")
                data.append({
                    "Holding": holding.name,
                    "Company": company.name,
                    "First Name": user.first_name,
                    "Last Name": user.last_name,
                    "Age": user.age,
                    "Sex": user.sex.value,
                    "Accounts": len(user.accounts),
                    "Total (PLN)": f"{total:,.2f}",
                })

    if not data:
        return pd.DataFrame(columns=["Holding", "Company", "First Name", "Last Name", "Age", "Sex", "Accounts", "Total (PLN)"])

    return pd.DataFrame(data)


def accounts_table(ws: WorkShop) -> pd.DataFrame:
    """One row per account, in dataset order."""
    data = []
    for holding in ws.holdings:
        for company in holding.companies:
            for user in company.users:
                for account in user.accounts:
                    data.append({
                        "Number": account.number,
                        "Owner": user.full_name,
                        "Company": company.name,
                        "Type": account.type.value,
                        "Currency": account.currency.value,
                        "Amount": f"{account.amount:,.2f}",
                        "Value (PLN)": f"{ws.get_account_amount_in_pln(account):,.4f}",
                    })

    if not data:
        return pd.DataFrame(columns=["Number", "Owner", "Company", "Type", "Currency", "Amount", "Value (PLN)"])

    return pd.DataFrame(data)


def rates_table() -> pd.DataFrame:
    """Exchange rates to PLN for every supported currency."""
    return pd.DataFrame(
        [{"Currency": ccy.value, "Rate (PLN)": f"{rate:.2f}"} for ccy, rate in get_current_rates().items()]
    )


def money_summary(ws: WorkShop) -> Dict[str, Decimal]:
    """
    Dataset-wide money totals in PLN.

    Returns dict with total, per account type (keyed by type name) and
    per sex (keyed men/women/other).
    """
    by_sex = {sex: Decimal("0") for sex in Sex}
    for holding in ws.holdings:
        for company in holding.companies:
            for user in company.users:
                for account in user.accounts:
                    by_sex[user.sex] += ws.get_account_amount_in_pln(account)

    summary = {"total": ws.get_total_money_in_pln()}
    summary.update({t.value: amount for t, amount in ws.get_money_on_accounts().items()})
    summary.update({
        "men": by_sex[Sex.MAN],
        "women": by_sex[Sex.WOMAN],
        "other": by_sex[Sex.OTHER],
    })
    return summary
