"""Normalization applied to account snapshots before valuation."""

from dataclasses import replace

from networth.domain.models import Account, Ledger, LedgerKind, Record

INITIAL_CATEGORY = "initial"
INITIAL_DESCRIPTION = "Initial Balance"


def initial_balance_record(account: Account) -> Record | None:
    """The synthetic opening record of an account, if it declares one."""
    if account.initial_balance is None or account.initial_date is None:
        return None
    return Record(
        date=account.initial_date,
        amount=float(account.initial_balance),
        category=INITIAL_CATEGORY,
        description=INITIAL_DESCRIPTION,
    )


def with_initial_balance(account: Account) -> Account:
    """
    Return a copy of the account whose cash ledger carries the opening record.

    The cash ledger is the one denominated in the account currency; it is
    created empty when the account has none. The input is never mutated.
    """
    record = initial_balance_record(account)
    if record is None:
        return account

    ledgers = list(account.ledgers)
    cash = account.cash_ledger()
    if cash is None:
        ledgers.append(
            Ledger(
                name=account.currency.code,
                symbol=account.currency,
                kind=LedgerKind.BANK,
                records=[record],
            )
        )
    else:
        index = ledgers.index(cash)
        ledgers[index] = replace(cash, records=[record, *cash.records])
    return replace(account, ledgers=ledgers)
