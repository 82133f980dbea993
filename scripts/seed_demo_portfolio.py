#!/usr/bin/env python3
"""
Seed a demo portfolio covering the last year into the local database.

Simulates a salary account in the base currency, a EUR card account used for
day-to-day spending and a USD brokerage account with a cash ledger and two
stock positions.
"""

import argparse
import random
from datetime import date, timedelta

from networth.app_context import AppContext
from networth.config.settings import get_settings
from networth.domain.models import (
    Account,
    Ledger,
    LedgerKind,
    Portfolio,
    Record,
    Symbol,
)

SPEND_CATEGORIES = [
    ("groceries", 20.0, 120.0),
    ("restaurants", 15.0, 90.0),
    ("transport", 3.0, 60.0),
    ("shopping", 10.0, 250.0),
    ("utilities", 40.0, 150.0),
]


def _salary_account(base: Symbol, start: date, today: date) -> Account:
    records = []
    month = start.replace(day=25)
    while month <= today:
        records.append(Record(month, 6500.0, "salary", "Monthly salary"))
        records.append(Record(month + timedelta(days=1), -1800.0, "rent", "Rent"))
        next_month = month.replace(day=1) + timedelta(days=32)
        month = next_month.replace(day=25)
    return Account(
        id="salary",
        name="Salary Account",
        currency=base,
        ledgers=[Ledger(name="Cash", symbol=base, records=records)],
        initial_balance=12000.0,
        initial_date=start,
    )


def _card_account(start: date, today: date, rng: random.Random) -> Account:
    eur = Symbol.currency("EUR")
    records = []
    day = start
    while day <= today:
        for _ in range(rng.randint(0, 2)):
            category, low, high = rng.choice(SPEND_CATEGORIES)
            records.append(Record(day, -round(rng.uniform(low, high), 2), category, category.title()))
        if day.day == 1:
            records.append(Record(day, 1500.0, "transfer", "Top-up"))
        day += timedelta(days=1)
    return Account(
        id="card",
        name="EUR Card",
        currency=eur,
        ledgers=[Ledger(name="Cash", symbol=eur, records=records)],
        spending=True,
    )


def _broker_account(start: date, today: date) -> Account:
    usd = Symbol.currency("USD")
    cash = [Record(start, 20000.0, "deposit", "Initial funding")]
    aapl, vti = [], []
    week = start + timedelta(days=(7 - start.weekday()) % 7)
    while week <= today:
        aapl.append(Record(week, 2.0, "buy", "Weekly AAPL"))
        cash.append(Record(week, -370.0, "buy", "Weekly AAPL"))
        if week.day <= 7:
            vti.append(Record(week, 5.0, "buy", "Monthly VTI"))
            cash.append(Record(week, -1260.0, "buy", "Monthly VTI"))
        week += timedelta(days=7)
    return Account(
        id="broker",
        name="Brokerage",
        currency=usd,
        ledgers=[
            Ledger(name="Cash", symbol=usd, records=cash),
            Ledger(name="Apple", symbol=Symbol.instrument("AAPL"), kind=LedgerKind.STOCK, records=aapl),
            Ledger(name="Total Market", symbol=Symbol.instrument("VTI"), kind=LedgerKind.STOCK, records=vti),
        ],
    )


def build_demo_portfolio(owner: str, base_currency: str, days: int, seed: int) -> Portfolio:
    rng = random.Random(seed)
    today = date.today()
    start = today - timedelta(days=days)
    base = Symbol.currency(base_currency)

    accounts = [
        _salary_account(base, start, today),
        _card_account(start, today, rng),
        _broker_account(start, today),
    ]
    for account in accounts:
        account.owner = owner
    return Portfolio(
        owner=owner,
        base_currency=base,
        accounts={account.id: account for account in accounts},
    )


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--owner", default=settings.default_owner)
    parser.add_argument("--base-currency", default=settings.base_currency)
    parser.add_argument("--days", type=int, default=365)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    portfolio = build_demo_portfolio(args.owner, args.base_currency, args.days, args.seed)
    record_count = sum(len(ledger.records) for _, ledger in portfolio.iter_ledgers())

    context = AppContext(settings)
    context.initialize()
    with context.portfolio_repo() as repo:
        repo.save(portfolio)

    print(f"Seeded portfolio for '{portfolio.owner}' ({portfolio.base_currency})")
    print(f"  {len(portfolio.accounts)} accounts, {record_count} records")
    print(f"  database: {settings.get_database_url()}")


if __name__ == "__main__":
    main()
