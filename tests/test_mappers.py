"""Tests for domain/ORM mappers."""

from datetime import date
from decimal import Decimal

from pennypincher.database import mappers
from pennypincher.database.models import Currency as ORMCurrency
from pennypincher.domain.entities import Category, Expense, Income


def test_category_mapping():
    """Categories map both ways and carry the owner."""
    category = Category(id="c1", name="Food", parent_id=None)
    orm = mappers.category_to_orm("u1", category)
    assert orm.user_id == "u1"
    assert mappers.category_to_domain(orm) == category


def test_currency_to_domain():
    """ORM currencies map to domain currencies."""
    orm = ORMCurrency(id="usd", user_id="u1", code="USD", name="US Dollar", symbol="$")
    currency = mappers.currency_to_domain(orm)
    assert (currency.id, currency.code, currency.symbol) == ("usd", "USD", "$")


def test_expense_mapping():
    """Expenses keep every field through the mapping."""
    expense = Expense(
        id="e1",
        date=date(2024, 1, 5),
        description="Gym",
        amount=Decimal("30.00"),
        category_id="c1",
        currency_id="usd",
        is_subscription=True,
        next_due_date=date(2024, 2, 5),
    )
    orm = mappers.expense_to_orm("u1", expense)
    assert orm.user_id == "u1"
    assert mappers.expense_to_domain(orm) == expense


def test_income_mapping():
    """Incomes keep every field through the mapping."""
    income = Income(
        id="i1",
        date=date(2024, 1, 31),
        description="Salary",
        amount=Decimal("5000"),
        income_source_id="s1",
        currency_id="usd",
    )
    assert mappers.income_to_domain(mappers.income_to_orm("u1", income)) == income
