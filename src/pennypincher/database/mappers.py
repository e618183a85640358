"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the import core never sees ORM
objects and the schema can change without touching it.
"""

from pennypincher.domain import entities as domain
from pennypincher.database.models import (
    Category as ORMCategory,
    Currency as ORMCurrency,
    PaymentMethod as ORMPaymentMethod,
    IncomeSource as ORMIncomeSource,
    Expense as ORMExpense,
    Income as ORMIncome,
)


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        parent_id=orm_category.parent_id,
    )


def category_to_orm(user_id: str, category: domain.Category) -> ORMCategory:
    """Convert domain Category entity to a SQLAlchemy Category model."""
    return ORMCategory(
        id=category.id,
        user_id=user_id,
        name=category.name,
        parent_id=category.parent_id,
    )


def currency_to_domain(orm_currency: ORMCurrency) -> domain.Currency:
    """Convert SQLAlchemy Currency model to domain Currency entity."""
    return domain.Currency(
        id=orm_currency.id,
        code=orm_currency.code,
        name=orm_currency.name,
        symbol=orm_currency.symbol,
    )


def payment_method_to_domain(orm_method: ORMPaymentMethod) -> domain.PaymentMethod:
    """Convert SQLAlchemy PaymentMethod model to domain PaymentMethod entity."""
    return domain.PaymentMethod(id=orm_method.id, name=orm_method.name)


def income_source_to_domain(orm_source: ORMIncomeSource) -> domain.IncomeSource:
    """Convert SQLAlchemy IncomeSource model to domain IncomeSource entity."""
    return domain.IncomeSource(id=orm_source.id, name=orm_source.name)


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        date=orm_expense.date,
        description=orm_expense.description,
        amount=orm_expense.amount,
        category_id=orm_expense.category_id,
        currency_id=orm_expense.currency_id,
        payment_method_id=orm_expense.payment_method_id,
        is_subscription=orm_expense.is_subscription,
        next_due_date=orm_expense.next_due_date,
    )


def expense_to_orm(user_id: str, expense: domain.Expense) -> ORMExpense:
    """Convert domain Expense entity to a SQLAlchemy Expense model."""
    return ORMExpense(
        id=expense.id,
        user_id=user_id,
        date=expense.date,
        description=expense.description,
        amount=expense.amount,
        category_id=expense.category_id,
        currency_id=expense.currency_id,
        payment_method_id=expense.payment_method_id,
        is_subscription=expense.is_subscription,
        next_due_date=expense.next_due_date,
    )


def income_to_domain(orm_income: ORMIncome) -> domain.Income:
    """Convert SQLAlchemy Income model to domain Income entity."""
    return domain.Income(
        id=orm_income.id,
        date=orm_income.date,
        description=orm_income.description,
        amount=orm_income.amount,
        income_source_id=orm_income.income_source_id,
        currency_id=orm_income.currency_id,
    )


def income_to_orm(user_id: str, income: domain.Income) -> ORMIncome:
    """Convert domain Income entity to a SQLAlchemy Income model."""
    return ORMIncome(
        id=income.id,
        user_id=user_id,
        date=income.date,
        description=income.description,
        amount=income.amount,
        income_source_id=income.income_source_id,
        currency_id=income.currency_id,
    )
