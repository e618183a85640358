"""Generic SQLAlchemy database implementation."""

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pennypincher.database.base import Database
from pennypincher.database.models import (
    Category,
    Currency,
    PaymentMethod,
    IncomeSource,
    Expense,
    Income,
    create_session_factory,
)
from pennypincher.database.mappers import (
    category_to_domain,
    category_to_orm,
    currency_to_domain,
    payment_method_to_domain,
    income_source_to_domain,
    expense_to_domain,
    expense_to_orm,
    income_to_domain,
    income_to_orm,
)
from pennypincher.domain.entities import (
    Category as DomainCategory,
    Currency as DomainCurrency,
    PaymentMethod as DomainPaymentMethod,
    IncomeSource as DomainIncomeSource,
    Expense as DomainExpense,
    Income as DomainIncome,
)
from pennypincher.domain.errors import PersistenceError

logger = logging.getLogger(__name__)


class SQLAlchemyDatabase(Database):
    """Database backed by a single long-lived SQLAlchemy session.

    Every write is committed on its own, so a failing write never takes
    earlier ones down with it.
    """

    def __init__(self, database_url: str):
        """Create the engine and tables for ``database_url`` (any SQLAlchemy URL)."""
        self.database_url = database_url
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    @property
    def session(self) -> Session:
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _write(self, obj: object, what: str) -> None:
        """Upsert one object and commit, rolling back on failure."""
        try:
            self.session.merge(obj)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("Failed to write %s: %s", what, e)
            raise PersistenceError(f"Failed to write {what}: {e}") from e

    def connect(self) -> None:
        if self._session is None:
            self._session = self.session_factory()

    def disconnect(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        # Tables are created with the session factory
        pass

    # Category operations
    def list_categories(self, user_id: str) -> list[DomainCategory]:
        """List all categories of a user."""
        categories = (
            self.session.query(Category)
            .filter(Category.user_id == user_id)
            .order_by(Category.name)
            .all()
        )
        return [category_to_domain(cat) for cat in categories]

    def get_category(self, user_id: str, category_id: str) -> Optional[DomainCategory]:
        """Get category by ID."""
        cat = (
            self.session.query(Category)
            .filter(Category.user_id == user_id, Category.id == category_id)
            .first()
        )
        if cat is None:
            return None
        return category_to_domain(cat)

    def add_category(self, user_id: str, category: DomainCategory) -> None:
        """Store a category."""
        self._write(category_to_orm(user_id, category), f"category '{category.name}'")

    # Currency operations
    def list_currencies(self, user_id: str) -> list[DomainCurrency]:
        """List all currencies of a user."""
        currencies = (
            self.session.query(Currency)
            .filter(Currency.user_id == user_id)
            .order_by(Currency.code)
            .all()
        )
        return [currency_to_domain(c) for c in currencies]

    def add_currency(self, user_id: str, currency: DomainCurrency) -> None:
        """Store a currency."""
        self._write(
            Currency(
                id=currency.id,
                user_id=user_id,
                code=currency.code,
                name=currency.name,
                symbol=currency.symbol,
            ),
            f"currency '{currency.code}'",
        )

    # Payment method operations
    def list_payment_methods(self, user_id: str) -> list[DomainPaymentMethod]:
        """List all payment methods of a user."""
        methods = (
            self.session.query(PaymentMethod)
            .filter(PaymentMethod.user_id == user_id)
            .order_by(PaymentMethod.name)
            .all()
        )
        return [payment_method_to_domain(m) for m in methods]

    def add_payment_method(self, user_id: str, payment_method: DomainPaymentMethod) -> None:
        """Store a payment method."""
        self._write(
            PaymentMethod(id=payment_method.id, user_id=user_id, name=payment_method.name),
            f"payment method '{payment_method.name}'",
        )

    # Income source operations
    def list_income_sources(self, user_id: str) -> list[DomainIncomeSource]:
        """List all income sources of a user."""
        sources = (
            self.session.query(IncomeSource)
            .filter(IncomeSource.user_id == user_id)
            .order_by(IncomeSource.name)
            .all()
        )
        return [income_source_to_domain(s) for s in sources]

    def add_income_source(self, user_id: str, income_source: DomainIncomeSource) -> None:
        """Store an income source."""
        self._write(
            IncomeSource(id=income_source.id, user_id=user_id, name=income_source.name),
            f"income source '{income_source.name}'",
        )

    # Expense operations
    def list_expenses(self, user_id: str) -> list[DomainExpense]:
        """List all expenses of a user, oldest first."""
        expenses = (
            self.session.query(Expense)
            .filter(Expense.user_id == user_id)
            .order_by(Expense.date, Expense.created_at)
            .all()
        )
        return [expense_to_domain(e) for e in expenses]

    def add_expense(self, user_id: str, expense: DomainExpense) -> None:
        """Store an expense."""
        self._write(expense_to_orm(user_id, expense), f"expense {expense.id}")

    # Income operations
    def list_incomes(self, user_id: str) -> list[DomainIncome]:
        """List all incomes of a user, oldest first."""
        incomes = (
            self.session.query(Income)
            .filter(Income.user_id == user_id)
            .order_by(Income.date, Income.created_at)
            .all()
        )
        return [income_to_domain(i) for i in incomes]

    def add_income(self, user_id: str, income: DomainIncome) -> None:
        """Store an income."""
        self._write(income_to_orm(user_id, income), f"income {income.id}")
