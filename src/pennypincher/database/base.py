"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from pennypincher.domain.entities import (
    Category,
    Currency,
    Expense,
    Income,
    IncomeSource,
    PaymentMethod,
)


class Database(ABC):
    """Abstract database interface for pennypincher.

    Every collection is scoped by user id. ``add_category``, ``add_expense``
    and ``add_income`` are upserts keyed by the record id, so repeating a
    write after a partial failure is harmless.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Category operations
    @abstractmethod
    def list_categories(self, user_id: str) -> list[Category]:
        """List all categories of a user."""
        pass

    @abstractmethod
    def get_category(self, user_id: str, category_id: str) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def add_category(self, user_id: str, category: Category) -> None:
        """Store a category."""
        pass

    # Currency operations
    @abstractmethod
    def list_currencies(self, user_id: str) -> list[Currency]:
        """List all currencies of a user."""
        pass

    @abstractmethod
    def add_currency(self, user_id: str, currency: Currency) -> None:
        """Store a currency."""
        pass

    # Payment method operations
    @abstractmethod
    def list_payment_methods(self, user_id: str) -> list[PaymentMethod]:
        """List all payment methods of a user."""
        pass

    @abstractmethod
    def add_payment_method(self, user_id: str, payment_method: PaymentMethod) -> None:
        """Store a payment method."""
        pass

    # Income source operations
    @abstractmethod
    def list_income_sources(self, user_id: str) -> list[IncomeSource]:
        """List all income sources of a user."""
        pass

    @abstractmethod
    def add_income_source(self, user_id: str, income_source: IncomeSource) -> None:
        """Store an income source."""
        pass

    # Expense operations
    @abstractmethod
    def list_expenses(self, user_id: str) -> list[Expense]:
        """List all expenses of a user, oldest first."""
        pass

    @abstractmethod
    def add_expense(self, user_id: str, expense: Expense) -> None:
        """Store an expense."""
        pass

    # Income operations
    @abstractmethod
    def list_incomes(self, user_id: str) -> list[Income]:
        """List all incomes of a user, oldest first."""
        pass

    @abstractmethod
    def add_income(self, user_id: str, income: Income) -> None:
        """Store an income."""
        pass
