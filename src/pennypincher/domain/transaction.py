"""Expense and income domain services."""

from typing import Optional
from datetime import date

from pennypincher.database.base import Database
from pennypincher.domain.entities import Expense, Income


class ExpenseService:
    """Service for reading a user's expenses."""

    def __init__(self, db: Database, user_id: str):
        """Initialize expense service.

        Args:
            db: Database instance
            user_id: Owner of the expenses
        """
        self.db = db
        self.user_id = user_id

    def list_expenses(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[str] = None,
    ) -> list[Expense]:
        """List expenses with optional filters.

        Args:
            start_date: Optional start date filter (inclusive)
            end_date: Optional end date filter (inclusive)
            category_id: Optional category ID filter

        Returns:
            List of expenses, oldest first
        """
        expenses = self.db.list_expenses(self.user_id)
        if start_date is not None:
            expenses = [e for e in expenses if e.date >= start_date]
        if end_date is not None:
            expenses = [e for e in expenses if e.date <= end_date]
        if category_id is not None:
            expenses = [e for e in expenses if e.category_id == category_id]
        return expenses


class IncomeService:
    """Service for reading a user's incomes."""

    def __init__(self, db: Database, user_id: str):
        self.db = db
        self.user_id = user_id

    def list_incomes(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Income]:
        """List incomes, oldest first, optionally limited to a date range."""
        incomes = self.db.list_incomes(self.user_id)
        if start_date is not None:
            incomes = [i for i in incomes if i.date >= start_date]
        if end_date is not None:
            incomes = [i for i in incomes if i.date <= end_date]
        return incomes
