"""Expense export domain service."""

import logging
from pathlib import Path

from openpyxl import Workbook

from pennypincher.database.base import Database
from pennypincher.domain.category import CategoryService

logger = logging.getLogger(__name__)

EXPORT_HEADERS = (
    "Date",
    "Description",
    "Amount",
    "Currency",
    "Category",
    "Payment Method",
    "Is Subscription",
    "Next Due Date",
)
NOT_AVAILABLE = "N/A"
UNKNOWN_CURRENCY = "UNK"


class ExpenseExportService:
    """Service for exporting a user's expenses to a spreadsheet."""

    def __init__(self, db: Database, user_id: str):
        """Initialize export service.

        Args:
            db: Database instance
            user_id: Owner of the expenses
        """
        self.db = db
        self.user_id = user_id
        self.category_service = CategoryService(db, user_id)

    def build_rows(self) -> list[list]:
        """Build export rows, header first.

        Categories are written as their full path, dates as YYYY-MM-DD.
        """
        categories = self.category_service.list_categories()
        currencies = {c.id: c.code for c in self.db.list_currencies(self.user_id)}
        methods = {m.id: m.name for m in self.db.list_payment_methods(self.user_id)}

        rows: list[list] = [list(EXPORT_HEADERS)]
        for expense in self.db.list_expenses(self.user_id):
            rows.append(
                [
                    expense.date.isoformat(),
                    expense.description,
                    float(expense.amount),
                    currencies.get(expense.currency_id, UNKNOWN_CURRENCY),
                    self.category_service.format_category_path(expense.category_id, categories),
                    methods.get(expense.payment_method_id, NOT_AVAILABLE)
                    if expense.payment_method_id
                    else NOT_AVAILABLE,
                    "Yes" if expense.is_subscription else "No",
                    expense.next_due_date.isoformat() if expense.next_due_date else NOT_AVAILABLE,
                ]
            )
        return rows

    def export_expenses(self, output_path: str | Path) -> int:
        """Write all expenses to an .xlsx workbook.

        Args:
            output_path: Destination file

        Returns:
            Number of exported expenses
        """
        rows = self.build_rows()
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = "Expenses"
        for row in rows:
            sheet.append(row)
        workbook.save(output_path)

        logger.info("Exported %d expenses to %s", len(rows) - 1, output_path)
        return len(rows) - 1
