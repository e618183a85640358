"""File import domain service: read, map and persist an import file."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pennypincher.database.base import Database
from pennypincher.domain.entities import Currency, Expense, ImportReport, PersistResult
from pennypincher.domain.errors import NotFoundError, PersistenceError, base_currency_not_found
from pennypincher.domain.importer import BatchImporter
from pennypincher.utils.tabular_reader import parse_tabular
from pennypincher.utils.text import normalize_for_match

logger = logging.getLogger(__name__)

DEFAULT_BASE_CURRENCY = "USD"


@dataclass(frozen=True)
class ImportOutcome:
    """An import report and what happened when it was written to storage."""

    report: ImportReport
    persisted: PersistResult


class FileImportService:
    """Service for importing expense and income files."""

    def __init__(self, db: Database, user_id: str, base_currency_code: str = DEFAULT_BASE_CURRENCY):
        """Initialize file import service.

        Args:
            db: Database instance
            user_id: Owner of the imported records
            base_currency_code: Code of the currency used for rows without one
        """
        self.db = db
        self.user_id = user_id
        self.base_currency_code = base_currency_code

    def _base_currency(self, currencies: list[Currency]) -> Currency:
        key = normalize_for_match(self.base_currency_code)
        for currency in currencies:
            if normalize_for_match(currency.code) == key:
                return currency
        raise NotFoundError(base_currency_not_found(self.base_currency_code.upper()))

    def import_expenses(self, file_path: str | Path, dry_run: bool = False) -> ImportOutcome:
        """Import expenses from a CSV or spreadsheet file.

        Args:
            file_path: Path to the import file
            dry_run: Map the file without writing anything

        Returns:
            ImportOutcome with the report and the persistence result

        Raises:
            FileNotFoundError: If the file doesn't exist
            UnreadableFileError: If the file cannot be decoded
            NotFoundError: If the base currency is not set up
        """
        currencies = self.db.list_currencies(self.user_id)
        base = self._base_currency(currencies)
        rows = parse_tabular(file_path)

        report = BatchImporter(base.id).import_expenses(
            rows,
            self.db.list_categories(self.user_id),
            currencies,
            self.db.list_payment_methods(self.user_id),
        )
        self._log_messages(report)
        if dry_run:
            return ImportOutcome(report, PersistResult())
        return ImportOutcome(report, self.persist(report))

    def import_incomes(self, file_path: str | Path, dry_run: bool = False) -> ImportOutcome:
        """Import incomes from a CSV or spreadsheet file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            UnreadableFileError: If the file cannot be decoded
            NotFoundError: If the base currency is not set up
        """
        currencies = self.db.list_currencies(self.user_id)
        base = self._base_currency(currencies)
        rows = parse_tabular(file_path)

        report = BatchImporter(base.id).import_incomes(
            rows,
            self.db.list_income_sources(self.user_id),
            currencies,
        )
        self._log_messages(report)
        if dry_run:
            return ImportOutcome(report, PersistResult())
        return ImportOutcome(report, self.persist(report))

    def persist(self, report: ImportReport) -> PersistResult:
        """Write created categories, then new records, one at a time.

        Stops at the first failed write. Earlier writes are kept.
        """
        if report.aborted:
            return PersistResult()

        categories_written = 0
        records_written = 0
        try:
            for category in report.created_categories:
                self.db.add_category(self.user_id, category)
                categories_written += 1
            for record in report.new_records:
                self._writer_for(record)(self.user_id, record)
                records_written += 1
        except PersistenceError as e:
            logger.error(
                "Import only partially saved (%d categories, %d records): %s",
                categories_written,
                records_written,
                e,
            )
            return PersistResult(categories_written, records_written, str(e))

        logger.info("Saved %d categories and %d records", categories_written, records_written)
        return PersistResult(categories_written, records_written)

    def _writer_for(self, record: object) -> Callable:
        if isinstance(record, Expense):
            return self.db.add_expense
        return self.db.add_income

    @staticmethod
    def _log_messages(report: ImportReport) -> None:
        # Callers present the messages; keep them out of the console log
        for message in report.messages:
            logger.debug("Import %s: %s", message.kind.value, message)
