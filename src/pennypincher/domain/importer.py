"""Import orchestration: turn a raw grid into a validated batch of records."""

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence, Union

from pennypincher.domain.entities import (
    Category,
    Currency,
    ImportMessage,
    ImportReport,
    IncomeSource,
    MessageKind,
    PaymentMethod,
)
from pennypincher.domain.errors import MissingColumnsError, RowRejected
from pennypincher.domain.row_mapper import (
    EXPENSE_COLUMNS,
    EXPENSE_REQUIRED_COLUMNS,
    INCOME_COLUMNS,
    INCOME_REQUIRED_COLUMNS,
    ColumnMap,
    ExpenseRowMapper,
    IncomeRowMapper,
    RowResult,
)
from pennypincher.domain.taxonomy import CategoryReconciler, CategoryTaxonomy, new_id

logger = logging.getLogger(__name__)

RowMapper = Callable[[Sequence[Any], int], RowResult]


class BatchImporter:
    """Maps whole import files onto expense or income records.

    Rows are processed strictly in file order against one batch-local
    taxonomy, so a category created for row N is reused by row N+1. Nothing
    is persisted here; the returned report carries the new records and the
    categories to create.
    """

    def __init__(
        self,
        base_currency_id: str,
        aliases: Optional[Mapping[str, str]] = None,
        id_factory: Callable[[], str] = new_id,
    ):
        """Initialize importer.

        Args:
            base_currency_id: Currency used when a row has no (known) currency
            aliases: Main category aliases; defaults to CATEGORY_ALIASES
            id_factory: Callable producing ids for new records and categories
        """
        self.base_currency_id = base_currency_id
        self.aliases = aliases
        self.id_factory = id_factory

    def import_expenses(
        self,
        raw_rows: Sequence[Sequence[Any]],
        categories: Union[Iterable[Category], CategoryTaxonomy],
        currencies: Sequence[Currency],
        payment_methods: Sequence[PaymentMethod],
    ) -> ImportReport:
        """Import expense rows.

        Args:
            raw_rows: Grid from parse_tabular; the first row is the header
            categories: The user's existing categories, or a taxonomy to extend
            currencies: The user's currencies
            payment_methods: The user's payment methods

        Returns:
            ImportReport with new expenses and created categories
        """
        taxonomy = categories if isinstance(categories, CategoryTaxonomy) else CategoryTaxonomy(categories)
        reconciler = CategoryReconciler(taxonomy, aliases=self.aliases, id_factory=self.id_factory)

        def build(column_map: ColumnMap) -> RowMapper:
            return ExpenseRowMapper(
                column_map,
                reconciler,
                currencies,
                payment_methods,
                self.base_currency_id,
                id_factory=self.id_factory,
            ).map_row

        return self._run(raw_rows, EXPENSE_COLUMNS, EXPENSE_REQUIRED_COLUMNS, "expense import", build)

    def import_incomes(
        self,
        raw_rows: Sequence[Sequence[Any]],
        income_sources: Sequence[IncomeSource],
        currencies: Sequence[Currency],
    ) -> ImportReport:
        """Import income rows. Unknown income sources reject the row."""

        def build(column_map: ColumnMap) -> RowMapper:
            return IncomeRowMapper(
                column_map,
                income_sources,
                currencies,
                self.base_currency_id,
                id_factory=self.id_factory,
            ).map_row

        return self._run(raw_rows, INCOME_COLUMNS, INCOME_REQUIRED_COLUMNS, "income import", build)

    def _run(
        self,
        raw_rows: Sequence[Sequence[Any]],
        expected: Sequence[str],
        required: Sequence[str],
        label: str,
        build: Callable[[ColumnMap], RowMapper],
    ) -> ImportReport:
        report = ImportReport()

        if not raw_rows:
            report.messages.append(
                ImportMessage(MessageKind.EMPTY_FILE, None, "Imported file is empty.")
            )
            report.aborted = True
            return report

        try:
            column_map = ColumnMap.from_header(raw_rows[0], expected, required, label=label)
        except MissingColumnsError as e:
            logger.info("Aborting %s: missing columns %s", label, ", ".join(e.missing))
            report.messages.append(ImportMessage(MessageKind.MISSING_COLUMNS, None, str(e)))
            report.aborted = True
            return report

        map_row = build(column_map)

        # Header is row 1
        for row_number, row in enumerate(raw_rows[1:], start=2):
            try:
                result = map_row(row, row_number)
            except RowRejected as e:
                logger.debug("Skipping row %d: %s", row_number, e.message.detail)
                report.messages.append(e.message)
                report.skipped_rows += 1
                continue

            report.new_records.append(result.record)
            report.messages.extend(result.messages)
            report.created_categories.extend(result.created)

        logger.info(
            "Finished %s: %d imported, %d skipped, %d categories created, %d errors",
            label,
            len(report.new_records),
            report.skipped_rows,
            report.created_category_count,
            len(report.errors),
        )
        return report
