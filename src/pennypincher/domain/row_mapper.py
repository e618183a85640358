"""Validate import rows and map them onto expense and income records."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Optional, Sequence

from pennypincher.domain.entities import (
    Category,
    Currency,
    Expense,
    ImportMessage,
    ImportedRecord,
    Income,
    IncomeSource,
    MessageKind,
    PaymentMethod,
)
from pennypincher.domain.errors import MissingColumnsError, RowRejected
from pennypincher.domain.taxonomy import CategoryReconciler, new_id
from pennypincher.utils.amount_parser import coerce_amount, round_to_cents
from pennypincher.utils.date_parser import coerce_date
from pennypincher.utils.text import cell_text, coerce_boolean, is_blank, normalize_for_match

EXPENSE_COLUMNS = (
    "date",
    "amount",
    "currency",
    "account",
    "category",
    "categorygroup",
    "note",
    "issubscription",
    "nextduedate",
)
EXPENSE_REQUIRED_COLUMNS = ("date", "amount", "category")

INCOME_COLUMNS = ("date", "description", "amount", "incomesourcename", "currencycode")
INCOME_REQUIRED_COLUMNS = ("date", "description", "amount", "incomesourcename")


class ColumnMap:
    """Maps normalized header names to column indexes of the uploaded file."""

    def __init__(self, indexes: dict[str, int]):
        self.indexes = dict(indexes)

    @classmethod
    def from_header(
        cls,
        header_row: Sequence[Any],
        expected: Sequence[str],
        required: Sequence[str] = (),
        label: str = "import",
    ) -> "ColumnMap":
        """Build a column map from a header row.

        Header names are matched case-insensitively; the first occurrence of
        a name wins and unknown columns are ignored.

        Raises:
            MissingColumnsError: If any of ``required`` is absent
        """
        normalized = [normalize_for_match(h) for h in header_row]
        indexes = {}
        for name in expected:
            if name in normalized:
                indexes[name] = normalized.index(name)

        missing = [name for name in required if name not in indexes]
        if missing:
            raise MissingColumnsError(
                missing,
                f"Missing essential columns for {label}: {', '.join(missing)}. "
                f"The file must have at least: {', '.join(required)}.",
            )
        return cls(indexes)

    def __contains__(self, column: object) -> bool:
        return column in self.indexes

    def get(self, row: Sequence[Any], column: str) -> Any:
        """Return the raw cell for ``column``, or None if absent or out of range."""
        index = self.indexes.get(column)
        if index is None or index >= len(row):
            return None
        return row[index]


@dataclass
class RowResult:
    """A successfully mapped row plus its non-fatal diagnostics."""

    record: ImportedRecord
    messages: list[ImportMessage] = field(default_factory=list)
    created: tuple[Category, ...] = ()


def _reject(kind: MessageKind, row_number: int, detail: str) -> RowRejected:
    return RowRejected(ImportMessage(kind, row_number, f"{detail}. Row skipped."))


def _info(row_number: int, detail: str) -> ImportMessage:
    return ImportMessage(MessageKind.INFORMATIONAL, row_number, detail)


def _to_cents(
    amount: Decimal, raw: Any, row_number: int
) -> tuple[Decimal, Optional[ImportMessage]]:
    rounded = round_to_cents(amount)
    if rounded == amount:
        return rounded, None
    return rounded, _info(row_number, f"Amount '{cell_text(raw)}' rounded to {rounded}.")


def resolve_currency(
    value: Any,
    currencies: Sequence[Currency],
    base_currency_id: str,
    row_number: int,
) -> tuple[str, Optional[ImportMessage]]:
    """Match a currency code cell, falling back to the base currency.

    A blank cell falls back silently; an unknown code falls back with an
    informational message.
    """
    code = normalize_for_match(value)
    if not code:
        return base_currency_id, None
    for currency in currencies:
        if normalize_for_match(currency.code) == code:
            return currency.id, None
    return base_currency_id, _info(
        row_number,
        f"Currency code '{cell_text(value)}' not found. Defaulting to base currency.",
    )


class ExpenseRowMapper:
    """Maps expense rows, creating categories through the reconciler."""

    def __init__(
        self,
        column_map: ColumnMap,
        reconciler: CategoryReconciler,
        currencies: Sequence[Currency],
        payment_methods: Sequence[PaymentMethod],
        base_currency_id: str,
        id_factory: Callable[[], str] = new_id,
    ):
        self.columns = column_map
        self.reconciler = reconciler
        self.currencies = list(currencies)
        self.payment_methods = list(payment_methods)
        self.base_currency_id = base_currency_id
        self.id_factory = id_factory

    def map_row(self, row: Sequence[Any], row_number: int) -> RowResult:
        """Map one expense row.

        Raises:
            RowRejected: If a required field is missing or invalid
        """
        def get(column: str) -> Any:
            return self.columns.get(row, column)

        date_value = get("date")
        amount_value = get("amount")
        sub_name = get("category")

        missing = [
            label
            for label, value in (("Date", date_value), ("Amount", amount_value), ("Category", sub_name))
            if is_blank(value)
        ]
        if missing:
            raise _reject(
                MessageKind.MISSING_FIELD,
                row_number,
                f"Missing required data ({', '.join(missing)})",
            )

        txn_date = coerce_date(date_value)
        if txn_date is None:
            raise _reject(
                MessageKind.INVALID_VALUE,
                row_number,
                f"Invalid date format for '{cell_text(date_value)}'",
            )

        amount = coerce_amount(amount_value)
        if amount.is_nan():
            raise _reject(
                MessageKind.INVALID_VALUE,
                row_number,
                f"Invalid amount '{cell_text(amount_value)}'. Must be a non-negative number",
            )

        messages: list[ImportMessage] = []
        amount, notice = _to_cents(amount, amount_value, row_number)
        if notice is not None:
            messages.append(notice)

        resolution = self.reconciler.resolve(cell_text(get("categorygroup")), cell_text(sub_name))
        if resolution.alias_from is not None:
            messages.append(
                _info(
                    row_number,
                    f"Mapping category group '{resolution.alias_from}' to '{resolution.alias_to}'.",
                )
            )
        for category in resolution.created:
            if category.parent_id is None:
                detail = f"Main category '{category.name}' not found. Creating it."
            else:
                parent = self.reconciler.taxonomy.get(category.parent_id)
                detail = (
                    f"Sub-category '{category.name}' under '{parent.name}' not found. Creating it."
                )
            messages.append(_info(row_number, detail))

        currency_id, notice = resolve_currency(
            get("currency"), self.currencies, self.base_currency_id, row_number
        )
        if notice is not None:
            messages.append(notice)

        payment_method_id, notice = self._resolve_payment_method(get("account"), row_number)
        if notice is not None:
            messages.append(notice)

        description = cell_text(get("note")) or resolution.display_name

        is_subscription = False
        next_due_date = None
        if coerce_boolean(get("issubscription")):
            next_due_date = coerce_date(get("nextduedate"))
            if next_due_date is None:
                # Imported anyway, but reported as an error
                messages.append(
                    ImportMessage(
                        MessageKind.SOFT_DEGRADATION,
                        row_number,
                        "'Next Due Date' is missing or invalid for subscription marked as true. "
                        "Subscription flag ignored for this row.",
                    )
                )
            else:
                is_subscription = True

        expense = Expense(
            id=self.id_factory(),
            date=txn_date,
            description=description,
            amount=amount,
            category_id=resolution.category_id,
            currency_id=currency_id,
            payment_method_id=payment_method_id,
            is_subscription=is_subscription,
            next_due_date=next_due_date,
        )
        return RowResult(record=expense, messages=messages, created=resolution.created)

    def _resolve_payment_method(
        self, value: Any, row_number: int
    ) -> tuple[Optional[str], Optional[ImportMessage]]:
        name = normalize_for_match(value)
        if not name:
            return None, None
        for method in self.payment_methods:
            if normalize_for_match(method.name) == name:
                return method.id, None
        return None, _info(
            row_number,
            f"Payment method '{cell_text(value)}' (from 'Account') not found. It will be left blank.",
        )


class IncomeRowMapper:
    """Maps income rows. Income sources must already exist."""

    def __init__(
        self,
        column_map: ColumnMap,
        income_sources: Sequence[IncomeSource],
        currencies: Sequence[Currency],
        base_currency_id: str,
        id_factory: Callable[[], str] = new_id,
    ):
        self.columns = column_map
        self.income_sources = list(income_sources)
        self.currencies = list(currencies)
        self.base_currency_id = base_currency_id
        self.id_factory = id_factory

    def map_row(self, row: Sequence[Any], row_number: int) -> RowResult:
        """Map one income row.

        Raises:
            RowRejected: If a required field is missing, invalid, or the
                income source is unknown
        """
        def get(column: str) -> Any:
            return self.columns.get(row, column)

        date_value = get("date")
        description = cell_text(get("description"))
        amount_value = get("amount")
        source_value = get("incomesourcename")

        missing = [
            label
            for label, value in (
                ("Date", date_value),
                ("Description", description),
                ("Amount", amount_value),
                ("IncomeSourceName", source_value),
            )
            if is_blank(value)
        ]
        if missing:
            raise _reject(
                MessageKind.MISSING_FIELD,
                row_number,
                f"Missing required data for income ({', '.join(missing)})",
            )

        txn_date = coerce_date(date_value)
        if txn_date is None:
            raise _reject(
                MessageKind.INVALID_VALUE,
                row_number,
                f"Invalid date format for income '{cell_text(date_value)}'",
            )

        amount = coerce_amount(amount_value, absolute=False)
        if amount.is_nan() or round_to_cents(amount) <= Decimal("0"):
            raise _reject(
                MessageKind.INVALID_VALUE,
                row_number,
                f"Invalid amount for income '{cell_text(amount_value)}'. Must be a positive number",
            )

        source_key = normalize_for_match(source_value)
        source = next(
            (s for s in self.income_sources if normalize_for_match(s.name) == source_key),
            None,
        )
        if source is None:
            raise _reject(
                MessageKind.UNRESOLVED_REFERENCE,
                row_number,
                f"Income source '{cell_text(source_value)}' not found. "
                "Please add it first or ensure the name matches exactly",
            )

        messages: list[ImportMessage] = []
        amount, notice = _to_cents(amount, amount_value, row_number)
        if notice is not None:
            messages.append(notice)
        currency_id, notice = resolve_currency(
            get("currencycode"), self.currencies, self.base_currency_id, row_number
        )
        if notice is not None:
            messages.append(notice)

        income = Income(
            id=self.id_factory(),
            date=txn_date,
            description=description,
            amount=amount,
            income_source_id=source.id,
            currency_id=currency_id,
        )
        return RowResult(record=income, messages=messages)
