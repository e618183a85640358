"""Domain model entities for pennypincher.

These are pure data classes representing business concepts, independent of
the storage schema. The import core works only with these types, so it can
run against any persistence backend (or none at all, in tests).
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Category:
    """Category domain entity; at most two levels deep."""

    id: str
    name: str
    parent_id: Optional[str] = None

    @property
    def is_main(self) -> bool:
        return self.parent_id is None


@dataclass(frozen=True)
class Currency:
    """Currency domain entity."""

    id: str
    code: str
    name: str
    symbol: str


@dataclass(frozen=True)
class PaymentMethod:
    """Payment method domain entity (the "account" column in imports)."""

    id: str
    name: str


@dataclass(frozen=True)
class IncomeSource:
    """Income source domain entity."""

    id: str
    name: str


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: str
    date: date
    description: str
    amount: Decimal
    category_id: str
    currency_id: str
    payment_method_id: Optional[str] = None
    is_subscription: bool = False
    next_due_date: Optional[date] = None


@dataclass(frozen=True)
class Income:
    """Income domain entity."""

    id: str
    date: date
    description: str
    amount: Decimal
    income_source_id: str
    currency_id: str


class MessageKind(Enum):
    """Kinds of diagnostics produced while importing a batch."""

    EMPTY_FILE = "empty_file"
    MISSING_COLUMNS = "missing_columns"
    MISSING_FIELD = "missing_field"
    INVALID_VALUE = "invalid_value"
    UNRESOLVED_REFERENCE = "unresolved_reference"
    SOFT_DEGRADATION = "soft_degradation"
    INFORMATIONAL = "informational"

    @property
    def is_error(self) -> bool:
        return self is not MessageKind.INFORMATIONAL

    @property
    def is_batch_fatal(self) -> bool:
        return self in (MessageKind.EMPTY_FILE, MessageKind.MISSING_COLUMNS)


@dataclass(frozen=True)
class ImportMessage:
    """A single diagnostic attached to a row (or to the whole batch)."""

    kind: MessageKind
    row_number: Optional[int]
    detail: str

    @property
    def is_error(self) -> bool:
        return self.kind.is_error

    def __str__(self) -> str:
        if self.row_number is None:
            return self.detail
        return f"Row {self.row_number}: {self.detail}"


ImportedRecord = Union[Expense, Income]


@dataclass
class ImportReport:
    """Result of importing one batch.

    Built fresh per import and handed back to the caller, which decides what
    to persist and how to present the messages. A row that produced an error
    message is not necessarily skipped: soft degradations are reported as
    errors while the row is still imported.
    """

    new_records: list[ImportedRecord] = field(default_factory=list)
    messages: list[ImportMessage] = field(default_factory=list)
    skipped_rows: int = 0
    created_categories: list[Category] = field(default_factory=list)
    aborted: bool = False

    @property
    def errors(self) -> list[str]:
        return [str(m) for m in self.messages if m.is_error]

    @property
    def info_messages(self) -> list[str]:
        return [str(m) for m in self.messages if not m.is_error]

    @property
    def created_category_count(self) -> int:
        return len(self.created_categories)

    def messages_of(self, kind: MessageKind) -> list[ImportMessage]:
        """Return messages of a single kind, in the order they were recorded."""
        return [m for m in self.messages if m.kind is kind]


@dataclass(frozen=True)
class PersistResult:
    """Outcome of writing an import report to storage.

    Writes happen one by one; when one fails the sequence stops and the
    earlier writes are kept, so ``error`` may be set alongside non-zero counts.
    """

    categories_written: int = 0
    records_written: int = 0
    error: Optional[str] = None

    @property
    def complete(self) -> bool:
        return self.error is None
