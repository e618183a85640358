"""Reference data services: currencies, payment methods and income sources."""

from typing import Optional

from pennypincher.database.base import Database
from pennypincher.domain.entities import Currency, IncomeSource, PaymentMethod
from pennypincher.domain.errors import ConflictError, ValidationError, duplicate_reference
from pennypincher.domain.taxonomy import new_id
from pennypincher.utils.text import normalize_for_match


def _require(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise ValidationError(f"{label} is required")
    return value


class CurrencyService:
    """Service for managing a user's currencies."""

    def __init__(self, db: Database, user_id: str):
        self.db = db
        self.user_id = user_id

    def add_currency(self, code: str, name: Optional[str] = None, symbol: Optional[str] = None) -> Currency:
        """Add a currency. Codes are stored upper-case and must be unique.

        Raises:
            ValidationError: If the code is blank
            ConflictError: If the code already exists
        """
        code = _require(code, "Currency code").upper()
        if self.find_by_code(code) is not None:
            raise ConflictError(duplicate_reference("Currency", code))

        currency = Currency(
            id=new_id(),
            code=code,
            name=(name or code).strip(),
            symbol=(symbol or code).strip(),
        )
        self.db.add_currency(self.user_id, currency)
        return currency

    def list_currencies(self) -> list[Currency]:
        return self.db.list_currencies(self.user_id)

    def find_by_code(self, code: str) -> Optional[Currency]:
        key = normalize_for_match(code)
        return next(
            (c for c in self.list_currencies() if normalize_for_match(c.code) == key),
            None,
        )


class PaymentMethodService:
    """Service for managing a user's payment methods."""

    def __init__(self, db: Database, user_id: str):
        self.db = db
        self.user_id = user_id

    def add_payment_method(self, name: str) -> PaymentMethod:
        """Add a payment method with a case-insensitively unique name."""
        name = _require(name, "Payment method name")
        key = normalize_for_match(name)
        if any(normalize_for_match(m.name) == key for m in self.list_payment_methods()):
            raise ConflictError(duplicate_reference("Payment method", name))

        method = PaymentMethod(id=new_id(), name=name)
        self.db.add_payment_method(self.user_id, method)
        return method

    def list_payment_methods(self) -> list[PaymentMethod]:
        return self.db.list_payment_methods(self.user_id)


class IncomeSourceService:
    """Service for managing a user's income sources.

    Income sources are never created by imports; they have to be added here.
    """

    def __init__(self, db: Database, user_id: str):
        self.db = db
        self.user_id = user_id

    def add_income_source(self, name: str) -> IncomeSource:
        """Add an income source with a case-insensitively unique name."""
        name = _require(name, "Income source name")
        key = normalize_for_match(name)
        if any(normalize_for_match(s.name) == key for s in self.list_income_sources()):
            raise ConflictError(duplicate_reference("Income source", name))

        source = IncomeSource(id=new_id(), name=name)
        self.db.add_income_source(self.user_id, source)
        return source

    def list_income_sources(self) -> list[IncomeSource]:
        return self.db.list_income_sources(self.user_id)
