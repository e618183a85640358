"""Shared domain error messages and error types."""

from typing import Iterable

from pennypincher.domain.entities import ImportMessage


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class UnreadableFileError(DomainError):
    """An import file could not be decoded into rows."""


class PersistenceError(DomainError):
    """A write to the backing store failed."""


class MissingColumnsError(ValidationError):
    """The header row lacks one or more required columns."""

    def __init__(self, missing: Iterable[str], message: str):
        super().__init__(message)
        self.missing = list(missing)


class RowRejected(DomainError):
    """A data row cannot be imported; carries the diagnostic to report."""

    def __init__(self, message: ImportMessage):
        super().__init__(str(message))
        self.message = message


def category_not_found(category_id: str) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def category_too_deep(name: str, parent_name: str) -> str:
    """Return message when a category would be nested below a sub-category."""
    return (
        f"Cannot create '{name}' under '{parent_name}': "
        "sub-categories cannot have children"
    )


def duplicate_category(name: str, parent_name: str | None) -> str:
    """Return message for a category name already used within its parent."""
    if parent_name is None:
        return f"Main category '{name}' already exists"
    return f"Category '{name}' already exists under '{parent_name}'"


def duplicate_reference(kind: str, name: str) -> str:
    """Return message for a duplicate currency, payment method, or income source."""
    return f"{kind} '{name}' already exists"


def base_currency_not_found(code: str) -> str:
    """Return message when the configured base currency is not set up."""
    return (
        f"Base currency '{code}' not found. "
        f"Add it first with 'pennypincher currency add {code}'."
    )


def unsupported_file_type(suffix: str) -> str:
    """Return message for an import file with an unknown extension."""
    return f"Unsupported file type '{suffix}'. Please use CSV or Excel."
