"""Shared pytest fixtures for pennypincher tests."""

import itertools
import tempfile
import os
from pathlib import Path
import pytest

from pennypincher.database.factories import create_sqlite_database
from pennypincher.domain.category import CategoryService
from pennypincher.domain.entities import Category, Currency, IncomeSource, PaymentMethod
from pennypincher.domain.lookups import CurrencyService, IncomeSourceService, PaymentMethodService

TEST_USER = "test-user"


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def user_id():
    """Return the user id that owns all test data."""
    return TEST_USER


@pytest.fixture
def category_service(temp_db, user_id):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db, user_id)


@pytest.fixture
def currency_service(temp_db, user_id):
    """Create a CurrencyService with a temporary database."""
    return CurrencyService(temp_db, user_id)


@pytest.fixture
def payment_method_service(temp_db, user_id):
    """Create a PaymentMethodService with a temporary database."""
    return PaymentMethodService(temp_db, user_id)


@pytest.fixture
def income_source_service(temp_db, user_id):
    """Create an IncomeSourceService with a temporary database."""
    return IncomeSourceService(temp_db, user_id)


@pytest.fixture
def sample_currencies(currency_service):
    """Add USD (base) and EUR."""
    return {
        "USD": currency_service.add_currency("USD", name="US Dollar", symbol="$"),
        "EUR": currency_service.add_currency("EUR", name="Euro", symbol="€"),
    }


@pytest.fixture
def sample_payment_methods(payment_method_service):
    """Add two payment methods."""
    return {
        "Credit Card": payment_method_service.add_payment_method("Credit Card"),
        "Cash": payment_method_service.add_payment_method("Cash"),
    }


@pytest.fixture
def sample_income_sources(income_source_service):
    """Add two income sources."""
    return {
        "Salary": income_source_service.add_income_source("Salary"),
        "Freelance": income_source_service.add_income_source("Freelance"),
    }


@pytest.fixture
def id_factory():
    """Deterministic id factory: id1, id2, ..."""
    counter = itertools.count(1)
    return lambda: f"id{next(counter)}"


@pytest.fixture
def currencies():
    """In-memory currencies for import core tests."""
    return [
        Currency(id="cur1", code="USD", name="US Dollar", symbol="$"),
        Currency(id="cur2", code="EUR", name="Euro", symbol="€"),
    ]


@pytest.fixture
def payment_methods():
    """In-memory payment methods for import core tests."""
    return [
        PaymentMethod(id="pm1", name="Credit Card"),
        PaymentMethod(id="pm2", name="Cash"),
    ]


@pytest.fixture
def income_sources():
    """In-memory income sources for import core tests."""
    return [
        IncomeSource(id="src1", name="Salary"),
        IncomeSource(id="src2", name="Freelance"),
    ]


@pytest.fixture
def existing_categories():
    """In-memory taxonomy with one main category and one child."""
    return [
        Category(id="cat-food", name="Food"),
        Category(id="cat-food-restaurants", name="Restaurants", parent_id="cat-food"),
        Category(id="cat-transport", name="Transport"),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
