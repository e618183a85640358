"""Tests for the import CLI commands."""

import pytest

from pennypincher.cli.main import cli


@pytest.fixture
def base_args(temp_db, user_id):
    return ["--db-path", temp_db.database_path, "--user", user_id]


def test_import_expenses_command(cli_runner, base_args, temp_db, user_id, fixtures_dir, sample_currencies):
    """The summary reports imported, skipped and created counts."""
    result = cli_runner.invoke(
        cli, base_args + ["import-expenses", str(fixtures_dir / "expenses.csv")]
    )

    assert result.exit_code == 0, result.output
    assert "Import complete:" in result.output
    assert "Imported: 5 expenses" in result.output
    assert "Skipped: 2 rows" in result.output
    assert "Created categories: 8" in result.output
    assert "Errors: 3" in result.output
    assert "Row 6:" in result.output
    assert "Subscription flag ignored" in result.output

    temp_db.disconnect()
    assert len(temp_db.list_expenses(user_id)) == 5


def test_import_expenses_verbose_shows_info(cli_runner, base_args, fixtures_dir, sample_currencies):
    """Informational messages are only printed with --verbose."""
    path = str(fixtures_dir / "expenses.csv")

    quiet = cli_runner.invoke(cli, base_args + ["import-expenses", path, "--dry-run"])
    assert "Mapping category group 'Car' to 'Transport'." not in quiet.output

    verbose = cli_runner.invoke(cli, base_args + ["--verbose", "import-expenses", path, "--dry-run"])
    assert verbose.exit_code == 0, verbose.output
    assert "Mapping category group 'Car' to 'Transport'." in verbose.output
    assert "Currency code 'XYZ' not found" in verbose.output


def test_import_expenses_dry_run(cli_runner, base_args, temp_db, user_id, fixtures_dir, sample_currencies):
    """--dry-run reports but saves nothing."""
    result = cli_runner.invoke(
        cli, base_args + ["import-expenses", str(fixtures_dir / "expenses.csv"), "--dry-run"]
    )

    assert result.exit_code == 0, result.output
    assert "Imported: 5 expenses" in result.output
    assert "Dry run: nothing was saved." in result.output
    temp_db.disconnect()
    assert temp_db.list_expenses(user_id) == []


def test_import_missing_columns_fails(cli_runner, base_args, fixtures_dir, sample_currencies):
    """A file without required columns exits with an error."""
    result = cli_runner.invoke(
        cli,
        base_args + ["import-expenses", str(fixtures_dir / "expenses_missing_amount_column.csv")],
    )

    assert result.exit_code == 1
    assert "Import failed: Missing essential columns" in result.output
    assert "Import complete" not in result.output


def test_import_without_base_currency_fails(cli_runner, base_args, fixtures_dir):
    """The base currency must be set up first."""
    result = cli_runner.invoke(
        cli, base_args + ["import-expenses", str(fixtures_dir / "expenses.csv")]
    )

    assert result.exit_code == 1
    assert "Base currency 'USD' not found" in result.output


def test_import_base_currency_option(cli_runner, base_args, fixtures_dir, currency_service):
    """--base-currency selects the fallback currency."""
    currency_service.add_currency("EUR")
    result = cli_runner.invoke(
        cli,
        base_args + ["import-expenses", str(fixtures_dir / "expenses.csv"), "--base-currency", "eur"],
    )
    assert result.exit_code == 0, result.output


def test_import_base_currency_from_env(cli_runner, base_args, fixtures_dir, currency_service):
    """PENNYPINCHER_BASE_CURRENCY sets the default base currency."""
    currency_service.add_currency("GBP")
    result = cli_runner.invoke(
        cli,
        base_args + ["import-expenses", str(fixtures_dir / "expenses.csv"), "--dry-run"],
        env={"PENNYPINCHER_BASE_CURRENCY": "GBP"},
    )
    assert result.exit_code == 0, result.output


def test_import_unsupported_file(cli_runner, base_args, tmp_path, sample_currencies):
    """Unsupported file types are rejected with a message."""
    path = tmp_path / "expenses.pdf"
    path.write_bytes(b"%PDF")

    result = cli_runner.invoke(cli, base_args + ["import-expenses", str(path)])

    assert result.exit_code == 1
    assert "Please use CSV or Excel" in result.output


def test_import_missing_file(cli_runner, base_args, tmp_path):
    """Click rejects paths that don't exist."""
    result = cli_runner.invoke(cli, base_args + ["import-expenses", str(tmp_path / "nope.csv")])
    assert result.exit_code != 0


def test_import_incomes_command(
    cli_runner, base_args, temp_db, user_id, fixtures_dir, sample_currencies, sample_income_sources
):
    """Incomes import against existing sources; categories are not mentioned."""
    result = cli_runner.invoke(cli, base_args + ["import-incomes", str(fixtures_dir / "incomes.csv")])

    assert result.exit_code == 0, result.output
    assert "Imported: 2 incomes" in result.output
    assert "Skipped: 3 rows" in result.output
    assert "Created categories" not in result.output
    assert "Income source 'Lottery' not found" in result.output

    temp_db.disconnect()
    assert len(temp_db.list_incomes(user_id)) == 2


def test_import_is_scoped_to_user(cli_runner, temp_db, fixtures_dir, sample_currencies, user_id):
    """--user selects whose data the import writes to."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path", temp_db.database_path, "--user", "other-user",
            "import-expenses", str(fixtures_dir / "expenses.csv"),
        ],
    )

    # other-user has no currencies yet
    assert result.exit_code == 1
    assert "Base currency 'USD' not found" in result.output


def test_import_messages_are_printed_once(cli_runner, base_args, fixtures_dir, sample_currencies):
    """Row errors and notices reach the console a single time."""
    path = str(fixtures_dir / "expenses.csv")

    result = cli_runner.invoke(cli, base_args + ["import-expenses", path, "--dry-run"])
    assert result.exit_code == 0, result.output
    assert result.output.count("Row 6:") == 1
    assert result.output.count("Subscription flag ignored") == 1

    verbose = cli_runner.invoke(cli, base_args + ["--verbose", "import-expenses", path, "--dry-run"])
    assert verbose.output.count("Row 6:") == 1
    assert verbose.output.count("Mapping category group 'Car' to 'Transport'.") == 1


def test_import_abort_is_printed_once(cli_runner, base_args, fixtures_dir, sample_currencies):
    """A missing-column failure is reported once."""
    result = cli_runner.invoke(
        cli,
        base_args + ["import-expenses", str(fixtures_dir / "expenses_missing_amount_column.csv")],
    )
    assert result.exit_code == 1
    assert result.output.count("Missing essential columns") == 1
