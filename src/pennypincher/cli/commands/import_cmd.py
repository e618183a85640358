"""Import commands."""

import click
from pennypincher.domain.errors import DomainError
from pennypincher.domain.file_import import DEFAULT_BASE_CURRENCY, FileImportService, ImportOutcome
from pennypincher.cli.error_handling import handle_domain_error

base_currency_option = click.option(
    "--base-currency",
    default=DEFAULT_BASE_CURRENCY,
    show_default=True,
    envvar="PENNYPINCHER_BASE_CURRENCY",
    help="Currency code used for rows without a known currency",
)
dry_run_option = click.option(
    "--dry-run", is_flag=True, help="Validate and map the file without saving anything"
)


def print_outcome(ctx, outcome: ImportOutcome, noun: str) -> None:
    """Print an import summary, then errors (stderr) and, if verbose, notices."""
    report = outcome.report

    if report.aborted:
        for error in report.errors:
            click.echo(f"Import failed: {error}", err=True)
        ctx.exit(1)

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {len(report.new_records)} {noun}")
    click.echo(f"  Skipped: {report.skipped_rows} rows")
    if noun == "expenses":
        click.echo(f"  Created categories: {report.created_category_count}")

    if report.errors:
        click.echo(f"  Errors: {len(report.errors)}")
        for error in report.errors:
            click.echo(f"    {error}", err=True)

    if ctx.obj.get("verbose") and report.info_messages:
        click.echo(f"  Info: {len(report.info_messages)}")
        for info in report.info_messages:
            click.echo(f"    {info}")

    persisted = outcome.persisted
    if not persisted.complete:
        click.echo(
            f"Error: import only partially saved ({persisted.categories_written} categories, "
            f"{persisted.records_written} {noun}): {persisted.error}",
            err=True,
        )
        ctx.exit(1)


@click.command("import-expenses")
@click.argument("import_file", type=click.Path(exists=True, dir_okay=False))
@base_currency_option
@dry_run_option
@click.pass_context
def import_expenses(ctx, import_file: str, base_currency: str, dry_run: bool):
    """Import expenses from a CSV or Excel file.

    Expected columns: Date, Amount, Category (required) and optionally
    CategoryGroup, Currency, Account, Note, IsSubscription, NextDueDate.
    Missing categories are created.
    """
    service = FileImportService(ctx.obj["db"], ctx.obj["user_id"], base_currency)
    try:
        outcome = service.import_expenses(import_file, dry_run=dry_run)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)
        return
    print_outcome(ctx, outcome, "expenses")
    if dry_run:
        click.echo("Dry run: nothing was saved.")


@click.command("import-incomes")
@click.argument("import_file", type=click.Path(exists=True, dir_okay=False))
@base_currency_option
@dry_run_option
@click.pass_context
def import_incomes(ctx, import_file: str, base_currency: str, dry_run: bool):
    """Import incomes from a CSV or Excel file.

    Expected columns: Date, Description, Amount, IncomeSourceName (required)
    and optionally CurrencyCode. Income sources must already exist.
    """
    service = FileImportService(ctx.obj["db"], ctx.obj["user_id"], base_currency)
    try:
        outcome = service.import_incomes(import_file, dry_run=dry_run)
    except (DomainError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)
        return
    print_outcome(ctx, outcome, "incomes")
    if dry_run:
        click.echo("Dry run: nothing was saved.")


def register_commands(cli):
    """Register import commands with main CLI."""
    cli.add_command(import_expenses)
    cli.add_command(import_incomes)
