"""Expense and income viewing and export commands."""

import click
from pennypincher.domain.category import CategoryService
from pennypincher.domain.export import ExpenseExportService
from pennypincher.domain.transaction import ExpenseService, IncomeService
from pennypincher.utils.date_parser import parse_date


def parse_date_option(ctx, value: str | None, label: str):
    """Parse an optional date option, exiting on invalid input."""
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


@click.group("expense")
def expense_group():
    """View and export expenses."""
    pass


@expense_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.pass_context
def list_expenses(ctx, start_date: str | None, end_date: str | None):
    """List expenses with optional date filters."""
    db = ctx.obj["db"]
    user_id = ctx.obj["user_id"]
    start = parse_date_option(ctx, start_date, "start date")
    end = parse_date_option(ctx, end_date, "end date")

    expenses = ExpenseService(db, user_id).list_expenses(start_date=start, end_date=end)
    if not expenses:
        click.echo("No expenses found.")
        return

    category_service = CategoryService(db, user_id)
    categories = category_service.list_categories()
    for expense in expenses:
        path = category_service.format_category_path(expense.category_id, categories)
        marker = " [subscription]" if expense.is_subscription else ""
        click.echo(
            f"{expense.date.isoformat()}  {expense.amount:>10.2f}  {path:<30}  "
            f"{expense.description}{marker}"
        )


@expense_group.command("export")
@click.argument("output_file", type=click.Path(dir_okay=False))
@click.pass_context
def export_expenses(ctx, output_file: str):
    """Export all expenses to an Excel file."""
    service = ExpenseExportService(ctx.obj["db"], ctx.obj["user_id"])
    count = service.export_expenses(output_file)
    if count == 0:
        click.echo("No expenses to export; wrote headers only.")
        return
    click.echo(f"Exported {count} expenses to {output_file}")


@click.group("income")
def income_group():
    """View incomes."""
    pass


@income_group.command("list")
@click.option("--start-date", help="Start date (YYYY-MM-DD)")
@click.option("--end-date", help="End date (YYYY-MM-DD)")
@click.pass_context
def list_incomes(ctx, start_date: str | None, end_date: str | None):
    """List incomes with optional date filters."""
    start = parse_date_option(ctx, start_date, "start date")
    end = parse_date_option(ctx, end_date, "end date")

    incomes = IncomeService(ctx.obj["db"], ctx.obj["user_id"]).list_incomes(start_date=start, end_date=end)
    if not incomes:
        click.echo("No incomes found.")
        return
    for income in incomes:
        click.echo(f"{income.date.isoformat()}  {income.amount:>10.2f}  {income.description}")


def register_commands(cli):
    """Register expense and income commands with main CLI."""
    cli.add_command(expense_group)
    cli.add_command(income_group)
