"""Main CLI entry point."""

import click
from pennypincher.database.factories import create_sqlite_database
from pennypincher.logging_config import setup_logging

# Import and register all commands at module level
from pennypincher.cli.commands import (
    import_cmd,
    category,
    reference,
    expense,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PENNYPINCHER_DB_PATH environment variable)",
    envvar="PENNYPINCHER_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    default="default",
    show_default=True,
    help="User whose data to work with",
    envvar="PENNYPINCHER_USER",
)
@click.option("--verbose", "-v", is_flag=True, help="Show informational import messages and logs")
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str, verbose: bool):
    """PennyPincher - Personal finance tracker.

    Record expenses and income, organize them into categories, and bulk
    import them from CSV or Excel files.
    """
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["verbose"] = verbose
    ctx.obj["user_id"] = user_id

    # No database for --help
    if ctx.invoked_subcommand is None:
        return
    db = create_sqlite_database(database_path=db_path)
    db.connect()
    db.initialize_schema()
    ctx.call_on_close(db.disconnect)
    ctx.obj["db"] = db


# Register all commands
import_cmd.register_commands(cli)
category.register_commands(cli)
reference.register_commands(cli)
expense.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
