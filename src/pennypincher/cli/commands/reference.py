"""Currency, payment method and income source commands."""

import click
from pennypincher.domain.errors import DomainError
from pennypincher.domain.lookups import CurrencyService, IncomeSourceService, PaymentMethodService
from pennypincher.cli.error_handling import handle_domain_error


@click.group("currency")
def currency_group():
    """Manage currencies."""
    pass


@currency_group.command("add")
@click.argument("code")
@click.option("--name", help="Display name (e.g., 'US Dollar')")
@click.option("--symbol", help="Symbol (e.g., '$')")
@click.pass_context
def add_currency(ctx, code: str, name: str | None, symbol: str | None):
    """Add a currency by its code (e.g., USD)."""
    service = CurrencyService(ctx.obj["db"], ctx.obj["user_id"])
    try:
        currency = service.add_currency(code, name=name, symbol=symbol)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Added currency {currency.code} ({currency.name}, {currency.symbol})")


@currency_group.command("list")
@click.pass_context
def list_currencies(ctx):
    """List currencies."""
    currencies = CurrencyService(ctx.obj["db"], ctx.obj["user_id"]).list_currencies()
    if not currencies:
        click.echo("No currencies found.")
        return
    for currency in currencies:
        click.echo(f"{currency.code:<6} {currency.symbol:<4} {currency.name}")


@click.group("payment-method")
def payment_method_group():
    """Manage payment methods."""
    pass


@payment_method_group.command("add")
@click.argument("name")
@click.pass_context
def add_payment_method(ctx, name: str):
    """Add a payment method."""
    service = PaymentMethodService(ctx.obj["db"], ctx.obj["user_id"])
    try:
        method = service.add_payment_method(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Added payment method '{method.name}'")


@payment_method_group.command("list")
@click.pass_context
def list_payment_methods(ctx):
    """List payment methods."""
    methods = PaymentMethodService(ctx.obj["db"], ctx.obj["user_id"]).list_payment_methods()
    if not methods:
        click.echo("No payment methods found.")
        return
    for method in methods:
        click.echo(method.name)


@click.group("income-source")
def income_source_group():
    """Manage income sources."""
    pass


@income_source_group.command("add")
@click.argument("name")
@click.pass_context
def add_income_source(ctx, name: str):
    """Add an income source."""
    service = IncomeSourceService(ctx.obj["db"], ctx.obj["user_id"])
    try:
        source = service.add_income_source(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Added income source '{source.name}'")


@income_source_group.command("list")
@click.pass_context
def list_income_sources(ctx):
    """List income sources."""
    sources = IncomeSourceService(ctx.obj["db"], ctx.obj["user_id"]).list_income_sources()
    if not sources:
        click.echo("No income sources found.")
        return
    for source in sources:
        click.echo(source.name)


def register_commands(cli):
    """Register reference data commands with main CLI."""
    cli.add_command(currency_group)
    cli.add_command(payment_method_group)
    cli.add_command(income_source_group)
