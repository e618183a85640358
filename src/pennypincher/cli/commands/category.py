"""Category management commands."""

import click
from pennypincher.domain.category import CategoryService
from pennypincher.domain.errors import DomainError, NotFoundError
from pennypincher.cli.error_handling import handle_domain_error


def print_category_tree(categories: list[dict], indent: int = 0) -> None:
    """Recursively print category tree."""
    for cat in categories:
        prefix = "  " * indent
        click.echo(f"{prefix}{cat['name']} (ID: {cat['id']})")
        if cat.get("children"):
            print_category_tree(cat["children"], indent + 1)


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories in tree format."""
    service = CategoryService(ctx.obj["db"], ctx.obj["user_id"])

    tree = service.get_category_tree()
    if not tree:
        click.echo("No categories found. Create one with 'category create' or import expenses.")
        return

    click.echo("\nCategories:")
    print_category_tree(tree)


@category_group.command("create")
@click.argument("name")
@click.option("--parent", help="Main category name (e.g., 'Groceries')")
@click.pass_context
def create_category(ctx, name: str, parent: str | None):
    """Create a new category."""
    service = CategoryService(ctx.obj["db"], ctx.obj["user_id"])

    try:
        parent_id = None
        if parent:
            parent_category = service.find_main_category(parent)
            if parent_category is None:
                raise NotFoundError(f"Main category '{parent}' not found")
            parent_id = parent_category.id
        category = service.create_category(name=name, parent_id=parent_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    parent_str = f" under '{parent}'" if parent else ""
    click.echo(f"Created category '{category.name}'{parent_str} (ID: {category.id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
