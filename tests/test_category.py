"""Tests for category management."""

import pytest

from pennypincher.cli.main import cli
from pennypincher.domain.category import UNKNOWN_CATEGORY
from pennypincher.domain.errors import ConflictError, NotFoundError, ValidationError


def test_create_main_category(category_service):
    """Test creating a top-level category."""
    category = category_service.create_category("Food")
    assert category.name == "Food"
    assert category.parent_id is None
    assert category_service.get_category(category.id) == category


def test_create_sub_category(category_service):
    """Test creating a category under a main category."""
    food = category_service.create_category("Food")
    fruit = category_service.create_category("Fruit", parent_id=food.id)
    assert fruit.parent_id == food.id
    assert category_service.get_sub_categories(food.id) == [fruit]
    assert category_service.get_main_categories() == [food]


def test_create_category_too_deep(category_service):
    """Sub-categories cannot have children."""
    food = category_service.create_category("Food")
    fruit = category_service.create_category("Fruit", parent_id=food.id)
    with pytest.raises(ValidationError, match="sub-categories cannot have children"):
        category_service.create_category("Apples", parent_id=fruit.id)


def test_create_category_unknown_parent(category_service):
    """Parents must exist."""
    with pytest.raises(NotFoundError):
        category_service.create_category("Fruit", parent_id="missing")


def test_create_duplicate_category(category_service):
    """Names are unique per parent, ignoring case."""
    food = category_service.create_category("Food")
    with pytest.raises(ConflictError):
        category_service.create_category("FOOD")

    category_service.create_category("Other", parent_id=food.id)
    with pytest.raises(ConflictError, match="under 'Food'"):
        category_service.create_category("other", parent_id=food.id)

    # Same name under a different parent is fine
    home = category_service.create_category("Home")
    category_service.create_category("Other", parent_id=home.id)


def test_create_blank_category(category_service):
    """Names are required."""
    with pytest.raises(ValidationError):
        category_service.create_category("   ")


def test_find_main_category(category_service):
    """Main categories are found by case-insensitive name."""
    food = category_service.create_category("Food")
    category_service.create_category("Snacks", parent_id=food.id)
    assert category_service.find_main_category("food") == food
    assert category_service.find_main_category("snacks") is None


def test_category_tree(category_service):
    """The tree nests children under their main category, sorted by name."""
    home = category_service.create_category("Home")
    food = category_service.create_category("Food")
    category_service.create_category("Snacks", parent_id=food.id)
    category_service.create_category("Fruit", parent_id=food.id)

    tree = category_service.get_category_tree()

    assert [node["name"] for node in tree] == ["Food", "Home"]
    assert [child["name"] for child in tree[0]["children"]] == ["Fruit", "Snacks"]
    assert tree[1]["id"] == home.id
    assert tree[1]["children"] == []


def test_format_category_path(category_service):
    """Paths join the hierarchy with ' > '."""
    food = category_service.create_category("Food")
    fruit = category_service.create_category("Fruit", parent_id=food.id)
    assert category_service.format_category_path(fruit.id) == "Food > Fruit"
    assert category_service.format_category_path(food.id) == "Food"
    assert category_service.format_category_path("missing") == UNKNOWN_CATEGORY


def test_category_cli(cli_runner, temp_db, user_id):
    """Test creating and listing categories from the command line."""
    base = ["--db-path", temp_db.database_path, "--user", user_id]

    result = cli_runner.invoke(cli, base + ["category", "list"])
    assert result.exit_code == 0
    assert "No categories found" in result.output

    result = cli_runner.invoke(cli, base + ["category", "create", "Food"])
    assert result.exit_code == 0, result.output
    assert "Created category 'Food'" in result.output

    result = cli_runner.invoke(cli, base + ["category", "create", "Fruit", "--parent", "food"])
    assert result.exit_code == 0, result.output
    assert "under 'food'" in result.output

    result = cli_runner.invoke(cli, base + ["category", "list"])
    assert "Food (ID:" in result.output
    assert "  Fruit (ID:" in result.output


def test_category_cli_errors(cli_runner, temp_db, user_id):
    """Unknown parents and duplicates exit with an error."""
    base = ["--db-path", temp_db.database_path, "--user", user_id]

    result = cli_runner.invoke(cli, base + ["category", "create", "Fruit", "--parent", "Nope"])
    assert result.exit_code == 1
    assert "Main category 'Nope' not found" in result.output

    cli_runner.invoke(cli, base + ["category", "create", "Food"])
    result = cli_runner.invoke(cli, base + ["category", "create", "food"])
    assert result.exit_code == 1
    assert "already exists" in result.output
