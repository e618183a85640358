"""Category domain service."""

from typing import Any, Optional

from pennypincher.database.base import Database
from pennypincher.domain.entities import Category
from pennypincher.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
    duplicate_category,
)
from pennypincher.domain.taxonomy import CategoryTaxonomy, new_id
from pennypincher.utils.text import normalize_for_match

UNKNOWN_CATEGORY = "Unknown Category"


class CategoryService:
    """Service for managing a user's categories."""

    def __init__(self, db: Database, user_id: str):
        """Initialize category service.

        Args:
            db: Database instance
            user_id: Owner of the categories
        """
        self.db = db
        self.user_id = user_id

    def create_category(self, name: str, parent_id: Optional[str] = None) -> Category:
        """Create a category.

        Args:
            name: Category name
            parent_id: Optional main category ID; sub-categories cannot be parents

        Returns:
            The created category

        Raises:
            ValidationError: If the name is blank or the parent is a sub-category
            NotFoundError: If the parent doesn't exist
            ConflictError: If the name is already used within the same parent
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")

        taxonomy = CategoryTaxonomy(self.list_categories())
        parent = None
        if parent_id is not None:
            parent = taxonomy.get(parent_id)
            if parent is None:
                raise NotFoundError(category_not_found(parent_id))

        if parent is None:
            existing = taxonomy.find_main(name)
        else:
            existing = taxonomy.find_sub(name, parent.id)
        if existing is not None:
            raise ConflictError(duplicate_category(name, parent.name if parent else None))

        category = taxonomy.add(Category(id=new_id(), name=name, parent_id=parent_id))
        self.db.add_category(self.user_id, category)
        return category

    def get_category(self, category_id: str) -> Optional[Category]:
        """Get category by ID."""
        return self.db.get_category(self.user_id, category_id)

    def find_main_category(self, name: str) -> Optional[Category]:
        """Find a main category by case-insensitive name."""
        return CategoryTaxonomy(self.list_categories()).find_main(name)

    def list_categories(self) -> list[Category]:
        """List all categories."""
        return self.db.list_categories(self.user_id)

    def get_main_categories(self) -> list[Category]:
        """List top-level categories sorted by name."""
        return sorted(
            (c for c in self.list_categories() if c.parent_id is None),
            key=lambda c: normalize_for_match(c.name),
        )

    def get_sub_categories(self, parent_id: str) -> list[Category]:
        """List the children of a main category sorted by name."""
        return sorted(
            (c for c in self.list_categories() if c.parent_id == parent_id),
            key=lambda c: normalize_for_match(c.name),
        )

    def get_category_tree(self) -> list[dict[str, Any]]:
        """Get full category tree.

        Returns:
            List of main categories as dicts with nested 'children' lists
        """
        categories = self.list_categories()
        tree = []
        for main in sorted(
            (c for c in categories if c.parent_id is None),
            key=lambda c: normalize_for_match(c.name),
        ):
            children = sorted(
                (c for c in categories if c.parent_id == main.id),
                key=lambda c: normalize_for_match(c.name),
            )
            tree.append(
                {
                    "id": main.id,
                    "name": main.name,
                    "parent_id": None,
                    "children": [
                        {"id": c.id, "name": c.name, "parent_id": c.parent_id, "children": []}
                        for c in children
                    ],
                }
            )
        return tree

    def format_category_path(
        self, category_id: str, categories: Optional[list[Category]] = None
    ) -> str:
        """Get full path for a category.

        Args:
            category_id: Category ID
            categories: Already loaded categories, to avoid a lookup per call

        Returns:
            Full category path (e.g., "Food > Groceries"), or "Unknown Category"
        """
        taxonomy = CategoryTaxonomy(categories if categories is not None else self.list_categories())
        path = taxonomy.path(category_id)
        if not path:
            return UNKNOWN_CATEGORY
        return " > ".join(c.name for c in path)
