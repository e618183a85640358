"""Batch-local category taxonomy and category name reconciliation.

An import batch works against its own ``CategoryTaxonomy``: a copy of the
user's categories that grows as rows create new ones. Nothing here touches
storage; the caller persists ``taxonomy.created`` once the batch is mapped.
"""

import uuid
from dataclasses import dataclass
from typing import Callable, Iterable, Mapping, Optional

from pennypincher.domain.entities import Category
from pennypincher.domain.errors import ValidationError, category_not_found, category_too_deep
from pennypincher.utils.text import normalize_for_match, to_display_case

# Main category names from import files that map onto a differently named
# category in the app. Keys are normalized.
CATEGORY_ALIASES: dict[str, str] = {
    "car": "Transport",
}


def new_id() -> str:
    """Return a fresh unique record id."""
    return uuid.uuid4().hex


class CategoryTaxonomy:
    """Mutable view of a user's categories for the duration of one batch."""

    def __init__(self, categories: Iterable[Category] = ()):
        self._categories: list[Category] = list(categories)
        self._by_id: dict[str, Category] = {c.id: c for c in self._categories}
        self._created: list[Category] = []

    @property
    def categories(self) -> list[Category]:
        return list(self._categories)

    @property
    def created(self) -> list[Category]:
        """Categories added during this batch, in creation order."""
        return list(self._created)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id

    def get(self, category_id: str) -> Optional[Category]:
        return self._by_id.get(category_id)

    def find_main(self, name: str) -> Optional[Category]:
        """Find a top-level category by case-insensitive name."""
        key = normalize_for_match(name)
        for category in self._categories:
            if category.parent_id is None and normalize_for_match(category.name) == key:
                return category
        return None

    def find_sub(self, name: str, parent_id: str) -> Optional[Category]:
        """Find a direct child of ``parent_id`` by case-insensitive name."""
        key = normalize_for_match(name)
        for category in self._categories:
            if category.parent_id == parent_id and normalize_for_match(category.name) == key:
                return category
        return None

    def add(self, category: Category) -> Category:
        """Append a new category, enforcing the two-level hierarchy.

        Raises:
            ValidationError: If the parent is unknown or is itself a sub-category
        """
        if category.id in self._by_id:
            raise ValidationError(f"Category id {category.id} is already taken")
        if category.parent_id is not None:
            parent = self._by_id.get(category.parent_id)
            if parent is None:
                raise ValidationError(category_not_found(category.parent_id))
            if parent.parent_id is not None:
                raise ValidationError(category_too_deep(category.name, parent.name))

        self._categories.append(category)
        self._by_id[category.id] = category
        self._created.append(category)
        return category

    def path(self, category_id: str) -> list[Category]:
        """Return the chain of categories from the root down to ``category_id``."""
        chain: list[Category] = []
        current = self._by_id.get(category_id)
        while current is not None and current not in chain:
            chain.insert(0, current)
            current = self._by_id.get(current.parent_id) if current.parent_id else None
        return chain


@dataclass(frozen=True)
class CategoryResolution:
    """Outcome of reconciling one (main, sub) name pair."""

    category_id: str
    display_name: str
    created: tuple[Category, ...] = ()
    alias_from: Optional[str] = None
    alias_to: Optional[str] = None


class CategoryReconciler:
    """Find or create categories named in import rows."""

    def __init__(
        self,
        taxonomy: CategoryTaxonomy,
        aliases: Optional[Mapping[str, str]] = None,
        id_factory: Callable[[], str] = new_id,
    ):
        """Initialize reconciler.

        Args:
            taxonomy: Batch-local taxonomy that receives created categories
            aliases: Main category aliases (normalized name -> app name);
                defaults to CATEGORY_ALIASES
            id_factory: Callable producing ids for new categories
        """
        self.taxonomy = taxonomy
        source = CATEGORY_ALIASES if aliases is None else aliases
        self.aliases = {normalize_for_match(k): v for k, v in source.items()}
        self.id_factory = id_factory

    def apply_alias(self, main_name: str) -> str:
        return self.aliases.get(normalize_for_match(main_name), main_name)

    def resolve(self, main_name: Optional[str], sub_name: str) -> CategoryResolution:
        """Resolve a (main, sub) pair to a leaf category id.

        Without a main name the sub name is treated as a top-level category.

        Raises:
            ValidationError: If ``sub_name`` is blank
        """
        sub_display = to_display_case(sub_name)
        if not sub_display:
            raise ValidationError("Category name is required")

        main_display = to_display_case(main_name)
        alias_from = alias_to = None
        if main_display:
            aliased = self.apply_alias(main_display)
            if aliased != main_display:
                alias_from, alias_to = main_display, aliased
                main_display = aliased

        created: list[Category] = []

        if not main_display:
            leaf = self._find_or_create(sub_display, None, created)
        else:
            main = self._find_or_create(main_display, None, created)
            leaf = self._find_or_create(sub_display, main, created)

        return CategoryResolution(
            category_id=leaf.id,
            display_name=leaf.name,
            created=tuple(created),
            alias_from=alias_from,
            alias_to=alias_to,
        )

    def _find_or_create(
        self, name: str, parent: Optional[Category], created: list[Category]
    ) -> Category:
        if parent is None:
            existing = self.taxonomy.find_main(name)
        else:
            existing = self.taxonomy.find_sub(name, parent.id)
        if existing is not None:
            return existing

        category = Category(
            id=self.id_factory(),
            name=name,
            parent_id=parent.id if parent is not None else None,
        )
        self.taxonomy.add(category)
        created.append(category)
        return category
