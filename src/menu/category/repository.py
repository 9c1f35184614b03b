"""Repository for the Category aggregate."""

from protean.exceptions import ObjectNotFoundError

from menu.category.category import Category
from menu.domain import menu


@menu.repository(part_of=Category)
class CategoryRepository:
    def active(self) -> list[Category]:
        """Active categories in display order."""
        return self._dao.query.filter(is_active=True).order_by("display_order").limit(None).all().items

    def find(self, category_id) -> Category | None:
        """Return the category, or None if it does not exist."""
        try:
            return self.get(category_id)
        except ObjectNotFoundError:
            return None

    def next_display_order(self) -> int:
        return max((c.display_order for c in self.active()), default=0) + 1
