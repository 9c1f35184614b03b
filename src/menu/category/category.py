"""Category aggregate — a named section of the menu."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Integer, String

from menu.category.events import CategoryAdded, CategoryRemoved, CategoryRenamed, CategoryReordered
from menu.domain import menu


@menu.aggregate
class Category:
    """A grouping of products shown as one section of the menu.

    Removing a category only deactivates it. Products that still reference it
    keep their ``category_id`` and are rendered under an unknown category.
    """

    name = String(required=True, max_length=100)
    display_order = Integer(default=0)
    is_active = Boolean(default=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, name, display_order):
        if not name or not name.strip():
            raise ValidationError({"name": ["Category name is required"]})

        now = datetime.now(UTC)
        category = cls(
            name=name.strip(),
            display_order=display_order,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryAdded(
                category_id=str(category.id),
                name=category.name,
                display_order=display_order,
            )
        )
        return category

    def rename(self, name):
        if not name or not name.strip():
            raise ValidationError({"name": ["Category name is required"]})

        self.name = name.strip()
        self.updated_at = datetime.now(UTC)

        self.raise_(CategoryRenamed(category_id=str(self.id), name=self.name))

    def reorder(self, new_display_order):
        previous_order = self.display_order
        if previous_order == new_display_order:
            return

        self.display_order = new_display_order
        self.updated_at = datetime.now(UTC)

        self.raise_(
            CategoryReordered(
                category_id=str(self.id),
                previous_order=previous_order,
                new_order=new_display_order,
            )
        )

    def remove(self):
        if not self.is_active:
            raise ValidationError({"status": ["Category is already removed"]})

        self.is_active = False
        now = datetime.now(UTC)
        self.updated_at = now

        self.raise_(CategoryRemoved(category_id=str(self.id), removed_at=now))
