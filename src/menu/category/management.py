"""Category management — commands and handler."""

import json

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from menu.category.category import Category
from menu.domain import menu, logger


@menu.command(part_of="Category")
class AddCategory:
    name = String(required=True, max_length=100)


@menu.command(part_of="Category")
class RenameCategory:
    category_id = Identifier(required=True)
    name = String(required=True, max_length=100)


@menu.command(part_of="Category")
class RemoveCategory:
    """Take a category off the menu without touching its products."""

    category_id = Identifier(required=True)


@menu.command(part_of="Category")
class ReorderCategories:
    """Persist the order produced by the sortable list."""

    category_ids = Text(required=True)  # JSON: ordered list of category IDs


@menu.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(AddCategory)
    def add_category(self, command):
        repo = current_domain.repository_for(Category)
        category = Category.create(
            name=command.name,
            display_order=repo.next_display_order(),
        )
        repo.add(category)
        return str(category.id)

    @handle(RenameCategory)
    def rename_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.rename(command.name)
        repo.add(category)

    @handle(RemoveCategory)
    def remove_category(self, command):
        repo = current_domain.repository_for(Category)
        category = repo.get(command.category_id)
        category.remove()
        repo.add(category)

    @handle(ReorderCategories)
    def reorder_categories(self, command):
        category_ids = (
            json.loads(command.category_ids) if isinstance(command.category_ids, str) else command.category_ids
        )

        repo = current_domain.repository_for(Category)
        for position, category_id in enumerate(category_ids, start=1):
            category = repo.find(category_id)
            if category is None:
                logger.warning("Skipping unknown category in reorder", category_id=str(category_id))
                continue
            category.reorder(position)
            repo.add(category)
