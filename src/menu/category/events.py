"""Domain events for the Category aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from menu.domain import menu


@menu.event(part_of="Category")
class CategoryAdded:
    """A new category was added to the menu."""

    __version__ = 1

    category_id = Identifier(required=True)
    name = String(required=True, max_length=100)
    display_order = Integer(required=True)


@menu.event(part_of="Category")
class CategoryRenamed:
    __version__ = 1

    category_id = Identifier(required=True)
    name = String(required=True, max_length=100)


@menu.event(part_of="Category")
class CategoryReordered:
    __version__ = 1

    category_id = Identifier(required=True)
    previous_order = Integer()
    new_order = Integer(required=True)


@menu.event(part_of="Category")
class CategoryRemoved:
    """A category was taken off the menu. Its products are left untouched."""

    __version__ = 1

    category_id = Identifier(required=True)
    removed_at = DateTime(required=True)
